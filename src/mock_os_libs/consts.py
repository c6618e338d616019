# Copyright 2025 TIER IV, INC. All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Consts related to mock OS package."""

COOKIE = "cookiestring"

DIGEST_ALG = "md5"
DIGEST_SIZE = 16

# NOTE: string fields are converted to bytes with this error handler everywhere
#   (digest calculation, encoding and decoding), so that arbitrary bytes inside
#   a string field survive a decode and are caught by the digest check.
STR_ENCODING = "utf-8"
STR_ENCODING_ERRORS = "surrogateescape"

MAX_PACKAGE_SIZE = 1024**3  # 1GiB
DEFAULT_PACKAGE_SIZE = "10MB"

INCOMPATIBLE_DETAIL = "Unsupported OS Version"
