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
"""Common shared helpers: the wire codec, file IO and size parsing."""

from .io import remove_file, write_file_exclusive
from .msgpack_utils import pack_obj, unpack_dict
from .size import parse_size

__all__ = [
    "pack_obj",
    "parse_size",
    "remove_file",
    "unpack_dict",
    "write_file_exclusive",
]
