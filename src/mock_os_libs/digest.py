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
"""Digest calculation of mock OS package."""

from __future__ import annotations

import hashlib

from .consts import DIGEST_ALG, STR_ENCODING, STR_ENCODING_ERRORS

INCOMPATIBLE_TRUE = b"\x01"
INCOMPATIBLE_FALSE = b"\x00"


def _str_bytes(_in: str) -> bytes:
    return _in.encode(STR_ENCODING, STR_ENCODING_ERRORS)


def calc_digest(
    version: str,
    cookie: str,
    padding: bytes,
    incompatible: bool,
    activation_fail_message: str,
) -> bytes:
    """Calculate the digest over the package fields.

    The digest is taken over the concatenation of, in order:
    1. version,
    2. cookie,
    3. padding,
    4. one byte, 0x01 if incompatible else 0x00,
    5. activation fail message.

    NOTE that this digest is only for detecting corruption and mismatched fields,
        it is not meant to resist deliberate forgery.
    """
    _hasher = hashlib.new(DIGEST_ALG, usedforsecurity=False)
    _hasher.update(_str_bytes(version))
    _hasher.update(_str_bytes(cookie))
    _hasher.update(padding)
    _hasher.update(INCOMPATIBLE_TRUE if incompatible else INCOMPATIBLE_FALSE)
    _hasher.update(_str_bytes(activation_fail_message))
    return _hasher.digest()
