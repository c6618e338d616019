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

from __future__ import annotations

from typing import Any, cast

from msgpack import Unpacker, UnpackException, packb

from mock_os_libs.consts import MAX_PACKAGE_SIZE, STR_ENCODING_ERRORS

#
# ------ msgpack utils ------ #
#


def pack_obj(_in: Any, *, max_size: int = MAX_PACKAGE_SIZE) -> bytes:
    _res = cast(bytes, packb(_in, unicode_errors=STR_ENCODING_ERRORS))
    if len(_res) > max_size:
        raise ValueError(
            f"packed message bytes exceeds maximum len: {len(_res)=} > {max_size=}"
        )
    return _res


def unpack_dict(_in: bytes, *, max_size: int = MAX_PACKAGE_SIZE) -> dict[str, Any]:
    """Unpack exactly one msgpack map from <_in>.

    Raises:
        ValueError on malformed input, on trailing bytes after the map,
            or if the unpacked object is not a map.
    """
    # NOTE: each element takes at least one byte, limit the containers' len
    #   with the input size to prevent huge pre-allocation from malformed input.
    _limit = min(len(_in), max_size)
    _unpacker = Unpacker(
        max_buffer_size=max_size,
        max_str_len=_limit,
        max_bin_len=_limit,
        max_array_len=_limit,
        max_map_len=_limit // 2,
        max_ext_len=_limit,
        unicode_errors=STR_ENCODING_ERRORS,
    )
    try:
        _unpacker.feed(_in)  # feed all the data into the internal buffer
        _unpacked = _unpacker.unpack()
    except UnpackException as e:
        raise ValueError(f"failed to unpack: {e!r}") from e

    if (_consumed := _unpacker.tell()) != len(_in):
        raise ValueError(f"extra data after the packed map: {_consumed=}, {len(_in)=}")
    if not isinstance(_unpacked, dict):
        raise ValueError(f"expect a packed map, get {type(_unpacked)=}")
    return _unpacked
