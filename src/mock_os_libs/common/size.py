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
"""Parse human readable size expression like "10MB" into bytes count."""

from __future__ import annotations

import re
from typing import Union

from pydantic import ByteSize, TypeAdapter, ValidationError

from mock_os_libs.errors import SizeParseError

_SIZE_EXPR = re.compile(r"^\s*(?P<scalar>\d+(?:\.\d+)?|\.\d+)\s*(?P<unit>[a-zA-Z]*)\s*$")

# NOTE: follow the JEDEC convention, K/KB/M/MB/... are all 1024-based.
_JEDEC_UNITS = {
    **{_prefix: f"{_prefix}ib" for _prefix in "kmgtpe"},
    **{f"{_prefix}b": f"{_prefix}ib" for _prefix in "kmgtpe"},
}

_byte_size_adapter = TypeAdapter(ByteSize)


def parse_size(size: Union[str, int]) -> int:
    """Parse <size> into non-negative bytes count.

    Raises:
        SizeParseError if <size> is not a valid size expression.
    """
    if isinstance(size, bool):
        raise SizeParseError(f"invalid size: {size!r}")
    if isinstance(size, int):
        if size < 0:
            raise SizeParseError(f"negative size: {size}")
        return size

    if not isinstance(size, str) or not (_ma := _SIZE_EXPR.match(size)):
        raise SizeParseError(f"malformed size expression: {size!r}")

    _scalar, _unit = _ma.group("scalar"), _ma.group("unit").lower()
    _unit = _JEDEC_UNITS.get(_unit, _unit)
    try:
        return int(_byte_size_adapter.validate_python(f"{_scalar}{_unit}"))
    except ValidationError as e:
        raise SizeParseError(f"invalid size expression {size!r}: {e}") from e
