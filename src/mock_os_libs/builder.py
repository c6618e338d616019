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
"""Build new mock OS package."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Union

from .common.io import StrOrPath, write_file_exclusive
from .common.size import parse_size
from .consts import COOKIE, DEFAULT_PACKAGE_SIZE, MAX_PACKAGE_SIZE
from .errors import AlreadyExists, EncodeError
from .package import MockOS, MockOSFields

logger = logging.getLogger(__name__)


def new_os(
    version: str,
    size: Union[str, int],
    activation_fail_message: str = "",
    incompatible: bool = False,
) -> MockOS:
    """Assemble a new mock OS package with <size> of random padding.

    Raises:
        SizeParseError if <size> is not a valid size expression.
        EncodeError if <size> exceeds the maximum package size.
    """
    _padding_size = parse_size(size)
    if _padding_size > MAX_PACKAGE_SIZE:
        raise EncodeError(
            f"padding size exceeds maximum package size: {_padding_size=} > {MAX_PACKAGE_SIZE=}"
        )
    logger.debug(f"assemble mock OS package {version=} with {_padding_size=}")
    _fields = MockOSFields(
        version=version,
        cookie=COOKIE,
        padding=os.urandom(_padding_size),
        incompatible=incompatible,
        activation_fail_message=activation_fail_message,
    )
    return _fields.embed_digest()


def build_os(
    version: str,
    size: Union[str, int],
    activation_fail_message: str = "",
    incompatible: bool = False,
) -> bytes:
    """Build a new mock OS package and return the serialized package.

    Raises:
        SizeParseError if <size> is not a valid size expression.
        EncodeError if the package cannot be serialized.
    """
    return new_os(
        version,
        size,
        activation_fail_message=activation_fail_message,
        incompatible=incompatible,
    ).export_package()


def generate_os(
    fpath: StrOrPath,
    version: str,
    size: Union[str, int] = DEFAULT_PACKAGE_SIZE,
    activation_fail_message: str = "",
    incompatible: bool = False,
) -> MockOS:
    """Build a new mock OS package and save it to <fpath>.

    Existing file at <fpath> will never be overwritten.

    Raises:
        AlreadyExists if <fpath> already exists, no package will be built.
        SizeParseError if <size> is not a valid size expression.
        EncodeError if the package cannot be serialized.
        OSError if failed to write the package.

    Returns:
        The built package.
    """
    _fpath = Path(fpath)
    if _fpath.exists() or _fpath.is_symlink():
        raise AlreadyExists(f"{_fpath} already exists")

    _mock_os = new_os(
        version,
        size,
        activation_fail_message=activation_fail_message,
        incompatible=incompatible,
    )
    _raw = _mock_os.export_package()

    try:
        _written = write_file_exclusive(_fpath, _raw)
    except FileExistsError as e:
        raise AlreadyExists(f"{_fpath} already exists") from e
    logger.info(f"mock OS package {version=} saved to {_fpath}, {_written} bytes")
    return _mock_os
