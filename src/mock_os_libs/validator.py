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
"""Validate received mock OS package."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

from .common.io import StrOrPath
from .errors import IncompatibleFailure, IntegrityFailure, InstallError
from .package import MockOS

logger = logging.getLogger(__name__)


def validate_os(_in: bytes) -> MockOS:
    """Parse <_in> and verify the package's integrity and compatibility.

    The checks are taken in order: parse, digest, compatibility.
    The first failed check terminates the validation.

    Raises:
        ParseFailure if <_in> is not a well-formed package.
        IntegrityFailure if the embedded digest mismatches.
        IncompatibleFailure if the package is marked as incompatible.
    """
    _mock_os = MockOS.parse_package(_in)
    if not _mock_os.check_digest():
        raise IntegrityFailure(
            f"digest check failed for {_mock_os.version=}: "
            f"embedded={_mock_os.digest.hex()}, calculated={_mock_os.calc_digest().hex()}"
        )
    if _mock_os.incompatible:
        raise IncompatibleFailure(f"{_mock_os.version=} is unsupported")
    return _mock_os


def check_os(_in: bytes) -> Tuple[Optional[MockOS], Optional[InstallError]]:
    """Validate <_in>, return either the package or the install error."""
    try:
        return validate_os(_in), None
    except InstallError as e:
        logger.debug(f"package validation failed: {e!r}")
        return None, e


def validate_os_file(fpath: StrOrPath) -> MockOS:
    return validate_os(Path(fpath).read_bytes())
