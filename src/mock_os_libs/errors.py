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
"""Error taxonomy of mock OS package building and validation.

Build errors are raised by the builder. Install errors are raised by the validator,
    each of them maps to one type of the installation protocol's InstallError.
"""

from __future__ import annotations

from enum import IntEnum
from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict

from .consts import INCOMPATIBLE_DETAIL


class InstallErrorType(IntEnum):
    """Mirror of the installation protocol's InstallError.Type enum."""

    UNSPECIFIED = 0
    INCOMPATIBLE = 1
    TOO_LARGE = 2
    PARSE_FAIL = 3
    INTEGRITY_FAIL = 4


class InstallErrorInfo(BaseModel):
    """The InstallError record to be sent back by the installation protocol."""

    model_config = ConfigDict(frozen=True)

    type: InstallErrorType
    detail: str = ""


class MockOSError(Exception):
    """Base class of all mock OS package errors."""


#
# ------ build errors ------ #
#


class BuildError(MockOSError):
    """Failed to build a mock OS package."""


class AlreadyExists(BuildError, FileExistsError):
    """The destination of the package already exists."""


class SizeParseError(BuildError, ValueError):
    """The declared package size is not a valid size expression."""


class EncodeError(BuildError):
    """Failed to serialize the package."""


#
# ------ install errors ------ #
#


class InstallError(MockOSError):
    error_type: ClassVar[InstallErrorType] = InstallErrorType.UNSPECIFIED
    default_detail: ClassVar[str] = ""

    def __init__(self, msg: str = "", *, detail: Optional[str] = None) -> None:
        super().__init__(msg)
        self.detail = self.default_detail if detail is None else detail

    @property
    def type(self) -> InstallErrorType:
        return self.error_type

    def to_install_error(self) -> InstallErrorInfo:
        return InstallErrorInfo(type=self.error_type, detail=self.detail)


class ParseFailure(InstallError):
    error_type = InstallErrorType.PARSE_FAIL


class IntegrityFailure(InstallError):
    error_type = InstallErrorType.INTEGRITY_FAIL


class IncompatibleFailure(InstallError):
    error_type = InstallErrorType.INCOMPATIBLE
    default_detail = INCOMPATIBLE_DETAIL
