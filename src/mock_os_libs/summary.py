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
"""Human readable summary of a mock OS package."""

from __future__ import annotations

import yaml
from pydantic import BaseModel, Field
from typing_extensions import Self

from .consts import STR_ENCODING, STR_ENCODING_ERRORS
from .package import MockOS

JSON_FORMAT = "json"
YAML_FORMAT = "yaml"
SUPPORTED_FORMATS = (JSON_FORMAT, YAML_FORMAT)


def _printable(_in: str) -> str:
    # string fields decoded from a corrupted package might contain surrogates
    return _in.encode(STR_ENCODING, STR_ENCODING_ERRORS).decode(
        STR_ENCODING, "backslashreplace"
    )


class PackageSummary(BaseModel):
    version: str
    cookie: str
    padding_size: int = Field(alias="paddingSize")
    incompatible: bool
    activation_fail_message: str = Field(alias="activationFailMessage")
    digest: str
    digest_verified: bool = Field(alias="digestVerified")

    @classmethod
    def from_package(cls, mock_os: MockOS) -> Self:
        return cls(
            version=_printable(mock_os.version),
            cookie=_printable(mock_os.cookie),
            paddingSize=len(mock_os.padding),
            incompatible=mock_os.incompatible,
            activationFailMessage=_printable(mock_os.activation_fail_message),
            digest=mock_os.digest.hex(),
            digestVerified=mock_os.check_digest(),
        )

    def export(self, _format: str = JSON_FORMAT) -> str:
        if _format == JSON_FORMAT:
            return self.model_dump_json(by_alias=True, indent=2)
        if _format == YAML_FORMAT:
            return yaml.safe_dump(self.model_dump(by_alias=True), sort_keys=False)
        raise ValueError(f"{_format} is not a supported format: {SUPPORTED_FORMATS}")
