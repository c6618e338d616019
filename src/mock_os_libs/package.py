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
"""Pydantic model for mock OS package.

A package is built in two phases: all the semantic fields are set first
    as a MockOSFields, then the digest is calculated over these fields
    and embedded, resulting in a MockOS.
Both models are frozen, any change to a field after the digest is embedded
    results in a package with mismatched digest.

The serialized form is a msgpack map with the following keys, in order:
    version, cookie, padding, incompatible, activationFailMessage, hash.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import Self

from .common.msgpack_utils import pack_obj, unpack_dict
from .digest import calc_digest
from .errors import EncodeError, ParseFailure


class _PackageModel(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        strict=True,
        extra="forbid",
    )


class MockOSFields(_PackageModel):
    version: str
    cookie: str
    padding: bytes = Field(repr=False)
    incompatible: bool
    activation_fail_message: str = Field(alias="activationFailMessage")

    def calc_digest(self) -> bytes:
        return calc_digest(
            version=self.version,
            cookie=self.cookie,
            padding=self.padding,
            incompatible=self.incompatible,
            activation_fail_message=self.activation_fail_message,
        )

    def embed_digest(self) -> MockOS:
        """Calculate the digest over current fields and return the finalized package."""
        return MockOS(
            version=self.version,
            cookie=self.cookie,
            padding=self.padding,
            incompatible=self.incompatible,
            activation_fail_message=self.activation_fail_message,
            digest=self.calc_digest(),
        )


class MockOS(MockOSFields):
    digest: bytes = Field(alias="hash")

    def check_digest(self) -> bool:
        """Re-calculate the digest and compare it against the embedded one."""
        return self.digest == self.calc_digest()

    def export_package(self) -> bytes:
        try:
            return pack_obj(self.model_dump(by_alias=True))
        except Exception as e:
            raise EncodeError(f"failed to encode package {self.version=}: {e!r}") from e

    @classmethod
    def wire_keys(cls) -> frozenset[str]:
        return frozenset(
            _field.alias or _name for _name, _field in cls.model_fields.items()
        )

    @classmethod
    def parse_package(cls, _in: bytes) -> Self:
        try:
            _unpacked = unpack_dict(_in)
            # NOTE: populate_by_name also allows attr names, only accept the wire keys here
            if _unexpected := set(_unpacked) - cls.wire_keys():
                raise ValueError(f"unexpected keys: {sorted(map(str, _unexpected))}")
            return cls.model_validate(_unpacked)
        except (ValueError, TypeError) as e:
            # NOTE: pydantic.ValidationError is also a ValueError
            raise ParseFailure(f"failed to parse package: {e!r}") from e
