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

import pytest

from mock_os_libs.consts import INCOMPATIBLE_DETAIL
from mock_os_libs.errors import (
    AlreadyExists,
    BuildError,
    IncompatibleFailure,
    InstallError,
    InstallErrorInfo,
    InstallErrorType,
    IntegrityFailure,
    MockOSError,
    ParseFailure,
    SizeParseError,
)


class TestInstallErrorType:
    def test_protocol_numbering(self):
        assert InstallErrorType.UNSPECIFIED == 0
        assert InstallErrorType.INCOMPATIBLE == 1
        assert InstallErrorType.TOO_LARGE == 2
        assert InstallErrorType.PARSE_FAIL == 3
        assert InstallErrorType.INTEGRITY_FAIL == 4


class TestInstallError:
    @pytest.mark.parametrize(
        "err_type, expected_type, expected_detail",
        (
            (ParseFailure, InstallErrorType.PARSE_FAIL, ""),
            (IntegrityFailure, InstallErrorType.INTEGRITY_FAIL, ""),
            (IncompatibleFailure, InstallErrorType.INCOMPATIBLE, INCOMPATIBLE_DETAIL),
        ),
    )
    def test_classified_errors(self, err_type, expected_type, expected_detail):
        _err = err_type("error message")

        assert isinstance(_err, InstallError)
        assert isinstance(_err, MockOSError)
        assert str(_err) == "error message"
        assert _err.type == expected_type
        assert _err.detail == expected_detail
        assert _err.to_install_error() == InstallErrorInfo(
            type=expected_type, detail=expected_detail
        )

    def test_incompatible_detail(self):
        assert IncompatibleFailure().detail == "Unsupported OS Version"

    def test_override_detail(self):
        _err = IntegrityFailure("hash mismatch", detail="custom detail")
        assert _err.to_install_error().detail == "custom detail"

    def test_install_error_info_dump(self):
        _info = IncompatibleFailure().to_install_error()
        assert _info.model_dump(mode="json") == {
            "type": 1,
            "detail": "Unsupported OS Version",
        }


class TestBuildError:
    def test_already_exists(self):
        _err = AlreadyExists("exists")
        assert isinstance(_err, BuildError)
        assert isinstance(_err, FileExistsError)

    def test_size_parse_error(self):
        _err = SizeParseError("bad size")
        assert isinstance(_err, BuildError)
        assert isinstance(_err, ValueError)
