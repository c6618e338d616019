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
"""Shared test fixtures for mock-os-image tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from mock_os_libs.consts import COOKIE
from mock_os_libs.package import MockOS, MockOSFields

TEST_VERSION = "1.2.3"
TEST_ACTIVATION_FAIL_MESSAGE = "activation failed on purpose"
TEST_PADDING_SIZE = 1024


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    return tmp_path


@pytest.fixture
def mock_os_fields() -> MockOSFields:
    return MockOSFields(
        version=TEST_VERSION,
        cookie=COOKIE,
        padding=os.urandom(TEST_PADDING_SIZE),
        incompatible=False,
        activation_fail_message=TEST_ACTIVATION_FAIL_MESSAGE,
    )


@pytest.fixture
def mock_os(mock_os_fields: MockOSFields) -> MockOS:
    return mock_os_fields.embed_digest()


@pytest.fixture
def raw_mock_os(mock_os: MockOS) -> bytes:
    """The serialized <mock_os>."""
    return mock_os.export_package()
