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
"""Test human readable size parsing."""

import pytest

from mock_os_libs.common.size import parse_size
from mock_os_libs.errors import SizeParseError


class TestParseSize:
    @pytest.mark.parametrize(
        "size, expected",
        (
            ("0", 0),
            ("1024", 1024),
            ("512B", 512),
            ("1KB", 1024),
            ("1kb", 1024),
            ("1KiB", 1024),
            ("10MB", 10 * 1024**2),
            ("10 MB", 10 * 1024**2),
            ("1.5KB", 1536),
            ("2GiB", 2 * 1024**3),
            ("1K", 1024),
            ("1k", 1024),
            ("10M", 10 * 1024**2),
            ("1G", 1024**3),
            (" 3MiB ", 3 * 1024**2),
            (0, 0),
            (4096, 4096),
        ),
    )
    def test_parse_size(self, size, expected):
        assert parse_size(size) == expected

    @pytest.mark.parametrize(
        "size",
        (
            "",
            "MB",
            "-1",
            "-1KB",
            "ten MB",
            "10XB",
            "10MB trailing",
            "1.2.3MB",
            -1,
            True,
            None,
        ),
    )
    def test_malformed_size(self, size):
        with pytest.raises(SizeParseError):
            parse_size(size)

    def test_size_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_size("not a size")

    @pytest.mark.parametrize(
        "short_unit, full_unit",
        (("K", "KB"), ("M", "MB"), ("G", "GB"), ("T", "TB"), ("P", "PB"), ("E", "EB")),
    )
    def test_short_units_follow_jedec(self, short_unit, full_unit):
        assert parse_size(f"3{short_unit}") == parse_size(f"3{full_unit}")
        assert parse_size(f"3{short_unit}") == parse_size(f"3{short_unit}iB")
