# Copyright 2022 TIER IV, INC. All rights reserved.
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

import os

import pytest

from mock_os_libs.common.io import remove_file, write_file_exclusive


class TestWriteFileExclusive:
    def test_write_new_file(self, temp_dir):
        test_file = temp_dir / "test.bin"
        test_content = b"\x00\x01" * 1024

        assert write_file_exclusive(test_file, test_content) == len(test_content)
        assert test_file.read_bytes() == test_content

    def test_write_empty_file(self, temp_dir):
        test_file = temp_dir / "empty.bin"

        assert write_file_exclusive(str(test_file), b"") == 0
        assert test_file.is_file()

    def test_refuse_existing_file(self, temp_dir):
        test_file = temp_dir / "test.bin"
        test_file.write_bytes(b"origin")

        with pytest.raises(FileExistsError):
            write_file_exclusive(test_file, b"new content")
        assert test_file.read_bytes() == b"origin"

    def test_cleanup_on_failure(self, temp_dir, mocker):
        test_file = temp_dir / "test.bin"
        mocker.patch.object(os, "fsync", side_effect=OSError("fsync failed"))

        with pytest.raises(OSError, match="fsync failed"):
            write_file_exclusive(test_file, b"content")
        assert not test_file.exists()


class TestRemoveFile:
    def test_remove_file_regular_file(self, temp_dir):
        """Test removing a regular file."""
        test_file = temp_dir / "test.txt"
        test_file.write_text("content")
        assert test_file.exists()

        remove_file(test_file)
        assert not test_file.exists()

    def test_remove_file_directory(self, temp_dir):
        """Test removing a directory."""
        test_dir = temp_dir / "test_dir"
        test_dir.mkdir()
        test_file = test_dir / "file.txt"
        test_file.write_text("content")
        assert test_dir.exists()

        remove_file(test_dir)
        assert not test_dir.exists()

    def test_remove_missing_file(self, temp_dir):
        remove_file(temp_dir / "not_exist")
