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
"""Common shared helper functions for IO."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

StrOrPath = Union[str, Path]


def remove_file(_fpath: Path, *, ignore_error: bool = True) -> None:
    """Use proper way to remove <_fpath>."""
    try:
        _fpath.unlink(missing_ok=True)
    except IsADirectoryError:
        return shutil.rmtree(_fpath, ignore_errors=ignore_error)
    except Exception:
        if not ignore_error:
            raise


def write_file_exclusive(fpath: StrOrPath, data: bytes) -> int:
    """Create <fpath> and write <data> into it.

    The file is flushed and fsynced before returning. If anything goes wrong
        after the file is created, the partially written file will be removed.

    Raises:
        FileExistsError if <fpath> already exists.

    Returns:
        The number of bytes written.
    """
    _fpath = Path(fpath)
    _f = open(_fpath, "xb")
    try:
        with _f:
            _written = _f.write(data)
            _f.flush()
            os.fsync(_f.fileno())
    except Exception:
        logger.debug(f"failed to write {_fpath}, cleanup the partially written file")
        remove_file(_fpath)
        raise
    return _written
