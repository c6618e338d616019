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
"""Validate a mock OS package file the same way a target would before installing it."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from mock_os_libs.errors import InstallError
from mock_os_libs.validator import validate_os_file
from mock_os_tools._utils import exit_with_err_msg

if TYPE_CHECKING:
    from argparse import ArgumentParser, Namespace, _SubParsersAction

logger = logging.getLogger(__name__)


def validate_cmd_args(
    sub_arg_parser: _SubParsersAction[ArgumentParser], *parent_parser: ArgumentParser
) -> None:
    validate_arg_parser = sub_arg_parser.add_parser(
        name="validate",
        help=(_help_txt := "Validate a mock OS package"),
        description=_help_txt,
        parents=parent_parser,
    )
    validate_arg_parser.add_argument(
        "package",
        help="The mock OS package file.",
    )
    validate_arg_parser.set_defaults(handler=validate_cmd)


def validate_cmd(args: Namespace) -> None:
    logger.debug(f"calling {validate_cmd.__name__} with {args}")
    _package = Path(args.package)
    if not _package.is_file():
        exit_with_err_msg(f"{_package} is not a file.")

    try:
        _mock_os = validate_os_file(_package)
    except InstallError as e:
        _install_err = e.to_install_error()
        exit_with_err_msg(
            f"{_package} failed validation: {_install_err.type.name}"
            + (f" ({_install_err.detail})" if _install_err.detail else "")
            + f": {e}"
        )
    print(f"OK: {_package} holds valid mock OS package, version={_mock_os.version}")
