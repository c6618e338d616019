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
"""Print out the summary of a mock OS package without judging it."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from mock_os_libs.errors import ParseFailure
from mock_os_libs.package import MockOS
from mock_os_libs.summary import JSON_FORMAT, SUPPORTED_FORMATS, PackageSummary
from mock_os_tools._utils import exit_with_err_msg

if TYPE_CHECKING:
    from argparse import ArgumentParser, Namespace, _SubParsersAction

logger = logging.getLogger(__name__)


def inspect_package_cmd_args(
    sub_arg_parser: _SubParsersAction[ArgumentParser], *parent_parser: ArgumentParser
) -> None:
    inspect_arg_parser = sub_arg_parser.add_parser(
        name="inspect",
        help=(_help_txt := "Print out the summary of a mock OS package"),
        description=_help_txt,
        parents=parent_parser,
    )
    inspect_arg_parser.add_argument(
        "--format",
        choices=SUPPORTED_FORMATS,
        default=JSON_FORMAT,
        help="The output format.",
    )
    inspect_arg_parser.add_argument(
        "package",
        help="The mock OS package file.",
    )
    inspect_arg_parser.set_defaults(handler=inspect_package_cmd)


def inspect_package_cmd(args: Namespace) -> None:
    logger.debug(f"calling {inspect_package_cmd.__name__} with {args}")
    _package = Path(args.package)
    if not _package.is_file():
        exit_with_err_msg(f"{_package} is not a file.")

    try:
        _mock_os = MockOS.parse_package(_package.read_bytes())
    except ParseFailure as e:
        exit_with_err_msg(f"{_package} is not a mock OS package: {e}")
    print(PackageSummary.from_package(_mock_os).export(args.format))
