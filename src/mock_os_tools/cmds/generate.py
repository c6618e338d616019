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
"""Generate a mock OS package file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from mock_os_libs.builder import generate_os
from mock_os_libs.consts import DEFAULT_PACKAGE_SIZE
from mock_os_libs.errors import BuildError
from mock_os_tools._utils import exit_with_err_msg

if TYPE_CHECKING:
    from argparse import ArgumentParser, Namespace, _SubParsersAction

logger = logging.getLogger(__name__)


def generate_cmd_args(
    sub_arg_parser: _SubParsersAction[ArgumentParser], *parent_parser: ArgumentParser
) -> None:
    generate_arg_parser = sub_arg_parser.add_parser(
        name="generate",
        help=(_help_txt := "Generate a new mock OS package"),
        description=_help_txt,
        parents=parent_parser,
    )
    generate_arg_parser.add_argument(
        "--output",
        "-o",
        help="Where to save the package, existing file will NOT be overwritten.",
        required=True,
    )
    generate_arg_parser.add_argument(
        "--version",
        help="The version of the mock OS.",
        required=True,
    )
    generate_arg_parser.add_argument(
        "--size",
        default=DEFAULT_PACKAGE_SIZE,
        help="The size of the padding, human readable size like 1KB, 10MB is accepted.",
    )
    generate_arg_parser.add_argument(
        "--activation-fail-message",
        default="",
        help="If specified, the mock OS will fail activation with this message.",
    )
    generate_arg_parser.add_argument(
        "--incompatible",
        action="store_true",
        help="Mark the mock OS as incompatible with the target.",
    )
    generate_arg_parser.set_defaults(handler=generate_cmd)


def generate_cmd(args: Namespace) -> None:
    logger.debug(f"calling {generate_cmd.__name__} with {args}")
    _output = Path(args.output)
    print(f"Generating mock OS package {args.version} to {_output} ...")
    try:
        _mock_os = generate_os(
            _output,
            version=args.version,
            size=args.size,
            activation_fail_message=args.activation_fail_message,
            incompatible=args.incompatible,
        )
    except BuildError as e:
        exit_with_err_msg(f"failed to generate mock OS package: {e}")
    except OSError as e:
        exit_with_err_msg(f"failed to write mock OS package to {_output}: {e!r}")
    print(f"Done, digest: {_mock_os.digest.hex()}")
