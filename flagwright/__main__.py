"""
Flagwright CLI Parsing

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import json
import logging
import sys
from typing import Any, Sequence

from pydantic import ValidationError
from rich.markup import escape
from rich.pretty import Pretty

from flagwright.config import loader
from flagwright.console import console
from flagwright.exceptions import FlagwrightError
from flagwright.parser import Parser
from flagwright.parser.token_buffer import END_OF_OPTIONS
from flagwright.signals import HelpSignal
from flagwright.utils import get_program_invocation, setup_logging
from flagwright.validators import PathExists, ValueList
from flagwright.version import __version__


def get_root_parser(arguments: Sequence[str]) -> Parser:
    parser = Parser(
        "flagwright",
        arguments,
        version=__version__,
        short_description="Parse a command line against a declaration file",
    )
    parser.metadata.synopsis = [
        f"{get_program_invocation()} -c CONFIG [--json] [--debug] -- ARGS..."
    ]
    parser.metadata.description = [
        "Loads the options, flags and positional arguments declared in a YAML or "
        "TOML file, parses the arguments given after '--' against them and prints "
        "the result.",
    ]
    parser.metadata.examples = [
        "python -m flagwright -c demo.yaml -- -n 5 -v file.txt",
        "python -m flagwright -c demo.toml --json -- --number=5 file.txt",
    ]
    parser.add_option(
        "-c",
        "--config",
        required=True,
        validator=PathExists(),
        help="Declaration file (.yaml, .yml or .toml).",
    )
    parser.add_flag("-j", "--json", help="Print the result as JSON.")
    parser.add_flag("-d", "--debug", help="Log the parsing steps.")
    parser.add_option(
        "--log-mode",
        default="cli",
        validator=ValueList(["cli", "json"]),
        help="Format of the log output.",
    )
    return parser


def split_arguments(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split at the first "--" into our own arguments and the forwarded ones."""
    argv = list(argv)
    if END_OF_OPTIONS in argv:
        index = argv.index(END_OF_OPTIONS)
        return argv[:index], argv[index + 1 :]
    return argv, []


def print_result(result: dict[str, Any], as_json: bool) -> None:
    if as_json:
        console.print_json(json.dumps(result, default=str), highlight=False)
    else:
        console.print(Pretty(result))


def main(argv: Sequence[str] | None = None) -> int:
    own_arguments, forwarded = split_arguments(
        sys.argv[1:] if argv is None else argv
    )
    try:
        args = get_root_parser(own_arguments).parse()
        setup_logging(
            mode=args["log_mode"],
            log_filename=None,
            console_log_level=logging.DEBUG if args["debug"] else logging.WARNING,
        )
        result = loader(args["config"], forwarded).parse()
    except HelpSignal:
        return 0
    except (FlagwrightError, ValidationError, ValueError, OSError) as error:
        console.print(f"[bold red]Error:[/] {escape(str(error))}", soft_wrap=True)
        return 1

    print_result(result, args["json"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
