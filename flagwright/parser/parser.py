# Flagwright CLI Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `Parser`, the declaration registry of Flagwright.

Options, flags and positional arguments are declared on the parser in the order
they should appear in help output. Each declaration is validated, turned into a
`Binding` and forwarded to the format chosen when the parser was built:

- `TokenResolver` (default): the bindings are resolved against the command line.
- `HelpFormat` (`-h` / `--help`): a help page is printed.
- `ManFormat` (`--export-help man`): a man page is written.

The same declarations therefore serve both to describe the program and to parse
its arguments. Nothing is resolved until `parse()` is called.

Example Usage:
    parser = Parser("demo", ["-n", "5", "-v", "file.txt"])
    parser.add_option("-n", "--number", type=int, required=True, help="How many.")
    parser.add_flag("-v", "--verbose", help="Talk more.")
    parser.add_positional("file", help="Input file.")

    args = parser.parse()
    # args == {'number': 5, 'verbose': True, 'file': 'file.txt'}
"""
from __future__ import annotations

import sys
from typing import Any, Callable, Sequence, TextIO

from rich.console import Console

from flagwright.exceptions import DesignError, ValidationFailedError
from flagwright.formats import FormatSink, HelpFormat, ManFormat
from flagwright.logger import logger
from flagwright.parser.binding import Binding, BindingKind
from flagwright.parser.identifier import IdPair
from flagwright.parser.metadata import ParserMetadata
from flagwright.parser.resolver import TokenResolver
from flagwright.parser.token_buffer import END_OF_OPTIONS
from flagwright.types import is_container
from flagwright.validators import Validator, as_validator

RESERVED_SHORT_IDS = {"h"}
RESERVED_LONG_IDS = {"help", "export-help"}
EXPORT_FORMATS = ("man",)


class Parser:
    """
    Declaration registry and entry point of Flagwright.

    Args:
        app_name (str): Program name, used in help output.
        arguments (Sequence[str] | None): Command-line tokens without the program
            name. Defaults to `sys.argv[1:]`.
        version (str): Program version shown in help output.
        short_description (str): One line summary shown in help output.
        console (Console | None): Console used by the help format.
        output (TextIO | None): Stream used by the man page format.
    """

    def __init__(
        self,
        app_name: str,
        arguments: Sequence[str] | None = None,
        *,
        version: str = "",
        short_description: str = "",
        console: Console | None = None,
        output: TextIO | None = None,
    ) -> None:
        if not app_name or not app_name.strip():
            raise DesignError("app_name must be a non-empty string")
        if arguments is None:
            arguments = sys.argv[1:]
        self.arguments: list[str] = list(arguments)
        self.metadata: ParserMetadata = ParserMetadata(
            app_name=app_name,
            version=version,
            short_description=short_description,
        )
        self._bindings: list[Binding] = []
        self._dest_set: set[str] = set()
        self._short_ids: set[str] = set()
        self._long_ids: set[str] = set()
        self._parsed: bool = False
        self._format_error: ValidationFailedError | None = None
        self._format: FormatSink = self._select_format(console, output)

    def _select_format(self, console: Console | None, output: TextIO | None) -> FormatSink:
        """Choose the format from the special identifiers before "--"."""
        if END_OF_OPTIONS in self.arguments:
            head = self.arguments[: self.arguments.index(END_OF_OPTIONS)]
        else:
            head = self.arguments
        for index, token in enumerate(head):
            if token in ("-h", "--help"):
                logger.debug("Help requested, selecting the help format.")
                return HelpFormat(console)
            if token == "--export-help" or token.startswith("--export-help="):
                if "=" in token:
                    value = token.split("=", 1)[1]
                else:
                    value = head[index + 1] if index + 1 < len(head) else ""
                if value == "man":
                    logger.debug("Man page export requested, selecting the man format.")
                    return ManFormat(output)
                self._format_error = ValidationFailedError(
                    f"Validation failed for option --export-help: Value {value} is not "
                    f"one of [{', '.join(EXPORT_FORMATS)}]."
                )
                break
        return TokenResolver(self.arguments)

    def _check_ids(self, ids: IdPair) -> None:
        if ids.short_id in RESERVED_SHORT_IDS or ids.long_id in RESERVED_LONG_IDS:
            raise DesignError(f"Identifier '{ids}' is reserved for help output.")
        if ids.short_id and ids.short_id in self._short_ids:
            raise DesignError(f"Short identifier '{ids.short_token}' is already used.")
        if ids.long_id and ids.long_id in self._long_ids:
            raise DesignError(f"Long identifier '{ids.long_token}' is already used.")

    def _register_ids(self, ids: IdPair) -> None:
        if ids.short_id:
            self._short_ids.add(ids.short_id)
        if ids.long_id:
            self._long_ids.add(ids.long_id)

    def _get_dest(self, default: str, dest: str | None) -> str:
        dest = dest or default
        if not dest.replace("_", "").isalnum():
            raise DesignError(
                f"dest '{dest}' must be a valid identifier (letters, digits, and underscores only)"
            )
        if dest[0].isdigit():
            raise DesignError(f"dest '{dest}' must not start with a digit")
        if dest in self._dest_set:
            raise DesignError(f"Destination '{dest}' is already defined.")
        return dest

    def _register(self, binding: Binding) -> None:
        self._dest_set.add(binding.dest)
        self._bindings.append(binding)
        if binding.ids is not None:
            self._register_ids(binding.ids)

    def add_option(
        self,
        *flags: str,
        type: Any = str,
        default: Any = None,
        required: bool = False,
        validator: Validator | Callable[[Any], Any] | None = None,
        dest: str | None = None,
        help: str = "",
    ) -> None:
        """
        Declare an option that takes a value, e.g. `-n 5`, `-n5`, `--number=5`.

        Args:
            *flags (str): One short ("-n") and/or one long ("--number") identifier.
            type (Any): Value type; `list[T]` makes the option repeatable.
            default (Any): Value kept when the option is absent (`[]` for lists).
            required (bool): Whether the option must be given.
            validator (Validator | Callable | None): Checks the decoded value.
            dest (str | None): Result key. Defaults to the long, else short, identifier.
            help (str): Help text.
        """
        ids = IdPair.from_flags(*flags)
        self._check_ids(ids)
        dest = self._get_dest(ids.dest, dest)
        if default is None and is_container(type):
            default = []
        binding = Binding(
            kind=BindingKind.OPTION,
            dest=dest,
            ids=ids,
            value_type=type,
            default=default,
            required=required,
            validator=as_validator(validator),
            help=help,
        )
        self._register(binding)
        self._format.add_option(binding)

    def add_flag(
        self,
        *flags: str,
        default: bool = False,
        required: bool = False,
        dest: str | None = None,
        help: str = "",
    ) -> None:
        """
        Declare a boolean flag, e.g. `-v`, `--verbose`, or grouped as in `-vq`.

        Args:
            *flags (str): One short and/or one long identifier.
            default (bool): Value when the flag is absent.
            required (bool): Not supported; flags are always optional.
            dest (str | None): Result key.
            help (str): Help text.
        """
        if required:
            raise DesignError("Flags cannot be required.")
        if not isinstance(default, bool):
            raise DesignError(
                f"Flag default must be a bool, got {default.__class__.__name__}"
            )
        ids = IdPair.from_flags(*flags)
        self._check_ids(ids)
        dest = self._get_dest(ids.dest, dest)
        binding = Binding(
            kind=BindingKind.FLAG,
            dest=dest,
            ids=ids,
            value_type=bool,
            default=default,
            help=help,
        )
        self._register(binding)
        self._format.add_flag(binding)

    def add_positional(
        self,
        name: str,
        *,
        type: Any = str,
        validator: Validator | Callable[[Any], Any] | None = None,
        help: str = "",
    ) -> None:
        """
        Declare a positional argument. Positionals are always required.

        A `list[T]` positional takes every remaining argument and must be the last
        positional declared.

        Args:
            name (str): Result key and help label.
            type (Any): Value type.
            validator (Validator | Callable | None): Checks each decoded value.
            help (str): Help text.
        """
        positionals = [binding for binding in self._bindings if binding.is_positional]
        if positionals and positionals[-1].is_container:
            raise DesignError(
                f"Positional '{name}' cannot follow the list positional "
                f"'{positionals[-1].dest}'; a list positional must be declared last."
            )
        binding = Binding(
            kind=BindingKind.POSITIONAL,
            dest=self._get_dest(name, None),
            value_type=type,
            validator=as_validator(validator),
            help=help,
        )
        self._register(binding)
        self._format.add_positional(binding)

    def add_section(self, title: str) -> None:
        """Start a new section in the options part of the help page."""
        self._format.add_section(title)

    def add_subsection(self, title: str) -> None:
        self._format.add_subsection(title)

    def add_line(self, text: str, is_paragraph: bool = False) -> None:
        self._format.add_line(text, is_paragraph)

    def add_list_item(self, key: str, description: str) -> None:
        self._format.add_list_item(key, description)

    @property
    def bindings(self) -> list[Binding]:
        return list(self._bindings)

    def get_binding(self, dest: str) -> Binding | None:
        """Return the binding stored under `dest`, if declared."""
        return next((binding for binding in self._bindings if binding.dest == dest), None)

    def parse(self) -> dict[str, Any]:
        """
        Run the selected format.

        Returns:
            dict[str, Any]: Parsed values keyed by `dest`.

        Raises:
            UserInputError: If the command line is invalid.
            HelpSignal: If help or a man page was rendered instead.
            DesignError: If called more than once.
        """
        if self._parsed:
            raise DesignError("parse() can only be called once per parser")
        self._parsed = True
        if self._format_error is not None:
            raise self._format_error
        return self._format.parse(self.metadata)

    def __str__(self) -> str:
        counts = {kind: 0 for kind in BindingKind}
        for binding in self._bindings:
            counts[binding.kind] += 1
        return (
            f"Parser(app_name={self.metadata.app_name!r}, "
            f"options={counts[BindingKind.OPTION]}, flags={counts[BindingKind.FLAG]}, "
            f"positionals={counts[BindingKind.POSITIONAL]})"
        )

    def __repr__(self) -> str:
        return str(self)
