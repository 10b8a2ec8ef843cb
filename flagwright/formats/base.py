# Flagwright CLI Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the format interface shared by the parse, help and man page formats.

A `Parser` forwards every declaration to exactly one format. The parse format
(`TokenResolver`) records bindings for resolution and ignores help text. The help
formats record the same calls and render them when `parse()` is invoked, then raise
`HelpSignal`.

`HelpFormatBase` owns the layout of a help page (header, synopsis, description,
positional arguments, options, examples, version). Concrete formats only supply the
printing primitives.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, NoReturn, Protocol

from flagwright.parser.binding import Binding, BindingKind
from flagwright.parser.metadata import ParserMetadata
from flagwright.signals import HelpSignal


class FormatSink(Protocol):
    """Capabilities every parser format provides."""

    def add_option(self, binding: Binding) -> None: ...

    def add_flag(self, binding: Binding) -> None: ...

    def add_positional(self, binding: Binding) -> None: ...

    def add_section(self, title: str) -> None: ...

    def add_subsection(self, title: str) -> None: ...

    def add_line(self, text: str, is_paragraph: bool = False) -> None: ...

    def add_list_item(self, key: str, description: str) -> None: ...

    def parse(self, metadata: ParserMetadata) -> dict[str, Any]: ...


class HelpFormatBase(ABC):
    """Collects declarations and renders them as a help page."""

    def __init__(self) -> None:
        self._positionals: list[Binding] = []
        self._entries: list[tuple[str, Any, Any]] = []
        self.is_first_in_section: bool = True
        self.meta: ParserMetadata | None = None

    def add_option(self, binding: Binding) -> None:
        self._entries.append(("binding", binding, None))

    def add_flag(self, binding: Binding) -> None:
        self._entries.append(("binding", binding, None))

    def add_positional(self, binding: Binding) -> None:
        self._positionals.append(binding)

    def add_section(self, title: str) -> None:
        self._entries.append(("section", title, None))

    def add_subsection(self, title: str) -> None:
        self._entries.append(("subsection", title, None))

    def add_line(self, text: str, is_paragraph: bool = False) -> None:
        self._entries.append(("line", text, is_paragraph))

    def add_list_item(self, key: str, description: str) -> None:
        self._entries.append(("item", key, description))

    def parse(self, metadata: ParserMetadata) -> NoReturn:
        """Render the page and signal that no parsing took place."""
        self.render(metadata)
        raise HelpSignal()

    def render(self, metadata: ParserMetadata) -> None:
        self.meta = metadata
        self.print_header()

        self.print_section("Synopsis")
        if metadata.synopsis:
            for line in metadata.synopsis:
                self.print_line(self.escape(line), True)
        else:
            self.print_line(self._default_synopsis(), True)

        if metadata.description:
            self.print_section("Description")
            for paragraph in metadata.description:
                self.print_line(self.escape(paragraph), True)

        if self._positionals:
            self.print_section("Positional Arguments")
            for number, binding in enumerate(self._positionals, start=1):
                term = self.escape(
                    f"ARGUMENT-{number} {binding.get_value_text()}".rstrip()
                )
                self.print_list_item(term, self._describe(binding))

        self.print_section("Options")
        self.print_subsection("Common options")
        self.print_list_item(
            self._join_ids("-h", "--help"), self.escape("Prints the help page.")
        )
        self.print_list_item(
            self.in_bold("--export-help") + self.escape(" (string)"),
            self.escape("Export the help page information. Value must be one of [man]."),
        )
        for kind, first, second in self._entries:
            if kind == "binding":
                self.print_list_item(self._option_term(first), self._describe(first))
            elif kind == "section":
                self.print_section(first)
            elif kind == "subsection":
                self.print_subsection(first)
            elif kind == "line":
                self.print_line(self.escape(first), second)
            elif kind == "item":
                self.print_list_item(self.escape(first), self.escape(second))

        if metadata.examples:
            self.print_section("Examples")
            for example in metadata.examples:
                self.print_line(self.escape(example), True)

        if metadata.version:
            self.print_section("Version")
            self.print_line(self.in_bold("Last update: ") + self.escape(metadata.date), False)
            self.print_line(
                self.in_bold(f"{metadata.app_name} version: ")
                + self.escape(metadata.version),
                False,
            )

        self.print_footer()

    def _default_synopsis(self) -> str:
        assert self.meta is not None
        parts = [self.in_bold(self.meta.app_name), self.escape("[OPTIONS]")]
        for binding in self._positionals:
            suffix = "..." if binding.is_container else ""
            parts.append(self.escape(f"{binding.dest.upper()}{suffix}"))
        return " ".join(parts)

    def _join_ids(self, short: str, long: str) -> str:
        if short and long:
            return self.in_bold(short) + self.escape(", ") + self.in_bold(long)
        return self.in_bold(short or long)

    def _option_term(self, binding: Binding) -> str:
        assert binding.ids is not None
        term = self._join_ids(binding.ids.short_token, binding.ids.long_token)
        value_text = binding.get_value_text()
        if value_text:
            term += self.escape(f" {value_text}")
        return term

    def _describe(self, binding: Binding) -> str:
        parts = [binding.help] if binding.help else []
        if binding.kind is BindingKind.OPTION:
            if binding.required:
                parts.append("This option is required.")
            elif binding.default is not None and binding.default != []:
                parts.append(f"Default: {binding.default}.")
        validator_help = binding.validator.help_text()
        if validator_help:
            parts.append(validator_help)
        return self.escape(" ".join(parts))

    def escape(self, text: str) -> str:
        """Make literal text safe for the output markup."""
        return text

    @abstractmethod
    def print_header(self) -> None: ...

    @abstractmethod
    def print_section(self, title: str) -> None: ...

    @abstractmethod
    def print_subsection(self, title: str) -> None: ...

    @abstractmethod
    def print_line(self, text: str, is_paragraph: bool) -> None: ...

    @abstractmethod
    def print_list_item(self, term: str, description: str) -> None: ...

    @abstractmethod
    def print_footer(self) -> None: ...

    @abstractmethod
    def in_bold(self, text: str) -> str: ...
