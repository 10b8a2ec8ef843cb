# Flagwright CLI Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""Plain-text help page rendered through a Rich console."""
from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.padding import Padding

from flagwright.console import console as default_console
from flagwright.formats.base import HelpFormatBase


class HelpFormat(HelpFormatBase):
    """
    Renders the help page selected by `-h`/`--help`.

    Args:
        console (Console | None): Destination console. Defaults to the global one.
    """

    def __init__(self, console: Console | None = None) -> None:
        super().__init__()
        self.console: Console = console or default_console

    def escape(self, text: str) -> str:
        return escape(text)

    def in_bold(self, text: str) -> str:
        return f"[bold]{escape(text)}[/bold]"

    def print_header(self) -> None:
        assert self.meta is not None
        title = self.meta.app_name
        if self.meta.short_description:
            title = f"{title} - {self.meta.short_description}"
        self.console.print(escape(title))
        self.console.print("=" * len(title))

    def print_section(self, title: str) -> None:
        self.console.print()
        self.console.print(f"[bold]{escape(title.upper())}[/bold]")
        self.is_first_in_section = True

    def print_subsection(self, title: str) -> None:
        self.console.print()
        self.console.print(Padding(f"[bold]{escape(title)}[/bold]", (0, 0, 0, 2)))
        self.is_first_in_section = True

    def print_line(self, text: str, is_paragraph: bool) -> None:
        if not self.is_first_in_section and is_paragraph:
            self.console.print()
        self.console.print(Padding(text, (0, 0, 0, 4)))
        self.is_first_in_section = False

    def print_list_item(self, term: str, description: str) -> None:
        self.console.print(Padding(term, (0, 0, 0, 4)))
        if description:
            self.console.print(Padding(description, (0, 0, 0, 10)))
        self.is_first_in_section = False

    def print_footer(self) -> None:
        pass
