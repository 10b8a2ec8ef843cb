# Flagwright CLI Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""Man page (roff) rendering selected by `--export-help man`."""
from __future__ import annotations

import sys
from typing import TextIO

from flagwright.formats.base import HelpFormatBase


class ManFormat(HelpFormatBase):
    """
    Writes the help page as roff source suitable for `man -l`.

    Args:
        output (TextIO | None): Destination stream. Defaults to `sys.stdout`.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        super().__init__()
        self.output: TextIO = output or sys.stdout

    def _write(self, text: str) -> None:
        self.output.write(text + "\n")

    def _write_text(self, text: str) -> None:
        """Write a text line; a leading "." or "'" would be read as a request."""
        if text.startswith((".", "'")):
            text = "\\&" + text
        self._write(text)

    def escape(self, text: str) -> str:
        return text.replace("\\", "\\e")

    def in_bold(self, text: str) -> str:
        return f"\\fB{self.escape(text)}\\fR"

    def print_header(self) -> None:
        assert self.meta is not None
        name = self.meta.app_name
        self._write(
            f'.TH {name.upper()} {self.meta.man_page_section} "{self.meta.date}" '
            f'"{name.lower()} {self.meta.version}" "{self.meta.man_page_title}"'
        )
        self._write(".SH NAME")
        self._write_text(
            f"{self.escape(name)} \\- {self.escape(self.meta.short_description)}"
        )

    def print_section(self, title: str) -> None:
        self._write(f".SH {title.upper()}")
        self.is_first_in_section = True

    def print_subsection(self, title: str) -> None:
        self._write(f".SS {title}")
        self.is_first_in_section = True

    def print_line(self, text: str, is_paragraph: bool) -> None:
        if not self.is_first_in_section:
            self._write(".sp" if is_paragraph else ".br")
        self._write_text(text)
        self.is_first_in_section = False

    def print_list_item(self, term: str, description: str) -> None:
        self._write(".TP")
        self._write_text(term)
        self._write_text(description)
        self.is_first_in_section = False

    def print_footer(self) -> None:
        self.output.flush()
