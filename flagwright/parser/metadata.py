# Flagwright CLI Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""Descriptive metadata of a parser, consumed by the help and man page formats."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ParserMetadata:
    """
    Information about the application shown in help output.

    Attributes:
        app_name (str): Program name.
        version (str): Program version.
        short_description (str): One line summary.
        description (list[str]): Paragraphs of the description section.
        synopsis (list[str]): Usage lines; generated from the bindings when empty.
        examples (list[str]): Example invocations.
        date (str): Release date shown in the man page header.
        man_page_title (str): Title shown in the man page header.
        man_page_section (int): Manual section number.
    """

    app_name: str
    version: str = ""
    short_description: str = ""
    description: list[str] = field(default_factory=list)
    synopsis: list[str] = field(default_factory=list)
    examples: list[str] = field(default_factory=list)
    date: str = ""
    man_page_title: str = ""
    man_page_section: int = 1
