"""
Flagwright CLI Parsing

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .base import FormatSink, HelpFormatBase
from .help import HelpFormat
from .man import ManFormat

__all__ = [
    "FormatSink",
    "HelpFormatBase",
    "HelpFormat",
    "ManFormat",
]
