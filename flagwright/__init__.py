"""
Flagwright CLI Parsing

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .parser import IdPair, Parser
from .signals import HelpSignal
from .types import Int8, Int16, Int32, Int64, UInt8, UInt16, UInt32, UInt64
from .version import __version__

logger = logging.getLogger("flagwright")

__all__ = [
    "__version__",
    "Parser",
    "IdPair",
    "HelpSignal",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
]
