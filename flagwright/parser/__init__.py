"""
Flagwright CLI Parsing

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .binding import Binding, BindingKind
from .codec import DecodeResult, DecodeStatus, decode, decode_into
from .identifier import IdPair
from .metadata import ParserMetadata
from .resolver import TokenResolver
from .token_buffer import END_OF_OPTIONS, TokenBuffer
from .parser import Parser

__all__ = [
    "Binding",
    "BindingKind",
    "DecodeResult",
    "DecodeStatus",
    "decode",
    "decode_into",
    "IdPair",
    "ParserMetadata",
    "TokenResolver",
    "END_OF_OPTIONS",
    "TokenBuffer",
    "Parser",
]
