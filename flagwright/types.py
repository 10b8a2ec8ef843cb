# Flagwright CLI Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value types understood by the Flagwright value codec.

Python integers are unbounded, so a fixed-width target is declared with one of the
bounded integer types defined here (`Int8` ... `UInt64`). The codec checks decoded
integers against `minimum`/`maximum` of these types and reports an overflow instead
of a generic decode error when a value does not fit.

Contents:
- BoundedInt and its fixed-width subclasses.
- is_container / element_type: helpers for `list[T]` value types.
- type_name: user-facing name of a value type, used in error and help messages.
- resolve_type: maps configuration type names (e.g. "uint8", "list[int]") to types.
"""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, get_args, get_origin


class BoundedInt(int):
    """Base class of fixed-width integer value types."""

    bits: int = 64
    signed: bool = True
    minimum: int = -(2**63)
    maximum: int = 2**63 - 1

    def __init_subclass__(cls, bits: int = 64, signed: bool = True, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.bits = bits
        cls.signed = signed
        if signed:
            cls.minimum = -(2 ** (bits - 1))
            cls.maximum = 2 ** (bits - 1) - 1
        else:
            cls.minimum = 0
            cls.maximum = 2**bits - 1


class Int8(BoundedInt, bits=8, signed=True):
    """Signed 8 bit integer."""


class Int16(BoundedInt, bits=16, signed=True):
    """Signed 16 bit integer."""


class Int32(BoundedInt, bits=32, signed=True):
    """Signed 32 bit integer."""


class Int64(BoundedInt, bits=64, signed=True):
    """Signed 64 bit integer."""


class UInt8(BoundedInt, bits=8, signed=False):
    """Unsigned 8 bit integer."""


class UInt16(BoundedInt, bits=16, signed=False):
    """Unsigned 16 bit integer."""


class UInt32(BoundedInt, bits=32, signed=False):
    """Unsigned 32 bit integer."""


class UInt64(BoundedInt, bits=64, signed=False):
    """Unsigned 64 bit integer."""


def is_container(value_type: Any) -> bool:
    """Return True if the value type is a `list[T]` container."""
    return value_type is list or get_origin(value_type) is list


def element_type(value_type: Any) -> Any:
    """Return the element type of a container type (`str` for a bare `list`)."""
    args = get_args(value_type)
    return args[0] if args else str


def type_name(value_type: Any) -> str:
    """
    Return the user-facing name of a value type.

    Examples:
        type_name(UInt8)      -> "unsigned 8 bit integer"
        type_name(list[int])  -> "list of integer"
    """
    if is_container(value_type):
        return f"list of {type_name(element_type(value_type))}"
    if isinstance(value_type, type) and issubclass(value_type, BoundedInt):
        sign = "signed" if value_type.signed else "unsigned"
        return f"{sign} {value_type.bits} bit integer"
    if value_type is bool:
        return "bool"
    if value_type is int:
        return "integer"
    if value_type is float:
        return "float"
    if value_type is str:
        return "string"
    if value_type is datetime:
        return "datetime"
    if isinstance(value_type, type) and issubclass(value_type, Enum):
        return value_type.__name__
    return getattr(value_type, "__name__", str(value_type))


TYPE_NAMES: dict[str, Any] = {
    "str": str,
    "string": str,
    "int": int,
    "integer": int,
    "float": float,
    "bool": bool,
    "int8": Int8,
    "int16": Int16,
    "int32": Int32,
    "int64": Int64,
    "uint8": UInt8,
    "uint16": UInt16,
    "uint32": UInt32,
    "uint64": UInt64,
    "datetime": datetime,
    "path": Path,
}


def resolve_type(name: str) -> Any:
    """
    Resolve a configuration type name into a value type.

    Accepts the keys of `TYPE_NAMES` and `list[...]` around any of them.

    Raises:
        ValueError: If the name is unknown.
    """
    normalized = name.strip().lower()
    if normalized.startswith("list[") and normalized.endswith("]"):
        return list[resolve_type(normalized[5:-1])]  # type: ignore[misc]
    try:
        return TYPE_NAMES[normalized]
    except KeyError:
        valid = ", ".join(sorted(TYPE_NAMES))
        raise ValueError(
            f"Unknown value type '{name}'. Must be one of: {valid} or list[...]"
        ) from None
