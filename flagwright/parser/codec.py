# Flagwright CLI Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value codec for Flagwright argument parsing.

Converts a single command-line token into a typed value. Decoding never guesses:
numbers must match a strict whole-string grammar, booleans accept exactly
"0", "1", "false" and "true", and enumerations are looked up by exact key.

The codec reports its outcome as a `DecodeResult` so the resolver can tell a
malformed value (`DecodeStatus.ERROR`) from a well-formed number that does not fit
its type (`DecodeStatus.OVERFLOW`). Enumeration misses are the one exception and
raise `InvalidEnumerationKeyError` right away with the list of valid keys.

Functions:
- decode: Decode a token into a value of the given type.
- decode_into: Decode a token and append it to a container target.
- enumeration_names: Return the key to member mapping of an enumeration type.
- check_decode_result: Raise the user-facing error for a failed decode.
"""
from __future__ import annotations

import math
import re
import sys
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Mapping

from dateutil import parser as date_parser

from flagwright.exceptions import (
    InvalidEnumerationKeyError,
    ValueDecodeError,
    ValueOverflowError,
)
from flagwright.types import BoundedInt, element_type, is_container, type_name

SIGNED_INTEGER = re.compile(r"-?[0-9]+")
UNSIGNED_INTEGER = re.compile(r"[0-9]+")
FLOATING_POINT = re.compile(
    r"-?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


class DecodeStatus(Enum):
    """Outcome of decoding a single token."""

    SUCCESS = "success"
    ERROR = "error"
    OVERFLOW = "overflow"


@dataclass(frozen=True)
class DecodeResult:
    """Tri-state decode outcome carrying the decoded value on success."""

    status: DecodeStatus
    value: Any = None

    @property
    def ok(self) -> bool:
        return self.status is DecodeStatus.SUCCESS


def _success(value: Any) -> DecodeResult:
    return DecodeResult(DecodeStatus.SUCCESS, value)


ERROR = DecodeResult(DecodeStatus.ERROR)
OVERFLOW = DecodeResult(DecodeStatus.OVERFLOW)


def decode_bool(raw: str) -> DecodeResult:
    if raw in ("1", "true"):
        return _success(True)
    if raw in ("0", "false"):
        return _success(False)
    return ERROR


def decode_integer(raw: str, value_type: type) -> DecodeResult:
    bounded = issubclass(value_type, BoundedInt)
    grammar = (
        UNSIGNED_INTEGER if bounded and not value_type.signed else SIGNED_INTEGER
    )
    if not grammar.fullmatch(raw):
        return ERROR
    sign = "-" if raw.startswith("-") else ""
    digits = raw.lstrip("-").lstrip("0") or "0"
    if bounded:
        widest = max(len(str(value_type.minimum)), len(str(value_type.maximum)))
        if len(digits) > widest:
            return OVERFLOW
    try:
        value = int(sign + digits)
    except ValueError:
        # longer than the interpreter's integer string conversion limit
        return ERROR
    if bounded and not value_type.minimum <= value <= value_type.maximum:
        return OVERFLOW
    return _success(value)


def decode_float(raw: str) -> DecodeResult:
    if not FLOATING_POINT.fullmatch(raw):
        return ERROR
    value = float(raw)
    mantissa = re.split(r"[eE]", raw, maxsplit=1)[0]
    if math.isinf(value) and not mantissa.lstrip("-").isalpha():
        return OVERFLOW
    if value == 0.0 and any(digit in "123456789" for digit in mantissa):
        return OVERFLOW
    return _success(value)


def enumeration_names(enum_type: type[Enum]) -> Mapping[str, Enum]:
    """
    Return the key to member mapping used to decode an enumeration.

    An enumeration may define a `__enumeration_names__` mapping to expose custom
    keys. Otherwise the member names (including aliases) are used.
    """
    names = getattr(enum_type, "__enumeration_names__", None)
    if names is not None:
        return dict(names)
    return dict(enum_type.__members__)


def _sorted_keys(names: Mapping[str, Enum]) -> list[str]:
    pairs = list(names.items())
    try:
        pairs.sort(key=lambda pair: (pair[1].value, pair[0]))
    except TypeError:
        pairs.sort(key=lambda pair: pair[0])
    keys: list[str] = []
    for key, _ in pairs:
        if key not in keys:
            keys.append(key)
    return keys


def decode_enum(raw: str, enum_type: type[Enum]) -> DecodeResult:
    """
    Look up an enumeration member by exact key.

    Raises:
        InvalidEnumerationKeyError: If `raw` is not a key of the enumeration.
    """
    names = enumeration_names(enum_type)
    if raw not in names:
        keys = ", ".join(_sorted_keys(names))
        raise InvalidEnumerationKeyError(
            f"You have chosen an invalid input value: {raw}. Please use one of: [{keys}]"
        )
    return _success(names[raw])


def decode(raw: str, value_type: Any) -> DecodeResult:
    """
    Decode a token into a value of `value_type`.

    For a `list[T]` container type the element type `T` is decoded. Use
    `decode_into` to append the element to an existing list.

    Args:
        raw (str): The token to decode.
        value_type (Any): The target type.

    Returns:
        DecodeResult: The outcome of decoding.

    Raises:
        InvalidEnumerationKeyError: If an enumeration key is not known.
    """
    if is_container(value_type):
        return decode(raw, element_type(value_type))
    if value_type is str:
        return _success(raw)
    if value_type is bool:
        return decode_bool(raw)
    if isinstance(value_type, type) and issubclass(value_type, Enum):
        return decode_enum(raw, value_type)
    if isinstance(value_type, type) and issubclass(value_type, int):
        return decode_integer(raw, value_type)
    if value_type is float:
        return decode_float(raw)
    if value_type is datetime:
        try:
            return _success(date_parser.parse(raw))
        except (ValueError, OverflowError):
            return ERROR
    try:
        return _success(value_type(raw))
    except (ValueError, TypeError):
        return ERROR


def decode_into(target: list[Any], raw: str, value_type: Any) -> DecodeResult:
    """Decode a container element and append it to `target` on success."""
    result = decode(raw, value_type)
    if result.ok:
        target.append(result.value)
    return result


def _valid_range(value_type: Any) -> tuple[Any, Any] | None:
    if isinstance(value_type, type) and issubclass(value_type, BoundedInt):
        return value_type.minimum, value_type.maximum
    if value_type is float:
        return -sys.float_info.max, sys.float_info.max
    return None


def check_decode_result(
    result: DecodeResult, name: str, raw: str, value_type: Any
) -> None:
    """
    Raise the user-facing error for a failed decode.

    Args:
        result (DecodeResult): The outcome returned by `decode`.
        name (str): The option or positional label, e.g. "-n" or "positional option 1".
        raw (str): The original token.
        value_type (Any): The declared value type.

    Raises:
        ValueDecodeError: If decoding failed.
        ValueOverflowError: If the value is outside the representable range.
    """
    if result.ok:
        return
    if is_container(value_type):
        value_type = element_type(value_type)
    message = f"Value parse failed for {name}: "
    if result.status is DecodeStatus.OVERFLOW:
        bounds = _valid_range(value_type)
        if bounds is not None:
            minimum, maximum = bounds
            raise ValueOverflowError(
                f"{message}Numeric argument {raw} is not in the valid range "
                f"[{minimum},{maximum}]."
            )
    raise ValueDecodeError(
        f"{message}Argument {raw} could not be parsed as type {type_name(value_type)}."
    )
