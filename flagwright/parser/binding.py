# Flagwright CLI Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Binding` and `BindingKind`, the declarative records the token resolver
works on.

A binding links an identifier pair (options and flags) or a position (positionals)
to a result key (`dest`), a value type, a default, required-ness and a validator.
Bindings are plain data: the resolver dispatches on `kind` instead of calling
per-binding closures, which keeps the parse order fixed and the records easy to
inspect from help and man page renderers.

Whether a binding accumulates several values is derived from its value type: a
`list[T]` type makes it a container.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from flagwright.parser.identifier import IdPair
from flagwright.types import is_container, type_name
from flagwright.validators import AnyValue, Validator


class BindingKind(Enum):
    """The three kinds of bindings, resolved in this order."""

    OPTION = "option"
    FLAG = "flag"
    POSITIONAL = "positional"

    def __str__(self) -> str:
        return self.value


@dataclass
class Binding:
    """
    Represents one declared option, flag or positional argument.

    Attributes:
        kind (BindingKind): Option, flag or positional.
        dest (str): Key of the value in the parse result.
        ids (IdPair | None): Identifiers of an option or flag; None for positionals.
        value_type (Any): Target type, `list[T]` for containers. Always bool for flags.
        default (Any): Value kept when the binding is absent.
        required (bool): True if an option must be given.
        validator (Validator): Checks decoded values.
        help (str): Help text for rendering.
    """

    kind: BindingKind
    dest: str
    ids: IdPair | None = None
    value_type: Any = str
    default: Any = None
    required: bool = False
    validator: Validator = field(default_factory=AnyValue)
    help: str = ""

    @property
    def is_container(self) -> bool:
        return is_container(self.value_type)

    @property
    def is_positional(self) -> bool:
        return self.kind is BindingKind.POSITIONAL

    def display(self) -> str:
        """Return the identifier text ("-n/--number") or the positional name."""
        if self.ids is not None:
            return self.ids.display()
        return self.dest

    def get_value_text(self) -> str:
        """Return the placeholder shown after the identifier in help output."""
        if self.kind is BindingKind.FLAG:
            return ""
        text = f"({type_name(self.value_type)})"
        if self.is_container and self.is_positional:
            text = f"{self.dest.upper()}... {text}"
        elif self.is_positional:
            text = f"{self.dest.upper()} {text}"
        return text
