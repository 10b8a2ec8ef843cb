# Flagwright CLI Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value validators for Flagwright bindings.

A validator is called with a decoded value and returns a `ValidationResult`
instead of raising, so the parser decides how a rejection is reported. Container
values (lists) are checked element by element and the first failure is returned.

Validators can be chained with `|`; the chain stops at the first failure.

Included Validators:
- AnyValue: Accepts every value (the default).
- ArithmeticRange: Enforces a numeric value within an inclusive range.
- ValueList: Restricts the value to a fixed set of choices.
- RegexMatch: Requires the string form of the value to fully match a pattern.
- PathExists: Requires the value to name an existing file or directory.
- Validator.from_callable: Wraps a predicate into a validator.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a value."""

    valid: bool
    message: str = ""

    @classmethod
    def success(cls) -> ValidationResult:
        return cls(True)

    @classmethod
    def failure(cls, message: str) -> ValidationResult:
        return cls(False, message)

    def __bool__(self) -> bool:
        return self.valid


class Validator:
    """Base class for validators. Subclasses implement `check` for one value."""

    def check(self, value: Any) -> ValidationResult:
        return ValidationResult.success()

    def help_text(self) -> str:
        """Short description appended to the help entry of a binding."""
        return ""

    def __call__(self, value: Any) -> ValidationResult:
        if isinstance(value, list):
            for item in value:
                result = self.check(item)
                if not result:
                    return result
            return ValidationResult.success()
        return self.check(value)

    def __or__(self, other: Validator) -> Validator:
        if not isinstance(other, Validator):
            return NotImplemented
        return ChainedValidator(self, other)

    @classmethod
    def from_callable(
        cls,
        predicate: Callable[[Any], bool],
        error_message: str = "Invalid value.",
        help_text: str = "",
    ) -> Validator:
        """Create a validator from a predicate returning True for valid values."""
        return _CallableValidator(predicate, error_message, help_text)


class _CallableValidator(Validator):
    def __init__(
        self, predicate: Callable[[Any], bool], error_message: str, help_text: str
    ) -> None:
        self.predicate = predicate
        self.error_message = error_message
        self._help_text = help_text

    def check(self, value: Any) -> ValidationResult:
        if self.predicate(value):
            return ValidationResult.success()
        return ValidationResult.failure(self.error_message)

    def help_text(self) -> str:
        return self._help_text

    def __repr__(self) -> str:
        return f"Validator.from_callable({self.predicate!r})"


class ChainedValidator(Validator):
    """Runs several validators in order and returns the first failure."""

    def __init__(self, *validators: Validator) -> None:
        self.validators: list[Validator] = []
        for validator in validators:
            if isinstance(validator, ChainedValidator):
                self.validators.extend(validator.validators)
            else:
                self.validators.append(validator)

    def __call__(self, value: Any) -> ValidationResult:
        for validator in self.validators:
            result = validator(value)
            if not result:
                return result
        return ValidationResult.success()

    def help_text(self) -> str:
        return " ".join(
            text for text in (validator.help_text() for validator in self.validators) if text
        )


class AnyValue(Validator):
    """Accepts every value."""

    def __repr__(self) -> str:
        return "AnyValue()"


class ArithmeticRange(Validator):
    """Accepts numbers within `[minimum, maximum]`."""

    def __init__(self, minimum: float, maximum: float) -> None:
        if minimum > maximum:
            raise ValueError(
                f"ArithmeticRange minimum {minimum} is greater than maximum {maximum}"
            )
        self.minimum = minimum
        self.maximum = maximum

    def check(self, value: Any) -> ValidationResult:
        if not self.minimum <= value <= self.maximum:
            return ValidationResult.failure(
                f"Value {value} is not in range [{self.minimum},{self.maximum}]."
            )
        return ValidationResult.success()

    def help_text(self) -> str:
        return f"Value must be in range [{self.minimum},{self.maximum}]."

    def __repr__(self) -> str:
        return f"ArithmeticRange({self.minimum!r}, {self.maximum!r})"


class ValueList(Validator):
    """Accepts only the given values."""

    def __init__(self, values: Iterable[Any]) -> None:
        if isinstance(values, (str, dict)):
            raise TypeError("ValueList values must be a list, tuple or set")
        self.values = list(values)
        if not self.values:
            raise ValueError("ValueList requires at least one value")

    def _listing(self) -> str:
        return ", ".join(str(value) for value in self.values)

    def check(self, value: Any) -> ValidationResult:
        if value not in self.values:
            return ValidationResult.failure(
                f"Value {value} is not one of [{self._listing()}]."
            )
        return ValidationResult.success()

    def help_text(self) -> str:
        return f"Value must be one of [{self._listing()}]."

    def __repr__(self) -> str:
        return f"ValueList({self.values!r})"


class RegexMatch(Validator):
    """Accepts values whose string form fully matches `pattern`."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self._compiled = re.compile(pattern)

    def check(self, value: Any) -> ValidationResult:
        if not self._compiled.fullmatch(str(value)):
            return ValidationResult.failure(
                f"Value {value} did not match the regular expression {self.pattern}."
            )
        return ValidationResult.success()

    def help_text(self) -> str:
        return f"Value must match the pattern '{self.pattern}'."

    def __repr__(self) -> str:
        return f"RegexMatch({self.pattern!r})"


class PathExists(Validator):
    """Accepts paths that exist on disk."""

    def check(self, value: Any) -> ValidationResult:
        if not Path(value).exists():
            return ValidationResult.failure(f'The path "{value}" does not exist!')
        return ValidationResult.success()

    def help_text(self) -> str:
        return "The path must exist."

    def __repr__(self) -> str:
        return "PathExists()"


def as_validator(validator: Validator | Callable[[Any], Any] | None) -> Validator:
    """
    Normalize a binding validator.

    Accepts a `Validator`, None (meaning `AnyValue`), or a plain callable returning
    a `ValidationResult` or a bool. An exception raised by the callable rejects the
    value with the exception message.
    """
    if validator is None:
        return AnyValue()
    if isinstance(validator, Validator):
        return validator
    if not callable(validator):
        raise TypeError(f"validator must be callable, got {type(validator).__name__}")
    return _FunctionValidator(validator)


class _FunctionValidator(Validator):
    def __init__(self, function: Callable[[Any], Any]) -> None:
        self.function = function

    def check(self, value: Any) -> ValidationResult:
        try:
            result = self.function(value)
        except Exception as error:
            return ValidationResult.failure(str(error))
        if isinstance(result, ValidationResult):
            return result
        if result:
            return ValidationResult.success()
        return ValidationResult.failure(f"Value {value} was rejected.")

    def __repr__(self) -> str:
        return f"as_validator({self.function!r})"
