# Flagwright CLI Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `TokenResolver`, the format that performs the actual
command-line parsing for a `Parser`.

Declarations are recorded as `Binding` records and only evaluated when `parse()`
runs, because the order in which identifiers are matched decides how ambiguous
tokens are read. A token like `-g4` is either option `g` with value `4` or flag `g`
followed by the positional `4`; resolving all options before any flag settles it.

Order of parsing:
1. Options          (in declaration order)
2. Flags            (in declaration order)
3. Unknown identifiers: every remaining token before "--" that starts with a dash
4. Positionals      (in declaration order; "--" is dropped first)
5. Leftover tokens: anything not consumed is too many arguments

Each phase consumes the tokens it matched in the shared `TokenBuffer`, so later
phases never see them again. This is also how an option given twice is detected.
The first error aborts the parse.

Example Usage:
    resolver = TokenResolver(["-n", "5", "-v", "file.txt"])
    resolver.add_option(Binding(BindingKind.OPTION, "number", IdPair("n", "number"), int))
    resolver.add_flag(Binding(BindingKind.FLAG, "verbose", IdPair("v"), bool, False))
    resolver.add_positional(Binding(BindingKind.POSITIONAL, "file"))
    resolver.parse()  # {'number': 5, 'verbose': True, 'file': 'file.txt'}
"""
from __future__ import annotations

from copy import deepcopy
from typing import Any, Sequence

from flagwright.exceptions import (
    DesignError,
    MalformedFlagClusterError,
    MissingValueError,
    MultipleDeclarationsError,
    RequiredOptionMissingError,
    TooFewArgumentsError,
    TooManyArgumentsError,
    UnknownOptionError,
    ValidationFailedError,
)
from flagwright.logger import logger
from flagwright.parser.binding import Binding, BindingKind
from flagwright.parser.codec import check_decode_result, decode, decode_into
from flagwright.parser.metadata import ParserMetadata
from flagwright.parser.token_buffer import TokenBuffer

UNKNOWN_HINT = (
    "In case this is meant to be a non-option/argument/parameter, please specify "
    "the start of {what} with '--'. See -h/--help for program information."
)


def expand_multiple_flags(token: str) -> str:
    """Spell out a group of short flags: "-abc" -> "-a, -b and -c"."""
    flags = [f"-{char}" for char in token[1:]]
    if len(flags) == 1:
        return flags[0]
    return f"{', '.join(flags[:-1])} and {flags[-1]}"


class TokenResolver:
    """
    Parse-only format: resolves command-line tokens against declared bindings.

    The help-related calls of the format interface (`add_section`, `add_line`, ...)
    are accepted and ignored.
    """

    def __init__(self, arguments: Sequence[str]) -> None:
        self.buffer: TokenBuffer = TokenBuffer(arguments)
        self._bindings: list[Binding] = []
        self._options: list[Binding] = []
        self._flags: list[Binding] = []
        self._positionals: list[Binding] = []
        self._positional_count: int = 0
        self._parsed: bool = False

    def add_option(self, binding: Binding) -> None:
        assert binding.kind is BindingKind.OPTION, "expected an option binding"
        self._bindings.append(binding)
        self._options.append(binding)

    def add_flag(self, binding: Binding) -> None:
        assert binding.kind is BindingKind.FLAG, "expected a flag binding"
        self._bindings.append(binding)
        self._flags.append(binding)

    def add_positional(self, binding: Binding) -> None:
        assert binding.kind is BindingKind.POSITIONAL, "expected a positional binding"
        assert not (
            self._positionals and self._positionals[-1].is_container
        ), "a container positional must be declared last"
        self._bindings.append(binding)
        self._positionals.append(binding)

    def add_section(self, title: str) -> None:
        pass

    def add_subsection(self, title: str) -> None:
        pass

    def add_line(self, text: str, is_paragraph: bool = False) -> None:
        pass

    def add_list_item(self, key: str, description: str) -> None:
        pass

    def parse(self, metadata: ParserMetadata | None = None) -> dict[str, Any]:
        """
        Resolve all tokens and return the parsed values keyed by `dest`.

        Absent optional bindings keep a copy of their default.

        Raises:
            UserInputError: The first violation found, in phase order.
            DesignError: If called more than once.
        """
        if self._parsed:
            raise DesignError("parse() can only be called once per resolver")
        self._parsed = True

        result = {binding.dest: deepcopy(binding.default) for binding in self._bindings}
        logger.debug("Parsing %d tokens: %s", len(self.buffer), self.buffer)

        for binding in self._options:
            self._get_option(binding, result)
        for binding in self._flags:
            self._get_flag(binding, result)

        self._check_for_unknown_ids()
        self.buffer.close_options()

        for binding in self._positionals:
            self._get_positional(binding, result)

        self._check_for_left_over_args()
        logger.debug("Parsed result: %s", result)
        return result

    def _retrieve_raw_value(self, index: int, identifier: str) -> str:
        """Extract the value string of the option token at `index` and consume it."""
        token = self.buffer[index]
        size = len(identifier)
        self.buffer.consume(index)

        if len(token) > size:
            if token[size] == "=":
                if len(token) == size + 1:
                    raise MissingValueError(f"Missing value for option {identifier}")
                return token[size + 1 :]
            return token[size:]

        value_index = index + 1
        if value_index >= self.buffer.end_of_options or not self.buffer.is_live(
            value_index
        ):
            raise MissingValueError(f"Missing value for option {identifier}")
        self.buffer.consume(value_index)
        return self.buffer[value_index]

    def _decode(self, binding: Binding, raw: str, name: str) -> Any:
        result = decode(raw, binding.value_type)
        check_decode_result(result, name, raw, binding.value_type)
        return result.value

    def _decode_into(
        self, binding: Binding, target: list[Any], raw: str, name: str
    ) -> None:
        result = decode_into(target, raw, binding.value_type)
        check_decode_result(result, name, raw, binding.value_type)

    def _get_scalar_option(
        self, binding: Binding, identifier: str, result: dict[str, Any]
    ) -> bool:
        index = self.buffer.find_option(identifier)
        if index is None:
            return False

        raw = self._retrieve_raw_value(index, identifier)
        result[binding.dest] = self._decode(binding, raw, identifier)

        if self.buffer.find_option(identifier, index + 1) is not None:
            raise MultipleDeclarationsError(
                f"Option {identifier} is no list/container but declared multiple times."
            )
        return True

    def _get_container_option(self, binding: Binding, result: dict[str, Any]) -> bool:
        assert binding.ids is not None
        identifiers = [
            identifier
            for identifier in (binding.ids.short_token, binding.ids.long_token)
            if identifier
        ]
        values: list[Any] = []
        seen = False
        start = 0
        while True:
            matches = []
            for identifier in identifiers:
                index = self.buffer.find_option(identifier, start)
                if index is not None:
                    matches.append((index, identifier))
            if not matches:
                break
            index, identifier = min(matches)
            seen = True
            raw = self._retrieve_raw_value(index, identifier)
            self._decode_into(binding, values, raw, identifier)
            start = index + 1

        if seen:
            result[binding.dest] = values
        return seen

    def _get_option(self, binding: Binding, result: dict[str, Any]) -> None:
        assert binding.ids is not None
        name = binding.ids.display()
        logger.debug("Resolving option %s", name)

        if binding.is_container:
            is_set = self._get_container_option(binding, result)
        else:
            short_is_set = self._get_scalar_option(
                binding, binding.ids.short_token, result
            )
            long_is_set = self._get_scalar_option(binding, binding.ids.long_token, result)
            if short_is_set and long_is_set:
                raise MultipleDeclarationsError(
                    f"Option {name} is no list/container but specified multiple times"
                )
            is_set = short_is_set or long_is_set

        if is_set:
            validation = binding.validator(result[binding.dest])
            if not validation:
                raise ValidationFailedError(
                    f"Validation failed for option {name}: {validation.message}"
                )
        elif binding.required:
            raise RequiredOptionMissingError(f"Option {name} is required but not set.")

    def _get_flag(self, binding: Binding, result: dict[str, Any]) -> None:
        assert binding.ids is not None
        found_short = False
        if binding.ids.short_id:
            while self.buffer.take_short_flag(binding.ids.short_id):
                found_short = True
        found_long = False
        if binding.ids.long_id:
            while self.buffer.take_long_flag(binding.ids.long_token):
                found_long = True
        result[binding.dest] = found_short or found_long or bool(binding.default)
        logger.debug("Flag %s resolved to %s", binding.ids, result[binding.dest])

    def _check_for_unknown_ids(self) -> None:
        """Raise for any identifier-like token left before the end-of-options marker."""
        for index in self.buffer.live_indices(0, self.buffer.end_of_options):
            token = self.buffer[index]
            if not token.startswith("-") or token == "-":
                continue
            if token[1] != "-" and len(token) > 2:
                raise MalformedFlagClusterError(
                    f"Unknown flags {expand_multiple_flags(token)}. "
                    + UNKNOWN_HINT.format(what="arguments"),
                    token,
                )
            raise UnknownOptionError(
                f"Unknown option {token}. " + UNKNOWN_HINT.format(what="non-options"),
                token,
            )

    def _validate_positional(self, binding: Binding, value: Any) -> None:
        validation = binding.validator(value)
        if not validation:
            raise ValidationFailedError(
                f"Validation failed for positional option {self._positional_count}: "
                f"{validation.message}"
            )

    def _get_positional(self, binding: Binding, result: dict[str, Any]) -> None:
        self._positional_count += 1
        index = self.buffer.next_live()
        if index is None:
            raise TooFewArgumentsError(
                "Not enough positional arguments provided (Need at least "
                f"{len(self._positionals)}). See -h/--help for more information."
            )

        if not binding.is_container:
            raw = self.buffer[index]
            value = self._decode(binding, raw, f"positional option {self._positional_count}")
            self.buffer.consume(index)
            self._validate_positional(binding, value)
            result[binding.dest] = value
            return

        values: list[Any] = []
        result[binding.dest] = values
        while index is not None:
            raw = self.buffer[index]
            self._decode_into(
                binding, values, raw, f"positional option {self._positional_count}"
            )
            self.buffer.consume(index)
            self._validate_positional(binding, values[-1])
            index = self.buffer.next_live(index + 1)
            if index is not None:
                self._positional_count += 1

    def _check_for_left_over_args(self) -> None:
        remaining = self.buffer.remaining()
        if remaining:
            logger.debug("Unconsumed tokens: %s", remaining)
            raise TooManyArgumentsError(
                "Too many arguments provided. Please see -h/--help for more information."
            )

    def __repr__(self) -> str:
        return (
            f"TokenResolver(options={len(self._options)}, flags={len(self._flags)}, "
            f"positionals={len(self._positionals)})"
        )
