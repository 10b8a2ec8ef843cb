# Flagwright CLI Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Flagwright.

Two families exist. `DesignError` is raised while bindings are being declared and
signals a mistake by the developer wiring the parser. `UserInputError` and its
subclasses are raised by `parse()` and describe a problem with the command line
the end user typed. Their messages are single, plain-text lines meant to be shown
to that user as-is.

Exception Hierarchy:
- FlagwrightError
    ├── DesignError
    └── ParserError
        └── UserInputError
            ├── MissingValueError
            ├── ValueDecodeError
            ├── ValueOverflowError
            ├── InvalidEnumerationKeyError
            ├── MultipleDeclarationsError
            ├── ValidationFailedError
            ├── RequiredOptionMissingError
            ├── UnknownIdentifierError
            │   ├── MalformedFlagClusterError
            │   └── UnknownOptionError
            ├── TooFewArgumentsError
            └── TooManyArgumentsError
"""


class FlagwrightError(Exception):
    """Base exception for Flagwright."""


class DesignError(FlagwrightError):
    """Exception raised when the parser is declared incorrectly."""


class ParserError(FlagwrightError):
    """Exception raised while parsing the command line."""


class UserInputError(ParserError):
    """Exception raised when the command line given by the user is invalid."""


class MissingValueError(UserInputError):
    """Exception raised when an option identifier is not followed by a value."""


class ValueDecodeError(UserInputError):
    """Exception raised when a value cannot be converted to the target type."""


class ValueOverflowError(UserInputError):
    """Exception raised when a numeric value is outside the range of its type."""


class InvalidEnumerationKeyError(UserInputError):
    """Exception raised when a value is not a key of the target enumeration."""


class MultipleDeclarationsError(UserInputError):
    """Exception raised when a non-container option is given more than once."""


class ValidationFailedError(UserInputError):
    """Exception raised when a validator rejects a decoded value."""


class RequiredOptionMissingError(UserInputError):
    """Exception raised when a required option was not given."""


class UnknownIdentifierError(UserInputError):
    """Exception raised when a token looks like an identifier but matches none."""

    def __init__(self, message: str, token: str):
        super().__init__(message)
        self.token = token


class MalformedFlagClusterError(UnknownIdentifierError):
    """Exception raised when a group of short flags contains unknown flags."""


class UnknownOptionError(UnknownIdentifierError):
    """Exception raised when a short or long identifier is not declared."""


class TooFewArgumentsError(UserInputError):
    """Exception raised when fewer positional arguments are given than declared."""


class TooManyArgumentsError(UserInputError):
    """Exception raised when tokens remain after every binding was resolved."""
