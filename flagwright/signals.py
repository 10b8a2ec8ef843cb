# Flagwright CLI Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals raised by Flagwright.

Signals inherit from `FlowSignal`, a subclass of `BaseException`, so they pass
through `except Exception` blocks. They report that the parser did something other
than parsing (e.g. printed the help page) and the program should stop.

Signals:
- HelpSignal: Help or a man page was rendered instead of parsing.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in Flagwright.

    These are not errors. They tell the caller that parsing did not produce values
    because the user asked for information instead.
    """


class HelpSignal(FlowSignal):
    """Raised after help output was rendered."""

    def __init__(self, message: str = "Help signal received."):
        super().__init__(message)
