# Flagwright CLI Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `TokenBuffer`, the mutable view over the command-line tokens that the
token resolver consumes phase by phase.

Tokens are never removed. A parallel consumed bitset marks the slots already used
by an earlier match, so indices stay stable while several passes walk the buffer,
and a genuinely empty argument ("") stays distinguishable from a used slot.

The buffer also tracks the end-of-options marker: the index of the first literal
"--" (or the buffer length). Option and flag searches never look at or past it.
"""
from __future__ import annotations

from typing import Iterable, Iterator

END_OF_OPTIONS = "--"


class TokenBuffer:
    """Fixed-size token sequence with consumed-slot tracking."""

    def __init__(self, tokens: Iterable[str]) -> None:
        self._tokens: list[str] = list(tokens)
        self._consumed: list[bool] = [False] * len(self._tokens)
        try:
            self.end_of_options: int = self._tokens.index(END_OF_OPTIONS)
        except ValueError:
            self.end_of_options = len(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __getitem__(self, index: int) -> str:
        return self._tokens[index]

    def is_live(self, index: int) -> bool:
        """Return True if the slot exists and was not consumed."""
        return 0 <= index < len(self._tokens) and not self._consumed[index]

    def consume(self, index: int) -> None:
        self._consumed[index] = True

    def live_indices(self, start: int = 0, stop: int | None = None) -> Iterator[int]:
        """Yield the indices of live tokens in `[start, stop)`."""
        stop = len(self._tokens) if stop is None else stop
        for index in range(max(start, 0), stop):
            if not self._consumed[index]:
                yield index

    def next_live(self, start: int = 0) -> int | None:
        """Return the first live index at or after `start`, searching the whole buffer."""
        return next(self.live_indices(start), None)

    def find_option(self, identifier: str, start: int = 0) -> int | None:
        """
        Find the first live token before the end-of-options marker matching an
        option identifier.

        A short identifier "-c" matches every token starting with "-c" ("-cVALUE",
        "-c=VALUE" and "-c" followed by a separate value). A long identifier
        "--name" matches "--name" exactly or any token starting with "--name=".

        Args:
            identifier (str): "-c" or "--name"; an empty string never matches.
            start (int): Index to start searching from.

        Returns:
            int | None: Index of the matching token, or None.
        """
        if not identifier:
            return None
        is_long = identifier.startswith("--")
        for index in self.live_indices(start, self.end_of_options):
            token = self._tokens[index]
            if is_long:
                if token == identifier or token.startswith(identifier + "="):
                    return index
            elif token.startswith(identifier):
                return index
        return None

    def take_long_flag(self, identifier: str) -> bool:
        """Consume the first token equal to `identifier` ("--name") before the marker."""
        for index in self.live_indices(0, self.end_of_options):
            if self._tokens[index] == identifier:
                self.consume(index)
                return True
        return False

    def take_short_flag(self, short_id: str) -> bool:
        """
        Remove one occurrence of a short flag character from the tokens before the
        marker.

        Short flags may be grouped ("-rGv" is "-r -G -v"), so the character is
        removed from the first single-dash token that contains it. A token reduced
        to "-" is consumed.
        """
        for index in self.live_indices(0, self.end_of_options):
            token = self._tokens[index]
            if len(token) > 1 and token[0] == "-" and token[1] != "-":
                position = token.find(short_id, 1)
                if position != -1:
                    token = token[:position] + token[position + 1 :]
                    self._tokens[index] = token
                    if token == "-":
                        self.consume(index)
                    return True
        return False

    def close_options(self) -> None:
        """Consume the end-of-options marker so it is not read as a positional."""
        if self.end_of_options < len(self._tokens):
            self.consume(self.end_of_options)

    def remaining(self) -> list[str]:
        """Return the live tokens in order."""
        return [self._tokens[index] for index in self.live_indices()]

    def __repr__(self) -> str:
        return (
            f"TokenBuffer(tokens={self._tokens!r}, remaining={self.remaining()!r}, "
            f"end_of_options={self.end_of_options})"
        )
