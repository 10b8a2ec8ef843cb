# Flagwright CLI Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `IdPair`, the short/long identifier pair of an option or flag.

A short identifier is a single character written as `-x` on the command line, a
long identifier is a word written as `--word`. At least one of the two must be
given and the pair cannot change once built.
"""
from __future__ import annotations

from dataclasses import dataclass

from flagwright.exceptions import DesignError


@dataclass(frozen=True)
class IdPair:
    """
    Short and long identifier of an option or flag, stored without dashes.

    Attributes:
        short_id (str): Single character identifier, or "" if absent.
        long_id (str): Word identifier, or "" if absent.
    """

    short_id: str = ""
    long_id: str = ""

    def __post_init__(self) -> None:
        if not self.short_id and not self.long_id:
            raise DesignError("Option identifiers cannot both be empty.")
        if self.short_id:
            if len(self.short_id) != 1:
                raise DesignError(
                    f"Short identifier '{self.short_id}' must be a single character."
                )
            if self.short_id == "-" or self.short_id.isspace():
                raise DesignError(
                    f"Short identifier '{self.short_id}' is not a valid identifier."
                )
        if self.long_id:
            if len(self.long_id) == 1:
                raise DesignError(
                    f"Long identifier '{self.long_id}' must be longer than one character."
                )
            if self.long_id.startswith("-"):
                raise DesignError(
                    f"Long identifier '{self.long_id}' must not start with a dash."
                )
            if any(char.isspace() or char == "=" for char in self.long_id):
                raise DesignError(
                    f"Long identifier '{self.long_id}' must not contain spaces or '='."
                )

    @classmethod
    def from_flags(cls, *flags: str) -> IdPair:
        """
        Build an identifier pair from command-line spellings such as "-n", "--number".

        Raises:
            DesignError: If a flag is malformed or more than one short or long
                identifier is given.
        """
        if not flags:
            raise DesignError("No identifiers provided")
        short_id = ""
        long_id = ""
        for flag in flags:
            if not isinstance(flag, str):
                raise DesignError(f"Identifier '{flag}' must be a string")
            if flag.startswith("--"):
                if long_id:
                    raise DesignError(
                        f"Only one long identifier is allowed, got '--{long_id}' and '{flag}'"
                    )
                long_id = flag[2:]
            elif flag.startswith("-"):
                if short_id:
                    raise DesignError(
                        f"Only one short identifier is allowed, got '-{short_id}' and '{flag}'"
                    )
                short_id = flag[1:]
            else:
                raise DesignError(
                    f"Identifier '{flag}' must start with '-' or '--'"
                )
        return cls(short_id=short_id, long_id=long_id)

    @property
    def short_token(self) -> str:
        return f"-{self.short_id}" if self.short_id else ""

    @property
    def long_token(self) -> str:
        return f"--{self.long_id}" if self.long_id else ""

    @property
    def dest(self) -> str:
        """Default result key: the long identifier, else the short one."""
        return (self.long_id or self.short_id).replace("-", "_")

    def display(self) -> str:
        """Return "-s/--long", or whichever form is set."""
        if not self.short_id:
            return self.long_token
        if not self.long_id:
            return self.short_token
        return f"{self.short_token}/{self.long_token}"

    def __str__(self) -> str:
        return self.display()
