# Flagwright CLI Parsing — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Builds a `Parser` from a YAML or TOML declaration file."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence

import toml
import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from flagwright.logger import logger
from flagwright.parser.parser import Parser
from flagwright.types import resolve_type
from flagwright.validators import (
    ArithmeticRange,
    PathExists,
    RegexMatch,
    Validator,
    ValueList,
)


class RawValidation(BaseModel):
    """Validator keys shared by options and positionals."""

    range: tuple[int | float, int | float] | None = None
    choices: list[Any] | None = None
    regex: str | None = None
    exists: bool = False

    @model_validator(mode="after")
    def validate_range(self) -> RawValidation:
        if self.range is not None and self.range[0] > self.range[1]:
            raise ValueError("range must be [min, max] with min <= max")
        return self

    def build_validator(self) -> Validator | None:
        validators: list[Validator] = []
        if self.range is not None:
            validators.append(ArithmeticRange(*self.range))
        if self.choices:
            validators.append(ValueList(self.choices))
        if self.regex:
            validators.append(RegexMatch(self.regex))
        if self.exists:
            validators.append(PathExists())
        if not validators:
            return None
        combined = validators[0]
        for validator in validators[1:]:
            combined = combined | validator
        return combined


class RawIdentified(BaseModel):
    short_id: str = ""
    long_id: str = ""
    dest: str | None = None
    help: str = ""

    @model_validator(mode="after")
    def validate_ids(self) -> RawIdentified:
        if not self.short_id and not self.long_id:
            raise ValueError("At least one of short_id or long_id is required")
        return self

    def flags(self) -> list[str]:
        flags = []
        if self.short_id:
            flags.append(f"-{self.short_id}")
        if self.long_id:
            flags.append(f"--{self.long_id}")
        return flags


class RawOption(RawIdentified, RawValidation):
    """Option entry of a declaration file."""

    type: str = "str"
    required: bool = False
    default: Any = None

    @field_validator("type")
    @classmethod
    def validate_type(cls, value: str) -> str:
        resolve_type(value)
        return value


class RawFlag(RawIdentified):
    """Flag entry of a declaration file."""

    default: bool = False


class RawPositional(RawValidation):
    """Positional entry of a declaration file."""

    name: str
    type: str = "str"
    help: str = ""

    @field_validator("type")
    @classmethod
    def validate_type(cls, value: str) -> str:
        resolve_type(value)
        return value


class ParserConfig(BaseModel):
    """Declaration file model."""

    app_name: str
    short_description: str = ""
    version: str = ""
    description: list[str] = Field(default_factory=list)
    examples: list[str] = Field(default_factory=list)
    date: str = ""
    options: list[RawOption] = Field(default_factory=list)
    flags: list[RawFlag] = Field(default_factory=list)
    positionals: list[RawPositional] = Field(default_factory=list)

    def to_parser(self, arguments: Sequence[str] | None = None, **kwargs: Any) -> Parser:
        parser = Parser(
            self.app_name,
            arguments,
            version=self.version,
            short_description=self.short_description,
            **kwargs,
        )
        parser.metadata.description = list(self.description)
        parser.metadata.examples = list(self.examples)
        parser.metadata.date = self.date
        for option in self.options:
            parser.add_option(
                *option.flags(),
                type=resolve_type(option.type),
                default=option.default,
                required=option.required,
                validator=option.build_validator(),
                dest=option.dest,
                help=option.help,
            )
        for flag in self.flags:
            parser.add_flag(
                *flag.flags(), default=flag.default, dest=flag.dest, help=flag.help
            )
        for positional in self.positionals:
            parser.add_positional(
                positional.name,
                type=resolve_type(positional.type),
                validator=positional.build_validator(),
                help=positional.help,
            )
        return parser


def load_config(file_path: Path | str) -> ParserConfig:
    """
    Read and validate a declaration file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the format is unsupported or the document is not a mapping.
        pydantic.ValidationError: If an entry is malformed.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a mapping with an app_name.\n"
            "Example:\n"
            "app_name: demo\n"
            "options:\n"
            "  - short_id: n\n"
            "    long_id: number\n"
            "    type: int"
        )

    logger.debug("Loaded declaration file %s", path)
    return ParserConfig.model_validate(raw_config)


def loader(
    file_path: Path | str, arguments: Sequence[str] | None = None, **kwargs: Any
) -> Parser:
    """
    Build a `Parser` from a YAML or TOML declaration file.

    Args:
        file_path (Path | str): Path to the declaration file.
        arguments (Sequence[str] | None): Tokens to parse. Defaults to `sys.argv[1:]`.
        **kwargs: Passed on to `Parser` (e.g. `console`, `output`).

    Returns:
        Parser: A parser with every declaration registered, ready for `parse()`.
    """
    return load_config(file_path).to_parser(arguments, **kwargs)
