# Argsy CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Declare Argsy options from a YAML or TOML file instead of code.

Example (YAML):
    program: program
    description: Run this program
    flags:
      - {short: h, long: help, description: Print the usage menu}
    options:
      - short: i
        long: iter
        description: The number of times to run this program
        hint: TIMES
        occurrence: required
        type: int
"""
from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from argsy.exceptions import ConfigError
from argsy.logger import logger
from argsy.occurrence import Occurrence
from argsy.registry import ArgsRegistry

TYPE_NAMES: dict[str, type] = {
    "bool": bool,
    "int": int,
    "float": float,
    "str": str,
    "string": str,
    "path": Path,
    "datetime": datetime,
}


class RawFlag(BaseModel):
    """Raw flag model for Argsy configuration."""

    short: str = ""
    long: str = ""
    description: str = ""


class RawOption(RawFlag):
    """Raw option model for Argsy configuration."""

    hint: str = ""
    occurrence: Occurrence = Occurrence.OPTIONAL
    default: Any = None
    type: str = "str"

    @field_validator("occurrence", mode="before")
    @classmethod
    def validate_occurrence(cls, value: Any) -> Occurrence:
        return Occurrence(value)

    @field_validator("type")
    @classmethod
    def validate_type(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in TYPE_NAMES:
            valid = ", ".join(TYPE_NAMES)
            raise ValueError(f"Invalid type '{value}'. Must be one of: {valid}")
        return normalized

    def value_type(self) -> type:
        return TYPE_NAMES[self.type]


class RawRegistry(BaseModel):
    """Argsy configuration model."""

    program: str | None = None
    description: str = ""
    flags: list[RawFlag] = Field(default_factory=list)
    options: list[RawOption] = Field(default_factory=list)

    def to_registry(self) -> ArgsRegistry:
        registry = ArgsRegistry(self.program, self.description)
        for raw_flag in self.flags:
            registry.flag(raw_flag.short, raw_flag.long, raw_flag.description)
        for raw_option in self.options:
            registry.option(
                raw_option.short,
                raw_option.long,
                raw_option.description,
                raw_option.hint,
                raw_option.occurrence,
                raw_option.default,
                type=raw_option.value_type(),
            )
        return registry


def loader(file_path: Path | str) -> ArgsRegistry:
    """
    Load option declarations from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the config file (`.yaml`, `.yml` or `.toml`).

    Returns:
        ArgsRegistry: A registry with every declared flag and option registered.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigError: If the file format is unsupported or its content is invalid.
    """
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        try:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigError(str(path), f"Unsupported config format: {suffix}")
        except (yaml.YAMLError, toml.TomlDecodeError) as error:
            raise ConfigError(str(path), f"could not be parsed: {error}") from error

    if not isinstance(raw_config, dict):
        raise ConfigError(
            str(path),
            "Configuration file must contain a mapping with 'flags' and/or 'options'",
        )

    try:
        config = RawRegistry.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigError(str(path), str(error)) from error

    logger.debug(
        "Loaded %d flags and %d options from '%s'",
        len(config.flags),
        len(config.options),
        path,
    )
    return config.to_registry()
