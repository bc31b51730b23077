# Argsy CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains value coercion utilities for Argsy option parsing.

Raw command line values always arrive as strings. These helpers turn them into
the scalar type an option was declared with: `bool`, `int`, `float`, `str`,
`Path`, `datetime` or any `Enum` subclass.

Functions:
- coerce_bool: Convert a string to a boolean.
- coerce_enum: Resolve a string to an Enum member by name or value.
- coerce_value: Convert a string to a supported target type.
- is_supported_type: Check whether a type can be used for an option.
"""
from datetime import datetime
from enum import Enum, EnumMeta
from pathlib import Path
from typing import Any

from dateutil import parser as date_parser

SCALAR_TYPES: tuple[type, ...] = (bool, int, float, str, Path, datetime)


def is_supported_type(target_type: Any) -> bool:
    """Return True if options may be declared with `target_type`."""
    if target_type in SCALAR_TYPES:
        return True
    return isinstance(target_type, EnumMeta) and issubclass(target_type, Enum)


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts various truthy and falsy representations such as 'true', 'yes', '0', 'off'.

    Raises:
        ValueError: If the string is not a recognised boolean spelling.
    """
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in {"true", "t", "1", "yes", "y", "on"}:
        return True
    elif normalized in {"false", "f", "0", "no", "n", "off"}:
        return False
    raise ValueError(f"'{value}' is not a boolean")


def coerce_enum(value: Any, enum_type: EnumMeta) -> Any:
    """Resolve `value` to a member of `enum_type` by member name or by value text."""
    if isinstance(value, enum_type):
        return value
    text = str(value).strip()
    if text in enum_type.__members__:
        return enum_type[text]
    for member in enum_type:
        if str(member.value) == text:
            return member
    choices = ", ".join(str(member.value) for member in enum_type)
    raise ValueError(
        f"'{value}' is not a valid {enum_type.__name__}; choose from: {choices}"
    )


def coerce_value(value: str, target_type: type) -> Any:
    """
    Convert a string to the given target type.

    Args:
        value (str): The raw string from the command line or a config file.
        target_type (type): One of the supported scalar types.

    Returns:
        Any: The coerced value, an instance of `target_type`.

    Raises:
        ValueError: If conversion fails or the value is invalid.
        TypeError: If `target_type` is not supported.
    """
    if not is_supported_type(target_type):
        raise TypeError(f"Unsupported option type: {target_type!r}")

    if isinstance(target_type, EnumMeta):
        return coerce_enum(value, target_type)

    if target_type is bool:
        return coerce_bool(value)

    if target_type is datetime:
        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError) as error:
            raise ValueError(f"'{value}' could not be parsed as a datetime") from error

    return target_type(value)
