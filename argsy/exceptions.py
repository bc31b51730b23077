# Argsy CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Argsy.

The hierarchy separates the three moments an error can surface: while
options are being declared (programmer error), while tokens are being parsed
(user input error) and while parsed values are being read back or validated.

Exception Hierarchy:
- ArgsyError
    ├── RegistrationError
    │    ├── OptionAlreadyExistsError
    │    ├── OptionDefinitionError
    │    └── ConfigError
    ├── ParseError
    │    ├── ParseSyntaxError
    │    ├── MissingRequiredError
    │    └── InvalidValueError
    └── ArgsError
         ├── UnknownOptionError
         ├── NotPresentError
         ├── IncorrectTypeError
         ├── RuleTypeError
         └── ValidationFailedError

Every message is optionally scoped as `<scope>: <message>`, where the scope is
an option key or the stage that failed (e.g. `parse`).
"""
from __future__ import annotations

from typing import Any, Sequence

SCOPE_PARSE = "parse"


def type_name(value_type: Any) -> str:
    """Return a readable name for a type object."""
    return getattr(value_type, "__name__", str(value_type))


class ArgsyError(Exception):
    """Base exception for Argsy."""

    def __init__(self, scope: str, message: str) -> None:
        self.scope = scope
        self.message = message
        super().__init__(f"{scope}: {message}" if scope else message)


class RegistrationError(ArgsyError):
    """Exception raised when an option cannot be declared."""


class OptionAlreadyExistsError(RegistrationError):
    """Exception raised when a short or long key is already registered."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(key, "an option with this key is already registered")


class OptionDefinitionError(RegistrationError):
    """Exception raised when an option declaration is malformed."""


class ConfigError(RegistrationError):
    """Exception raised when a configuration file cannot be turned into options."""


class ParseError(ArgsyError):
    """Exception raised when a token list cannot be resolved into values."""


class ParseSyntaxError(ParseError):
    """Exception raised when the token stream itself is malformed."""

    def __init__(self, details: str) -> None:
        self.details = details
        super().__init__(SCOPE_PARSE, details)


class MissingRequiredError(ParseError):
    """Exception raised when a required option has no value and no default."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(SCOPE_PARSE, f"required option '{key}' missing")


class InvalidValueError(ParseError):
    """Exception raised when a raw string cannot be coerced to the option type."""

    def __init__(self, key: str, raw: str, target_type: Any, reason: str = "") -> None:
        self.key = key
        self.raw = raw
        self.type_name = type_name(target_type)
        message = f"unable to parse '{raw}' as {self.type_name}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(key, message)


class ArgsError(ArgsyError):
    """Exception raised when a parsed value cannot be read back or validated."""


class UnknownOptionError(ArgsError):
    """Exception raised when a lookup names an option that was never registered."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(key, "no such option is registered")


class NotPresentError(ArgsError):
    """Exception raised when an option has no value and no default."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(key, "does not have a value")


class IncorrectTypeError(ArgsError):
    """Exception raised when a value is requested as a type it was not stored as."""

    def __init__(self, key: str, expected: Any, actual: Any) -> None:
        self.key = key
        self.expected = expected
        self.actual = actual
        super().__init__(
            key,
            f"requested as {type_name(expected)} but holds {type_name(actual)}",
        )


class RuleTypeError(ArgsError):
    """Exception raised when a rule bound cannot be compared with a value."""


class ValidationFailedError(ArgsError):
    """Exception raised when one or more validation rules fail for a value."""

    def __init__(self, key: str, value: Any, reasons: Sequence[str]) -> None:
        self.key = key
        self.value = value
        self.reasons = list(reasons)
        super().__init__(key, f"{value!r} " + "; ".join(self.reasons))
