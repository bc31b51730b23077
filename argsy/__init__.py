"""
Argsy CLI Arguments

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .exceptions import (
    ArgsError,
    ArgsyError,
    IncorrectTypeError,
    InvalidValueError,
    MissingRequiredError,
    NotPresentError,
    ParseError,
    ParseSyntaxError,
    RegistrationError,
    ValidationFailedError,
)
from .occurrence import Occurrence
from .option import OptionSchema
from .registry import ArgsRegistry
from .typed_value import TypedValue
from .validation import Order, ValidationRule, in_range

__all__ = [
    "ArgsRegistry",
    "ArgsError",
    "ArgsyError",
    "IncorrectTypeError",
    "InvalidValueError",
    "MissingRequiredError",
    "NotPresentError",
    "Occurrence",
    "OptionSchema",
    "Order",
    "ParseError",
    "ParseSyntaxError",
    "RegistrationError",
    "TypedValue",
    "ValidationFailedError",
    "ValidationRule",
    "in_range",
]
