# Argsy CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Input validators for use with Prompt Toolkit when an Argsy program asks for an
option value interactively instead of reading it from the command line.

The same coercion and `ValidationRule` chains used by `ArgsRegistry` are applied
to the typed text, so a prompted value is held to exactly the rules a command
line value would be.

Included Validators:
- OptionValidator: Coerces input to a scalar type and runs a rule chain.
- option_validator: Builds an `OptionValidator` from a registered option.
- int_range_validator: Enforces integer input within an inclusive range.
"""
from __future__ import annotations

from typing import Any, Sequence

from prompt_toolkit.document import Document
from prompt_toolkit.validation import ValidationError, Validator

from argsy.coerce import coerce_value
from argsy.exceptions import RuleTypeError, UnknownOptionError, type_name
from argsy.registry import ArgsRegistry
from argsy.validation import ValidationRule, check_rules, in_range


class OptionValidator(Validator):
    """Validates prompt input as `value_type`, then against `rules`."""

    def __init__(
        self,
        value_type: Any = str,
        rules: Sequence[ValidationRule] = (),
        allow_empty: bool = False,
    ) -> None:
        self.value_type = value_type
        self.rules = list(rules)
        self.allow_empty = allow_empty
        super().__init__()

    def validate(self, document: Document) -> None:
        text = document.text.strip()
        if not text:
            if self.allow_empty:
                return
            raise ValidationError(message="Enter a value.")
        try:
            value = coerce_value(text, self.value_type)
        except ValueError:
            raise ValidationError(
                message=f"Enter a valid {type_name(self.value_type)} value.",
                cursor_position=len(document.text),
            ) from None
        try:
            reasons = check_rules(value, self.rules)
        except RuleTypeError as error:
            raise ValidationError(message=error.message) from error
        if reasons:
            raise ValidationError(
                message=f"Invalid input. Value {'; '.join(reasons)}.",
                cursor_position=len(document.text),
            )


def option_validator(
    registry: ArgsRegistry, key: str, rules: Sequence[ValidationRule] = ()
) -> OptionValidator:
    """Validator for the option registered under `key`."""
    schema = registry.get_option(key)
    if schema is None:
        raise UnknownOptionError(key)
    return OptionValidator(
        schema.type, rules, allow_empty=not schema.is_required
    )


def int_range_validator(minimum: int, maximum: int) -> Validator:
    """Validator for integer ranges."""
    return OptionValidator(int, in_range(minimum, maximum))
