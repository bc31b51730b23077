# Argsy CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Post-parse validation rules for Argsy option values.

A `ValidationRule` pairs an `Order` (the comparison operator) with a bound. Rules
are immutable and stateless, so the same rule can be reused across options and
chained with others against a single value:

    rules = [ValidationRule(Order.GREATER_THAN, 0), ValidationRule(Order.LESS_THAN_OR_EQUAL, 10)]
    iterations = args.validated_value_of("iter", int, rules)

`check_rules` runs every rule of a chain and returns the description of each
failure, in chain order, so callers can report all problems at once.
"""
from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable

from argsy.exceptions import RuleTypeError


class Order(Enum):
    """
    The relationship a value must have with a rule's bound.

    Members:
        LESS_THAN: value < bound
        LESS_THAN_OR_EQUAL: value <= bound
        GREATER_THAN: value > bound
        GREATER_THAN_OR_EQUAL: value >= bound
        EQUAL: value == bound
        NOT_EQUAL: value != bound
    """

    LESS_THAN = "less than"
    LESS_THAN_OR_EQUAL = "less than or equal to"
    GREATER_THAN = "greater than"
    GREATER_THAN_OR_EQUAL = "greater than or equal to"
    EQUAL = "equal to"
    NOT_EQUAL = "not equal to"

    @property
    def is_ordering(self) -> bool:
        return self not in (Order.EQUAL, Order.NOT_EQUAL)

    def compare(self, value: Any, bound: Any) -> bool:
        """
        Compare `value` to `bound` with this operator.

        Raises:
            RuleTypeError: If an ordering operator is applied to operands that
                cannot be ordered against each other.
        """
        try:
            return bool(_OPERATORS[self](value, bound))
        except TypeError as error:
            raise RuleTypeError(
                "validation",
                f"cannot compare {value!r} to {bound!r} with '{self}'",
            ) from error

    def __str__(self) -> str:
        return self.value


_OPERATORS: dict[Order, Callable[[Any, Any], Any]] = {
    Order.LESS_THAN: operator.lt,
    Order.LESS_THAN_OR_EQUAL: operator.le,
    Order.GREATER_THAN: operator.gt,
    Order.GREATER_THAN_OR_EQUAL: operator.ge,
    Order.EQUAL: operator.eq,
    Order.NOT_EQUAL: operator.ne,
}


@dataclass(frozen=True)
class ValidationRule:
    """
    An immutable comparison of a value against a fixed bound.

    Attributes:
        order (Order): The comparison operator.
        bound (Any): The value compared against. Ordering rules need a bound of
            the same ordered type as the value being checked.
    """

    order: Order
    bound: Any

    def is_valid(self, value: Any) -> bool:
        return self.order.compare(value, self.bound)

    def is_invalid(self, value: Any) -> bool:
        return not self.is_valid(value)

    def describe(self) -> str:
        """Human readable requirement, e.g. `must be greater than 0`."""
        return f"must be {self.order} {self.bound!r}"

    def __str__(self) -> str:
        return self.describe()


def check_rules(value: Any, rules: Iterable[ValidationRule]) -> list[str]:
    """Return the description of every rule `value` fails, in rule order."""
    return [rule.describe() for rule in rules if rule.is_invalid(value)]


def in_range(minimum: Any, maximum: Any) -> list[ValidationRule]:
    """Rules accepting `minimum <= value <= maximum`."""
    return [
        ValidationRule(Order.GREATER_THAN_OR_EQUAL, minimum),
        ValidationRule(Order.LESS_THAN_OR_EQUAL, maximum),
    ]
