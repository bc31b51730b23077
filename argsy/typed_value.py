# Argsy CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `TypedValue`, the tagged container that holds one resolved option.

A `TypedValue` pairs a concrete Python type with the value(s) resolved for an
option. The type tag is fixed at construction; every typed read compares the
requested type against it by identity, so a stored `bool` is never handed out
as an `int` and a stored `str` is never re-parsed on demand.

Options declared with `Occurrence.MULTIPLE` keep every occurrence in `values`;
all other options hold exactly one value.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

from argsy.exceptions import IncorrectTypeError, type_name

T = TypeVar("T")


@dataclass(frozen=True)
class TypedValue:
    """
    A resolved option value with a fixed runtime type.

    Attributes:
        type (type): The logical type of every entry in `values`.
        values (tuple[Any, ...]): One or more values, all instances of `type`.
    """

    type: type
    values: tuple[Any, ...]

    def __post_init__(self) -> None:
        if not self.values:
            raise ValueError("TypedValue requires at least one value")
        for value in self.values:
            # bool subclasses int but is its own logical type here
            if not isinstance(value, self.type) or (
                isinstance(value, bool) and self.type is not bool
            ):
                raise TypeError(
                    f"TypedValue of {type_name(self.type)} cannot hold {value!r}"
                )

    @classmethod
    def of(cls, value: Any, value_type: type | None = None) -> TypedValue:
        """Wrap a single value, tagging it with `value_type` or its own type."""
        return cls(value_type or type(value), (value,))

    @property
    def value(self) -> Any:
        """The first (for single options, the only) value."""
        return self.values[0]

    def matches(self, requested: Any) -> bool:
        """True if `requested` is exactly the stored type."""
        return requested is self.type

    def extract(self, key: str, requested: type[T]) -> T:
        """
        Return the value if `requested` is the stored type.

        Raises:
            IncorrectTypeError: If `requested` differs from the stored type.
        """
        if not self.matches(requested):
            raise IncorrectTypeError(key, requested, self.type)
        return self.value

    def extract_all(self, key: str, requested: type[T]) -> list[T]:
        """Return every stored value if `requested` is the stored type."""
        if not self.matches(requested):
            raise IncorrectTypeError(key, requested, self.type)
        return list(self.values)

    def __str__(self) -> str:
        if len(self.values) == 1:
            return str(self.value)
        return ", ".join(str(value) for value in self.values)
