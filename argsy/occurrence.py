# Argsy CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Occurrence`, the cardinality contract of a declared option.

Supports alias coercion for shorthand or config-friendly values.

Example:
    Occurrence("required") → Occurrence.REQUIRED
    Occurrence("req")      → Occurrence.REQUIRED (via alias)
    Occurrence("multi")    → Occurrence.MULTIPLE (via alias)
"""
from __future__ import annotations

from enum import Enum


class Occurrence(Enum):
    """
    How many times an option may or must appear on the command line.

    Members:
        REQUIRED: Exactly once, unless the option declares a default.
        OPTIONAL: At most once.
        MULTIPLE: Any number of times; every value is kept.
        FLAG: Presence only, never carries a value.

    Aliases:
        - "req" → "required"
        - "opt" / "optional" → "optional"
        - "multi" / "many" → "multiple"
        - "presence" / "bool" → "flag"
    """

    REQUIRED = "required"
    OPTIONAL = "optional"
    MULTIPLE = "multiple"
    FLAG = "flag"

    @classmethod
    def choices(cls) -> list[Occurrence]:
        """Return a list of all occurrences."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "req": "required",
            "opt": "optional",
            "multi": "multiple",
            "many": "multiple",
            "presence": "flag",
            "bool": "flag",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> Occurrence:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        """Return the string representation of the occurrence."""
        return self.value
