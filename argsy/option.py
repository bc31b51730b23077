# Argsy CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `OptionSchema` dataclass used by `ArgsRegistry` to describe one
declared flag or value-bearing option.

Key Attributes:
- `short` / `long`: Keys without dashes (`"i"` for `-i`, `"iter"` for `--iter`)
- `description`: Help text for the usage listing
- `hint`: Placeholder shown for the value in usage (`"FILE"` for `-o FILE`)
- `occurrence`: `Occurrence` describing cardinality
- `type`: Scalar type raw values are coerced into
- `default`: Optional `TypedValue` used when the option is absent

The long key is the canonical lookup key; the short key is an alias.
"""
from __future__ import annotations

from dataclasses import dataclass

from argsy.occurrence import Occurrence
from argsy.typed_value import TypedValue


@dataclass(frozen=True)
class OptionSchema:
    """
    Represents a declared command-line option.

    Attributes:
        short (str): Single character short key, or "" for none.
        long (str): Long key, or "" for none.
        description (str): Description for the usage message.
        hint (str): Value placeholder for the usage message. Empty for flags.
        occurrence (Occurrence): Required, optional, multiple or flag.
        type (type): Scalar type of the value. Always `bool` for flags.
        default (TypedValue | None): Value used when the option is absent.
    """

    short: str
    long: str
    description: str = ""
    hint: str = ""
    occurrence: Occurrence = Occurrence.OPTIONAL
    type: type = str
    default: TypedValue | None = None

    @property
    def key(self) -> str:
        """Canonical lookup key."""
        return self.long or self.short

    @property
    def keys(self) -> tuple[str, ...]:
        return tuple(key for key in (self.long, self.short) if key)

    @property
    def is_flag(self) -> bool:
        return self.occurrence is Occurrence.FLAG

    @property
    def is_multi(self) -> bool:
        return self.occurrence is Occurrence.MULTIPLE

    @property
    def is_required(self) -> bool:
        """A declared default always satisfies a required option."""
        return self.occurrence is Occurrence.REQUIRED and self.default is None

    def get_flags(self) -> tuple[str, ...]:
        """Return the dashed spellings, short form first."""
        flags = []
        if self.short:
            flags.append(f"-{self.short}")
        if self.long:
            flags.append(f"--{self.long}")
        return tuple(flags)

    def get_hint_text(self) -> str:
        """Get the placeholder shown for the option value."""
        if self.is_flag:
            return ""
        return self.hint or self.key.upper().replace("-", "_")

    def get_usage_text(self) -> str:
        """Get the compact form used in the one-line usage summary."""
        text = self.get_flags()[0]
        hint = self.get_hint_text()
        if hint:
            text = f"{text} {hint}"
        if self.is_multi:
            text = f"{text}..."
        if not self.is_required:
            text = f"[{text}]"
        return text

    def get_note_text(self) -> str:
        """Get the trailing note for the verbose usage listing."""
        if self.is_flag:
            return ""
        if self.default is not None:
            return f"(default: {self.default})"
        if self.is_required:
            return "(required)"
        if self.is_multi:
            return "(repeatable)"
        return ""

    def __str__(self) -> str:
        return f"option '{' '.join(self.get_flags())}'"
