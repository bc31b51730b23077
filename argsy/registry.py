# Argsy CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgsRegistry`, the central object of Argsy. It owns the
declared options, parses token lists into typed values, and hands those values
back through type-checked and validated lookups.

Key Features:
- Declarative registration via `flag()` and `option()`, failing fast on
  malformed or duplicate keys
- Type coercion at parse time into the declared scalar type
- Defaults for absent options and a required-option pass after tokenizing
- Typed retrieval that refuses to hand a value out as the wrong type
- Validation chains that report every failing rule at once
- Plain-text usage generation and Rich-rendered help

Example Usage:
    args = ArgsRegistry("program", "Run this program")
    args.flag("h", "help", "Print the usage menu")
    args.option("i", "iter", "The number of times to run", "TIMES", Occurrence.REQUIRED, type=int)
    args.option("l", "log_file", "The name of the log file", "NAME")

    args.parse(["-i", "5"])
    iterations = args.validated_value_of("iter", int, in_range(1, 10))
    log_file = args.optional_value_of("log_file", str)

The registry is not thread-safe. Register and parse once, from one thread,
during program startup.
"""
from __future__ import annotations

import sys
from typing import Any, Iterable, Sequence, TypeVar

from rich.console import Console
from rich.markup import escape

from argsy.adapter import AdapterError, OccurrenceSet, ParseAdapter, split_tokens
from argsy.coerce import coerce_value, is_supported_type
from argsy.console import console
from argsy.exceptions import (
    InvalidValueError,
    MissingRequiredError,
    NotPresentError,
    OptionAlreadyExistsError,
    OptionDefinitionError,
    ParseSyntaxError,
    UnknownOptionError,
    ValidationFailedError,
    type_name,
)
from argsy.logger import logger
from argsy.occurrence import Occurrence
from argsy.option import OptionSchema
from argsy.typed_value import TypedValue
from argsy.utils import get_program_invocation
from argsy.validation import ValidationRule, check_rules

T = TypeVar("T")

HELP_COLUMN = 30


class ArgsRegistry:
    """
    Declares, parses and serves command line options.

    Lifecycle:
    - constructed empty
    - options registered with `flag()` / `option()`
    - `parse()` called zero or more times; each call replaces every value
    - values read with `value_of()` and friends until the next `parse()`
    """

    def __init__(self, program_name: str | None = None, description: str = "") -> None:
        self.console: Console = console
        self.program_name: str = program_name or get_program_invocation()
        self.description: str = description
        self._options: dict[str, OptionSchema] = {}
        self._aliases: dict[str, str] = {}
        self._values: dict[str, TypedValue] = {}
        self.remaining: list[str] = []
        logger.debug("Creating new args registry for '%s'", self.program_name)

    def flag(self, short: str, long: str, description: str = "") -> ArgsRegistry:
        """
        Register a flag that takes no value and resolves to `False` when absent.

        Args:
            short (str): e.g. `"h"` for a `-h` flag, or `""` for none.
            long (str): e.g. `"help"` for a `--help` flag, or `""` for none.
            description (str): Description of the flag for the usage message.
        """
        self._validate_keys(short, long)
        self._register(
            OptionSchema(
                short=short,
                long=long,
                description=description,
                occurrence=Occurrence.FLAG,
                type=bool,
            )
        )
        return self

    def option(
        self,
        short: str,
        long: str,
        description: str = "",
        hint: str = "",
        occurrence: Occurrence | str = Occurrence.OPTIONAL,
        default: Any = None,
        type: Any = str,
    ) -> ArgsRegistry:
        """
        Register an option that takes a value.

        Args:
            short (str): e.g. `"o"` for a `-o` option, or `""` for none.
            long (str): e.g. `"output"` for a `--output` option, or `""` for none.
            description (str): Description of the option for the usage message.
            hint (str): Placeholder for the value in the usage message, e.g. `"FILE"`.
            occurrence (Occurrence | str): Whether the option is required, optional
                or may be repeated.
            default (Any): Value used when the option is absent. Strings are coerced
                to `type` and an `int` is widened for a `float` option. Lists are
                accepted for repeatable options.
            type (type): Scalar type the raw value is coerced into.

        Raises:
            OptionDefinitionError: If the declaration is malformed.
            OptionAlreadyExistsError: If a key is already registered.
        """
        self._validate_keys(short, long)
        try:
            occurrence = Occurrence(occurrence)
        except ValueError as error:
            raise OptionDefinitionError(long or short, str(error)) from error
        if occurrence is Occurrence.FLAG:
            raise OptionDefinitionError(
                long or short, "use flag() to register a presence-only option"
            )
        if not is_supported_type(type):
            raise OptionDefinitionError(
                long or short, f"unsupported option type {type_name(type)}"
            )
        schema = OptionSchema(
            short=short,
            long=long,
            description=description,
            hint=hint,
            occurrence=occurrence,
            type=type,
            default=self._resolve_default(long or short, default, type, occurrence),
        )
        self._register(schema)
        return self

    def _validate_keys(self, short: str, long: str) -> None:
        if not short and not long:
            raise OptionDefinitionError("", "an option needs a short or a long key")
        if short and len(short) != 1:
            raise OptionDefinitionError(short, "short keys must be a single character")
        for key in (short, long):
            if not key:
                continue
            if key.startswith("-"):
                raise OptionDefinitionError(key, "keys are registered without dashes")
            if "=" in key or any(char.isspace() for char in key):
                raise OptionDefinitionError(
                    key, "keys must not contain '=' or whitespace"
                )
            if key in self._aliases:
                raise OptionAlreadyExistsError(key)

    def _resolve_default(
        self, key: str, default: Any, value_type: Any, occurrence: Occurrence
    ) -> TypedValue | None:
        if default is None:
            return None
        if occurrence is Occurrence.MULTIPLE and isinstance(default, (list, tuple)):
            defaults = list(default)
        else:
            defaults = [default]
        values = []
        for value in defaults:
            if isinstance(value, str) and value_type is not str:
                try:
                    value = coerce_value(value, value_type)
                except ValueError as error:
                    raise OptionDefinitionError(
                        key, f"invalid default {value!r}: {error}"
                    ) from error
            elif value_type is float and type(value) is int:
                value = float(value)
            values.append(value)
        try:
            return TypedValue(value_type, tuple(values))
        except (TypeError, ValueError) as error:
            raise OptionDefinitionError(key, f"invalid default: {error}") from error

    def _register(self, schema: OptionSchema) -> None:
        logger.debug("Registering %s", schema)
        self._options[schema.key] = schema
        for key in schema.keys:
            self._aliases[key] = schema.key

    def get_option(self, key: str) -> OptionSchema | None:
        """Return the schema registered under a long or short key."""
        canonical = self._aliases.get(key)
        if canonical is None:
            return None
        return self._options[canonical]

    @property
    def options(self) -> list[OptionSchema]:
        """Registered schemas in registration order."""
        return list(self._options.values())

    def has_options(self) -> bool:
        return bool(self._options)

    def parse(self, tokens: Iterable[str] | str | None = None) -> None:
        """
        Parse `tokens` according to the registered options.

        Every registered option is resolved to a value, its default, or nothing.
        The previous parse result is replaced only once every option resolved.

        Args:
            tokens (Iterable[str] | str | None): Tokens without the program name. A
                single string is split with shell rules.

        Raises:
            ParseSyntaxError: If the token list is malformed.
            InvalidValueError: If a value cannot be coerced to its option type.
            MissingRequiredError: If a required option has no value and no default.
        """
        logger.debug("Parsing args for '%s'", self.program_name)
        try:
            occurrences = ParseAdapter(self._options.values()).parse(
                split_tokens(tokens)
            )
        except AdapterError as error:
            raise ParseSyntaxError(str(error)) from error

        values: dict[str, TypedValue] = {}
        for schema in self._options.values():
            resolved = self._resolve(schema, occurrences)
            if resolved is not None:
                values[schema.key] = resolved

        self._values = values
        self.remaining = occurrences.free
        logger.debug("Args: %s", self.to_dict())

    def parse_from_cli(self) -> None:
        """Parse the arguments of the running process, without the program name."""
        self.parse(sys.argv[1:])

    def _resolve(
        self, schema: OptionSchema, occurrences: OccurrenceSet
    ) -> TypedValue | None:
        if schema.is_flag:
            return TypedValue(bool, (occurrences.present(schema.key),))

        raw_values = occurrences.values_of(schema.key)
        if raw_values:
            if not schema.is_multi:
                raw_values = raw_values[:1]
            typed_values = []
            for raw in raw_values:
                try:
                    typed_values.append(coerce_value(raw, schema.type))
                except ValueError as error:
                    raise InvalidValueError(
                        schema.key, raw, schema.type, str(error)
                    ) from error
            return TypedValue(schema.type, tuple(typed_values))

        if schema.default is not None:
            return schema.default
        if schema.is_required:
            raise MissingRequiredError(schema.key)
        return None

    def _lookup(self, key: str) -> tuple[str, TypedValue | None]:
        canonical = self._aliases.get(key)
        if canonical is None:
            raise UnknownOptionError(key)
        return canonical, self._values.get(canonical)

    def has_value(self, key: str) -> bool:
        """Return True if the option identified by `key` resolved to a value."""
        return self._aliases.get(key) in self._values

    def value_of(self, key: str, value_type: type[T]) -> T:
        """
        Return the value of the option identified by `key` as `value_type`.

        Raises:
            UnknownOptionError: If no option is registered under `key`.
            NotPresentError: If the option has no value and no default.
            IncorrectTypeError: If the value is not stored as `value_type`.
        """
        canonical, stored = self._lookup(key)
        if stored is None:
            raise NotPresentError(canonical)
        return stored.extract(canonical, value_type)

    def optional_value_of(self, key: str, value_type: type[T]) -> T | None:
        """
        Like `value_of()`, but returns `None` when the option has no value.

        Requesting the wrong type still raises `IncorrectTypeError`.
        """
        canonical, stored = self._lookup(key)
        if stored is None:
            return None
        return stored.extract(canonical, value_type)

    def values_of(self, key: str, value_type: type[T]) -> list[T]:
        """Return every value given for a repeatable option, in command line order."""
        canonical, stored = self._lookup(key)
        if stored is None:
            raise NotPresentError(canonical)
        return stored.extract_all(canonical, value_type)

    def validated_value_of(
        self, key: str, value_type: type[T], rules: Sequence[ValidationRule]
    ) -> T:
        """
        Return the value of `key` as `value_type` after checking it against `rules`.

        Every rule is evaluated, so the error lists all failures, not only the first.

        Raises:
            ArgsError: Any error `value_of()` raises, before a rule is run.
            ValidationFailedError: If one or more rules fail.
        """
        value = self.value_of(key, value_type)
        reasons = check_rules(value, rules)
        if reasons:
            canonical = self._aliases[key]
            logger.debug("Validation failed for '%s': %s", canonical, reasons)
            raise ValidationFailedError(canonical, value, reasons)
        return value

    def optional_validated_value_of(
        self, key: str, value_type: type[T], rules: Sequence[ValidationRule]
    ) -> T | None:
        """Like `validated_value_of()`, but returns `None` when there is no value."""
        _, stored = self._lookup(key)
        if stored is None:
            return None
        return self.validated_value_of(key, value_type, rules)

    def to_dict(self) -> dict[str, Any]:
        """Snapshot of the parsed values; repeatable options map to lists."""
        return {
            key: list(stored.values) if self._options[key].is_multi else stored.value
            for key, stored in self._values.items()
        }

    def short_usage(self) -> str:
        """Generate a one-line usage summary from the registered options."""
        parts = [f"Usage: {self.program_name}"]
        parts.extend(schema.get_usage_text() for schema in self._options.values())
        return " ".join(parts)

    def _option_rows(self) -> list[tuple[str, str]]:
        rows = []
        for schema in self._options.values():
            flags = ", ".join(schema.get_flags())
            hint = schema.get_hint_text()
            left = f"{flags} {hint}" if hint else flags
            right = " ".join(
                text for text in (schema.description, schema.get_note_text()) if text
            )
            rows.append((left, right))
        return rows

    def usage(self, brief: str = "") -> str:
        """Generate a verbose usage listing of every registered option."""
        lines = []
        brief = brief or self.description
        if brief:
            lines.extend([brief, ""])
        lines.append("Options:")
        for left, right in self._option_rows():
            if right and len(left) > HELP_COLUMN:
                lines.append(f"    {left}")
                lines.append(f"    {'':<{HELP_COLUMN}} {right}")
            else:
                lines.append(f"    {left:<{HELP_COLUMN}} {right}".rstrip())
        return "\n".join(lines)

    def full_usage(self, brief: str = "") -> str:
        """Combine the short and verbose usage messages."""
        return f"{self.short_usage()}\n\n{self.usage(brief)}"

    def render_help(self, brief: str = "") -> None:
        """Print the usage listing using Rich output."""
        self.console.print(f"[usage]{escape(self.short_usage())}[/usage]\n")
        brief = brief or self.description
        if brief:
            self.console.print(escape(brief) + "\n")
        self.console.print("[heading]Options:[/heading]")
        for left, right in self._option_rows():
            line = f"  [flag]{escape(left):<{HELP_COLUMN}}[/flag] "
            if right and len(left) > HELP_COLUMN:
                line = f"  [flag]{escape(left)}[/flag]\n{'':<{HELP_COLUMN + 3}}"
            self.console.print(f"{line}{escape(right)}")

    def __str__(self) -> str:
        """Return a human-readable summary of the registry state."""
        flags = sum(schema.is_flag for schema in self._options.values())
        required = sum(schema.is_required for schema in self._options.values())
        return (
            f"ArgsRegistry(program={self.program_name!r}, "
            f"options={len(self._options)}, flags={flags}, required={required})"
        )

    def __repr__(self) -> str:
        return str(self)
