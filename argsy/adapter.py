# Argsy CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Implements `ParseAdapter`, the low-level tokenizer that matches a raw token list
against declared `OptionSchema`s.

The adapter only knows about syntax. It reports which options occurred and with
which raw strings, and never coerces types, applies defaults or enforces
required options; that is the job of `ArgsRegistry`.

Supported grammar:
- `--long value` and `--long=value`
- `-s value` and `-svalue`
- POSIX-style bundling of short flags (`-abc` → `-a -b -c`); a value option in
  a bundle takes the rest of the bundle or the next token (`-av FILE`)
- `--` ends option processing; every following token is free
- a lone `-` and any token not starting with `-` are free tokens

Syntax problems raise `AdapterError`. A lenient adapter never raises: unknown
options become free tokens and the other problems are skipped, which lets a
caller look for a flag such as `--help` in a token list that may not parse.
"""
from __future__ import annotations

import shlex
from dataclasses import dataclass, field
from typing import Iterable

from argsy.option import OptionSchema


class AdapterError(ValueError):
    """Raised when a token list is not valid for the declared options."""


def split_tokens(tokens: Iterable[str] | str | None) -> list[str]:
    """Token list from an iterable, a shell-style command line or `None`."""
    if tokens is None:
        return []
    if isinstance(tokens, str):
        try:
            return shlex.split(tokens)
        except ValueError as error:
            raise AdapterError(f"Malformed command line: {error}") from error
    return [str(token) for token in tokens]


@dataclass
class OccurrenceSet:
    """
    Raw occurrences found in one token list.

    Attributes:
        values (dict[str, list[str]]): Raw strings per value option key.
        flags (set[str]): Keys of the flags that appeared.
        free (list[str]): Tokens that are not options or option values.
    """

    values: dict[str, list[str]] = field(default_factory=dict)
    flags: set[str] = field(default_factory=set)
    free: list[str] = field(default_factory=list)

    def present(self, key: str) -> bool:
        return key in self.flags or key in self.values

    def values_of(self, key: str) -> list[str]:
        return list(self.values.get(key, []))


class ParseAdapter:
    """Matches tokens against a fixed set of option schemas."""

    def __init__(
        self, schemas: Iterable[OptionSchema], lenient: bool = False
    ) -> None:
        self.lenient = lenient
        self._short: dict[str, OptionSchema] = {}
        self._long: dict[str, OptionSchema] = {}
        for schema in schemas:
            if schema.short:
                self._short[schema.short] = schema
            if schema.long:
                self._long[schema.long] = schema

    def parse(self, tokens: Iterable[str]) -> OccurrenceSet:
        """
        Split `tokens` into option occurrences and free tokens.

        Raises:
            AdapterError: On an unrecognized option, a missing option value, a
                value given to a flag or a repeated single-use option, unless
                the adapter is lenient.
        """
        args = [str(token) for token in tokens]
        result = OccurrenceSet()
        i = 0
        while i < len(args):
            token = args[i]
            if token == "--":
                result.free.extend(args[i + 1 :])
                break
            if token.startswith("--"):
                i = self._handle_long(token, args, i, result)
            elif token.startswith("-") and len(token) > 1:
                i = self._handle_short(token, args, i, result)
            else:
                result.free.append(token)
            i += 1
        return result

    def _handle_long(
        self, token: str, args: list[str], i: int, result: OccurrenceSet
    ) -> int:
        name, separator, inline = token[2:].partition("=")
        schema = self._long.get(name)
        if schema is None:
            self._reject(f"Unrecognized option: '--{name}'")
            result.free.append(token)
            return i
        if schema.is_flag:
            if separator:
                self._reject(f"Option '--{name}' does not take an argument")
                return i
            self._record_flag(schema, result)
            return i
        if separator:
            value = inline
        elif i + 1 < len(args):
            i += 1
            value = args[i]
        else:
            self._reject(f"Argument to option '--{name}' missing")
            return i
        self._record_value(schema, value, result)
        return i

    def _handle_short(
        self, token: str, args: list[str], i: int, result: OccurrenceSet
    ) -> int:
        j = 1
        while j < len(token):
            char = token[j]
            schema = self._short.get(char)
            if schema is None:
                self._reject(f"Unrecognized option: '-{char}'")
                result.free.append(token)
                break
            if schema.is_flag:
                self._record_flag(schema, result)
                j += 1
                continue
            rest = token[j + 1 :]
            if rest:
                value = rest
            elif i + 1 < len(args):
                i += 1
                value = args[i]
            else:
                self._reject(f"Argument to option '-{char}' missing")
                break
            self._record_value(schema, value, result)
            break
        return i

    def _reject(self, message: str) -> None:
        if not self.lenient:
            raise AdapterError(message)

    def _record_flag(self, schema: OptionSchema, result: OccurrenceSet) -> None:
        if schema.key in result.flags:
            self._reject(f"Option '{schema.key}' given more than once")
            return
        result.flags.add(schema.key)

    def _record_value(
        self, schema: OptionSchema, value: str, result: OccurrenceSet
    ) -> None:
        if schema.key in result.values and not schema.is_multi:
            self._reject(f"Option '{schema.key}' given more than once")
            return
        result.values.setdefault(schema.key, []).append(value)
