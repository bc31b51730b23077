"""
Argsy CLI Arguments

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Try out an option declaration file without writing a program:

    python -m argsy -c options.yaml -- -i 5 --log_file run.log
"""
from __future__ import annotations

import logging
import sys
from typing import Any, Sequence

from rich.markup import escape
from rich.table import Table

from argsy.config import loader
from argsy.console import console
from argsy.exceptions import ConfigError
from argsy.occurrence import Occurrence
from argsy.registry import ArgsRegistry
from argsy.runner import run
from argsy.utils import setup_logging


def get_args() -> ArgsRegistry:
    args = ArgsRegistry("argsy", "Parse a sample command line against a config file.")
    args.flag("h", "help", "Print the usage menu")
    args.flag("v", "verbose", "Enable debug logging")
    args.flag("u", "usage", "Print the usage of the loaded config instead of parsing")
    args.option(
        "c",
        "config",
        "YAML or TOML file declaring flags and options",
        "FILE",
        Occurrence.REQUIRED,
    )
    return args


def render_values(registry: ArgsRegistry) -> Table:
    table = Table(title=f"{registry.program_name} arguments")
    table.add_column("Option", style="flag")
    table.add_column("Type", style="hint")
    table.add_column("Value")
    values = registry.to_dict()
    for schema in registry.options:
        value = values.get(schema.key)
        table.add_row(
            schema.key,
            schema.type.__name__,
            "[note]unset[/note]" if value is None else escape(str(value)),
        )
    return table


def inspect_config(args: ArgsRegistry) -> Any:
    if args.value_of("verbose", bool):
        setup_logging(mode="cli", log_filename=None, console_log_level=logging.DEBUG)

    config_path = args.value_of("config", str)
    try:
        registry = loader(config_path)
    except FileNotFoundError as error:
        raise ConfigError(config_path, "no such config file") from error
    if args.value_of("usage", bool):
        console.print(
            registry.full_usage(), markup=False, highlight=False, soft_wrap=True
        )
        return None
    registry.parse(args.remaining)
    console.print(render_values(registry))
    return registry.to_dict()


def main(argv: Sequence[str] | None = None) -> Any:
    return run(get_args(), inspect_config, argv=sys.argv[1:] if argv is None else argv)


if __name__ == "__main__":
    main()
