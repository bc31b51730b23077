# Argsy CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Process-level entry point for programs built on `ArgsRegistry`.

`run()` implements the behavior every small CLI needs around the registry:

- parse the process arguments (or an injected token list, for tests)
- on a help flag, print the full usage listing and exit with status 0
- on any Argsy error, print the message and exit with status 1
- otherwise hand the parsed registry to the program's `main`

Example:
    def main(args: ArgsRegistry) -> None:
        for _ in range(args.validated_value_of("iter", int, in_range(1, 10))):
            print("Doing work ...")

    if __name__ == "__main__":
        run(build_args(), main)
"""
from __future__ import annotations

import sys
from typing import Any, Callable, Sequence

from argsy.adapter import AdapterError, ParseAdapter, split_tokens
from argsy.exceptions import ArgsyError
from argsy.logger import logger
from argsy.option import OptionSchema
from argsy.registry import ArgsRegistry


def run(
    registry: ArgsRegistry,
    main: Callable[[ArgsRegistry], Any],
    argv: Sequence[str] | str | None = None,
    help_key: str | None = "help",
    brief: str = "",
) -> Any:
    """
    Parse `argv` into `registry` and call `main(registry)`.

    Args:
        registry (ArgsRegistry): Registry with every option declared.
        main (Callable): Program body, called with the parsed registry.
        argv (Sequence[str] | str | None): Tokens or a command line string to
            parse. Defaults to `sys.argv[1:]`.
        help_key (str | None): Flag that triggers the usage listing, or `None`.
        brief (str): Text shown above the options in the usage listing.

    Returns:
        Any: Whatever `main` returns.

    Raises:
        SystemExit: 0 after printing help, 1 after an Argsy error.
    """
    if argv is None:
        argv = sys.argv[1:]

    # Help wins over missing required options and invalid values
    help_option = registry.get_option(help_key) if help_key else None
    if help_option and _asks_for_help(registry, help_option, argv):
        _print_help(registry, brief)

    try:
        registry.parse(argv)
        if help_option and registry.value_of(help_option.key, bool):
            _print_help(registry, brief)
        return main(registry)
    except ArgsyError as error:
        logger.debug("Exiting '%s' after error: %s", registry.program_name, error)
        registry.console.print(
            str(error), style="error", markup=False, soft_wrap=True
        )
        sys.exit(1)


def _asks_for_help(
    registry: ArgsRegistry, help_option: OptionSchema, argv: Sequence[str] | str
) -> bool:
    try:
        tokens = split_tokens(argv)
    except AdapterError:
        # parse() reports the malformed command line
        return False
    occurrences = ParseAdapter(registry.options, lenient=True).parse(tokens)
    return help_option.key in occurrences.flags


def _print_help(registry: ArgsRegistry, brief: str) -> None:
    registry.console.print(
        registry.full_usage(brief), markup=False, highlight=False, soft_wrap=True
    )
    sys.exit(0)
