"""
Run a unit of work a validated number of times.

    python examples/iterations.py -i 3 --log_file run.log
    python examples/iterations.py --help
"""
import logging

from argsy import ArgsRegistry, Occurrence, Order, ValidationRule
from argsy.runner import run
from argsy.utils import setup_logging

PROGRAM_NAME = "iterations"

setup_logging(console_log_level=logging.WARNING, log_filename=None)


def get_args() -> ArgsRegistry:
    args = ArgsRegistry(PROGRAM_NAME, "Run this program")
    args.flag("h", "help", "Print the usage menu")
    args.option(
        "i",
        "iter",
        "The number of times to run this program",
        "TIMES",
        Occurrence.REQUIRED,
        type=int,
    )
    args.option("l", "log_file", "The name of the log file", "NAME")
    return args


def main(args: ArgsRegistry) -> None:
    gt_0 = ValidationRule(Order.GREATER_THAN, 0)
    le_10 = ValidationRule(Order.LESS_THAN_OR_EQUAL, 10)

    iterations = args.validated_value_of("iter", int, [gt_0, le_10])
    for iteration in range(iterations):
        print(f"Working on iteration {iteration}")

    log_file = args.optional_value_of("log_file", str)
    if log_file:
        print(f"Results would be logged to {log_file}")
    print("All done!")


if __name__ == "__main__":
    run(get_args(), main, brief=f"How to use {PROGRAM_NAME}")
