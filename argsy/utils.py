# Argsy CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Process helpers for Argsy programs: the default program name shown in usage
text and `setup_logging()`, which wires Rich or JSON log output.
"""
from __future__ import annotations

import logging
import os
import shutil
import sys

from pythonjsonlogger.json import JsonFormatter
from rich.logging import RichHandler

from argsy.logger import logger

LOG_MODES = ("cli", "json")
JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
TEXT_LOG_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_program_invocation() -> str:
    """Name of the running program as a user would type it."""
    script = sys.argv[0] if sys.argv and sys.argv[0] else ""
    if not script:
        return "program"
    if script.endswith(".py") and not shutil.which(script):
        return f"python {script}"
    return os.path.basename(script)


def _console_handler(mode: str) -> logging.Handler:
    if mode == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter(JSON_LOG_FORMAT))
        return handler
    # Option values are user text; never interpret them as rich markup
    return RichHandler(
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        log_time_format=f"[{LOG_DATE_FORMAT}]",
    )


def _file_handler(log_filename: str, as_json: bool) -> logging.Handler:
    handler = logging.FileHandler(log_filename, "a", "UTF-8")
    if as_json:
        handler.setFormatter(JsonFormatter(JSON_LOG_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(TEXT_LOG_FORMAT, LOG_DATE_FORMAT))
    return handler


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = "argsy.log",
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Route log records of an Argsy program to the console and, optionally, a file.

    Any handlers already installed on the root logger are replaced, so calling
    this twice (for example after a `--verbose` flag was parsed) reconfigures
    logging instead of duplicating output.

    Args:
        mode (str | None): "cli" for Rich console output or "json" for one JSON
            object per record. Falls back to `ARGSY_LOG_MODE`, then "cli".
        log_filename (str | None): File that receives records. `None` disables it.
        json_log_to_file (bool): Write the file as JSON instead of plain text.
        file_log_level (int): Threshold for the file handler.
        console_log_level (int): Threshold for the console handler.

    Raises:
        ValueError: If `mode` is not "cli" or "json".
    """
    mode = mode or os.getenv("ARGSY_LOG_MODE") or "cli"
    if mode not in LOG_MODES:
        raise ValueError(f"Invalid log mode: {mode}")

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    console_handler = _console_handler(mode)
    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = _file_handler(log_filename, json_log_to_file)
        file_handler.setLevel(file_log_level)
        root.addHandler(file_handler)

    logger.debug("Logging initialized in '%s' mode.", mode)
