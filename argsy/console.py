# Argsy CLI Arguments — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Argsy output."""
from rich.console import Console
from rich.theme import Theme

ARGSY_THEME = Theme(
    {
        "usage": "bold",
        "heading": "bold underline",
        "flag": "cyan",
        "hint": "magenta",
        "note": "dim",
        "error": "bold red",
    }
)

console = Console(theme=ARGSY_THEME)
