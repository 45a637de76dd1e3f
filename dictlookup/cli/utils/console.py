"""Rich consoles and the styles used to render dictionary entries."""

from rich.console import Console
from rich.theme import Theme

entry_theme = Theme(
    {
        "word": "magenta bold",
        "pos": "blue",
        "phonetic": "green",
        "translation": "cyan",
        "dim": "dim",
        "error": "red bold",
    }
)

console = Console(theme=entry_theme)

# Lookup errors go to stderr
error_console = Console(theme=entry_theme, stderr=True)
