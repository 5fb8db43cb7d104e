"""Rich-based logger with browsercmd theming.

Command-line tools mix two kinds of output: the result a script might pipe
somewhere, and diagnostics meant for a person. This logger keeps them apart:
- Semantic colors (red=error, lavender=action tag, blue=field value)
- Diagnostics (errors, debug) go to stderr
- Structured output (headers, key-value pairs) for rendered commands
"""
from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text
from rich.theme import Theme


BROWSERCMD_THEME = Theme(
    {
        "error": "bold #f7768e",  # Soft coral red - errors
        "highlight": "bold #bb9af7",  # Lavender purple - action tags
        "muted": "dim #565f89",  # Slate gray - secondary info
        "value": "#7aa2f7",  # Sky blue - field values
    }
)


class Logger:
    """Unified logging interface with rich console output.

    `console` carries results (stdout); `err_console` carries diagnostics
    (stderr). Debug messages are dropped unless `verbose` is set.
    """

    def __init__(self, verbose: bool = False) -> None:
        """Initialize with the browsercmd theme."""
        self.console = Console(theme=BROWSERCMD_THEME)
        self.err_console = Console(theme=BROWSERCMD_THEME, stderr=True)
        self.verbose = verbose

    # ─────────────────────────────────────────────────────────────────────
    # Diagnostics
    # ─────────────────────────────────────────────────────────────────────

    def error(self, message: str) -> None:
        """Log an error message (red ✗) to stderr."""
        self.err_console.print(f"[error]✗[/error] {message}")

    def debug(self, message: str) -> None:
        """Log a muted debug line to stderr when verbose output is on."""
        if self.verbose:
            self.err_console.print(f"[muted]· {message}[/muted]")

    # ─────────────────────────────────────────────────────────────────────
    # Structured Output
    # ─────────────────────────────────────────────────────────────────────

    def header(self, title: str, subtitle: str | None = None) -> None:
        """Print a section header, e.g. the action tag of a command."""
        header_text = Text()
        header_text.append("━" * 3 + " ", style="muted")
        header_text.append(title, style="highlight")
        if subtitle:
            header_text.append(f" • {subtitle}", style="muted")
        self.console.print(header_text)

    def key_value(self, data: dict[str, Any]) -> None:
        """Display key-value pairs in a clean format."""
        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Key", style="muted")
        table.add_column("Value", style="value")

        for key, value in data.items():
            table.add_row(f"{key}:", escape(str(value)))

        self.console.print(table)


# ─────────────────────────────────────────────────────────────────────────────
# Module-Level Singleton
# ─────────────────────────────────────────────────────────────────────────────

_logger: Logger | None = None


def get_logger() -> Logger:
    """Get or create the singleton Logger instance.

    Using a singleton ensures consistent theming and avoids creating
    multiple Console instances.
    """
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger
