"""Shared utility functions for widgetgen.

Provides slug derivation, JSON answer-file loading and the Rich-based
console output used by the generator and the CLI.
"""

from __future__ import annotations

import json
import re
import unicodedata
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def slugify(text: str) -> str:
    """Convert an arbitrary widget name to a URL/identifier-safe slug.

    * Folds accented characters to their ASCII base (``"Café"`` -> ``"cafe"``).
    * Lowercases the input.
    * Collapses every run of whitespace and non-alphanumeric characters
      into a single hyphen and strips leading/trailing hyphens.

    Examples::

        slugify("Stock Ticker") -> "stock-ticker"
        slugify("  FX -- Rates (EUR/USD)  ") -> "fx-rates-eur-usd"
    """
    folded = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    slug = re.sub(r"[^a-z0-9]+", "-", folded.lower().strip())
    return slug.strip("-")


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> Any:
    """Load and parse a JSON file.

    Args:
        path: Path to the JSON file.

    Returns:
        The parsed JSON value.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    file_path = Path(path)
    raw = file_path.read_text(encoding="utf-8")
    return json.loads(raw)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_created(path: str, is_dir: bool = False) -> None:
    """Print a yeoman-style ``create`` line for a generated path."""
    suffix = "/" if is_dir and not path.endswith("/") else ""
    console.print(f"   [green]create[/green] {path}{suffix}")


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")
