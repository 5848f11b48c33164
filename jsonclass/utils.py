"""Shared utility functions for jsonclass.

Provides identifier casing helpers used by the engine and the language
profiles, JSON input loading for the command line, and Rich-based console
output.  The engine itself never touches the console.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

console = Console()
err_console = Console(stderr=True)

# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def capitalize(name: str) -> str:
    """Upper-case the first character and leave the rest untouched.

    Unlike :meth:`str.capitalize` the tail keeps its case, so
    ``capitalize("homeAddress")`` is ``"HomeAddress"``.
    """
    return name[:1].upper() + name[1:]


def lower_first(name: str) -> str:
    """Lower-case the first character and leave the rest untouched."""
    return name[:1].lower() + name[1:]


# ---------------------------------------------------------------------------
# Input loading
# ---------------------------------------------------------------------------


def read_json_text(source: str | Path | None = None, stdin: TextIO | None = None) -> str | bytes:
    """Return raw JSON from a file path, or from stdin for ``None``/``"-"``.

    Files (and stdin when it exposes a binary buffer) are returned as bytes
    so that decoding happens in the JSON parser: undecodable input becomes
    an ``INVALID_JSON`` result instead of an exception here.  The content is
    never parsed; malformed input still produces a language-specific error
    comment from the transformer.

    Raises:
        FileNotFoundError: If *source* names a file that does not exist.
    """
    if source is None or str(source) == "-":
        stream = stdin if stdin is not None else sys.stdin
        buffer = getattr(stream, "buffer", None)
        return buffer.read() if buffer is not None else stream.read()

    file_path = Path(source)
    if not file_path.is_file():
        raise FileNotFoundError(f"Input file not found: {file_path}")
    return file_path.read_bytes()


def write_text(path: str | Path, content: str) -> Path:
    """Write *content* to *path*, creating parent directories as needed."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(content, encoding="utf-8")
    return out


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_code(code: str, language: str, *, highlight: bool = True) -> None:
    """Print generated source, syntax highlighted unless *highlight* is off."""
    if not highlight:
        console.print(code, markup=False, highlight=False, emoji=False, soft_wrap=True)
        return
    console.print(Syntax(code, language, theme="monokai", word_wrap=True))


def print_languages_table(rows: dict[str, str], title: str = "Supported languages") -> None:
    """Print a two-column table of language id -> description."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Language", style="dim", no_wrap=True)
    table.add_column("Types")

    for key, value in rows.items():
        table.add_row(key, str(value))

    console.print(table)


def print_success(message: str) -> None:
    """Print a green success message to stderr."""
    err_console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a yellow warning message to stderr."""
    err_console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
