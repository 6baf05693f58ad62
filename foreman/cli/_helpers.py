"""Shared CLI helpers."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from foreman.errors import ForemanError

console = Console()


def fail(exc: ForemanError) -> typer.Exit:
    """Print *exc* as a CLI error and return the exit to raise."""
    console.print(f"[red]Error:[/red] {escape(str(exc))}")
    return typer.Exit(1)
