"""Console output helpers for agentkit."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console()
err_console = Console(stderr=True, soft_wrap=True)


def info(message: str) -> None:
    console.print(escape(message))


def success(message: str) -> None:
    """Print a green check line."""
    console.print(f"[green]✓[/green] {escape(message)}")


def warning(message: str) -> None:
    """Print a yellow warning line to stderr."""
    err_console.print(f"[yellow]Warning:[/yellow] {escape(message)}")


def error(message: str) -> None:
    """Print a red error line to stderr."""
    err_console.print(f"[red]Error:[/red] {escape(message)}")
