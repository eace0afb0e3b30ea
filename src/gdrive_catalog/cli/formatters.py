"""Rich formatting utilities for terminal output."""

from typing import Any, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

console = Console()
# Diagnostics go to stderr so JSON output on stdout stays parseable
err_console = Console(stderr=True)


def print_success(message: str) -> None:
    """Print success message."""
    err_console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print error message."""
    err_console.print(f"[red]✗[/red] {message}", style="red")


def print_info(message: str) -> None:
    """Print info message."""
    err_console.print(f"[blue]ℹ[/blue] {message}")


def print_panel(title: str, content: str, style: str = "blue") -> None:
    """Print content in a panel.

    Args:
        title: Panel title
        content: Panel content
        style: Panel border style
    """
    console.print(Panel(content, title=title, border_style=style))


def create_table(title: Optional[str] = None, **kwargs: Any) -> Table:
    """Create a Rich table with common styling.

    Args:
        title: Optional table title
        **kwargs: Additional Table arguments

    Returns:
        Configured Table instance
    """
    return Table(title=title, show_header=True, header_style="bold cyan", **kwargs)
