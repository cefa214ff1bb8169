# csvview/cli/ui.py
"""
Shared UI helpers for CLI commands.

Usage:
    from csvview.cli.ui import ui, console

    ui.header("sales.csv")
    ui.success("Done!")
"""

from __future__ import annotations

from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


class UI:
    """Consistent styling for CLI output."""

    def header(self, title: str, subtitle: str = "") -> None:
        """Print a fitted box around the title."""
        if subtitle:
            content = f"[bold]{escape(title)}[/bold]\n[dim]{escape(subtitle)}[/dim]"
        else:
            content = f"[bold]{escape(title)}[/bold]"
        console.print(Panel.fit(content, border_style="blue"))

    def success(self, msg: str) -> None:
        console.print(f"[green]✓[/green] {escape(msg)}")

    def error(self, msg: str) -> None:
        err_console.print(f"[red]✗[/red] {escape(msg)}")

    def warning(self, msg: str, detail: str = "") -> None:
        detail_str = f" [dim]({escape(detail)})[/dim]" if detail else ""
        console.print(f"[yellow]⚠[/yellow] {escape(msg)}{detail_str}")

    def table(
        self,
        header: Sequence[str],
        rows: Sequence[Sequence[str]],
        title: Optional[str] = None,
        index: bool = True,
    ) -> None:
        """
        Print rows as a Rich table.

        Cell text is escaped, so brackets in the data are shown literally.
        """
        table = Table(show_header=True, header_style="bold", title=title)
        if index:
            table.add_column("#", style="dim", justify="right")
        for name in header:
            table.add_column(escape(name), style="cyan", overflow="fold")

        for i, row in enumerate(rows, 1):
            cells = [escape(cell) for cell in row]
            table.add_row(*([str(i)] + cells if index else cells))

        console.print(table)


ui = UI()

__all__ = ["UI", "ui", "console", "err_console"]
