"""Webhook history commands."""

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from murmure.formatters.history import format_relative_time, format_response_body

console = Console()


def history_cmd(
    limit: Annotated[
        Optional[int],
        typer.Option("--limit", "-n", min=1, help="Only show the N most recent calls"),
    ] = None,
    body: Annotated[
        bool,
        typer.Option("--body", help="Print response bodies below the table"),
    ] = False,
) -> None:
    """Show recent webhook calls, newest first."""
    from murmure.cli.main import state

    entries = state.service.get_webhook_history()
    if limit is not None:
        entries = entries[:limit]

    if not entries:
        console.print("[dim]No webhook calls yet[/dim]")
        return

    table = Table(title="Webhook history")
    table.add_column("ID", justify="right")
    table.add_column("When")
    table.add_column("Status")
    table.add_column("Duration", justify="right")
    table.add_column("Text", overflow="ellipsis", max_width=40)
    table.add_column("Error", overflow="fold")

    for entry in entries:
        status = "[green]ok[/green]" if entry.success else "[red]failed[/red]"
        duration = f"{entry.duration:.2f}s" if entry.duration is not None else "-"
        table.add_row(
            str(entry.id),
            format_relative_time(entry.timestamp),
            status,
            duration,
            entry.text,
            entry.error_message or "",
        )

    console.print(table)

    if body:
        for entry in entries:
            if entry.response_body:
                console.print(f"\n[bold]#{entry.id} response[/bold]")
                console.print(format_response_body(entry.response_body), markup=False)


def clear_history_cmd(
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Do not ask for confirmation"),
    ] = False,
) -> None:
    """Delete all recorded webhook calls."""
    from murmure.cli.main import state

    if not yes and not typer.confirm("Clear all webhook history?"):
        raise typer.Exit()

    state.service.clear_webhook_history()
    console.print("[green]✓[/green] Webhook history cleared")
