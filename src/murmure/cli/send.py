"""Manual webhook delivery commands."""

from typing import Annotated, Optional

import typer
from rich.console import Console

from murmure.webhooks.models import WebhookHistoryEntry

console = Console()


def _report(entry: Optional[WebhookHistoryEntry]) -> None:
    if entry is None:
        console.print("[yellow]No webhook URL configured, nothing sent[/yellow]")
        raise typer.Exit(1)

    if entry.success:
        console.print(f"[green]✓[/green] Webhook delivered in {entry.duration:.2f}s (#{entry.id})")
        return

    console.print(f"[red]Error:[/red] {entry.error_message}")
    raise typer.Exit(1)


def send_cmd(
    text: Annotated[str, typer.Argument(help="Transcribed text to send")],
    duration: Annotated[
        Optional[float],
        typer.Option("--duration", help="Recording duration in seconds"),
    ] = None,
) -> None:
    """Send a transcription to the webhook, as if it had just completed."""
    from murmure.cli.main import state

    _report(state.service.dispatcher.deliver(text, duration=duration))


def test_cmd() -> None:
    """Send a test payload to the webhook."""
    from murmure.cli.main import state

    _report(state.service.send_test_webhook())
