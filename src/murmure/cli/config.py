"""Webhook URL and token commands."""

from typing import Annotated, Optional

import typer
from rich.console import Console

from murmure.formatters.history import mask_token
from murmure.webhooks.errors import ConfigurationError

console = Console()


def url_cmd(
    value: Annotated[
        Optional[str],
        typer.Argument(help="New webhook URL; omit to show the current one"),
    ] = None,
    clear: Annotated[
        bool,
        typer.Option("--clear", help="Remove the URL and disable delivery"),
    ] = False,
) -> None:
    """Show or set the webhook URL."""
    from murmure.cli.main import state

    service = state.service
    if value is None and not clear:
        url = service.get_webhook_url()
        console.print(url if url else "[dim]No webhook URL configured (delivery disabled)[/dim]")
        return

    try:
        service.set_webhook_url(None if clear else value)
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    url = service.get_webhook_url()
    if url:
        console.print(f"[green]✓[/green] Webhook URL set to {url}")
    else:
        console.print("[green]✓[/green] Webhook URL cleared, delivery disabled")


def token_cmd(
    value: Annotated[
        Optional[str],
        typer.Argument(help="New bearer token; omit to show the current one (masked)"),
    ] = None,
    clear: Annotated[
        bool,
        typer.Option("--clear", help="Remove the token"),
    ] = False,
) -> None:
    """Show or set the bearer token sent with each webhook."""
    from murmure.cli.main import state

    service = state.service
    if value is None and not clear:
        token = service.get_webhook_token()
        console.print(mask_token(token) if token else "[dim]No token configured[/dim]")
        return

    try:
        service.set_webhook_token(None if clear else value)
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if service.get_webhook_token():
        console.print("[green]✓[/green] Webhook token saved")
    else:
        console.print("[green]✓[/green] Webhook token cleared")
