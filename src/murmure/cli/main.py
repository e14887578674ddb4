"""Main Typer CLI application for Murmure webhooks."""

import logging
import sys
from typing import Annotated, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console

from murmure import __version__
from murmure.config.settings import get_settings
from murmure.webhooks.service import WebhookService

# Create the Typer app
app = typer.Typer(
    name="murmure-webhook",
    help="Configure and inspect the Murmure transcription webhook.",
    no_args_is_help=True,
)

# Console for rich output
console = Console()


# Global state for config
class State:
    debug: bool = False
    logger: logging.Logger = logging.getLogger("murmure")
    _service: Optional[WebhookService] = None

    @property
    def service(self) -> WebhookService:
        if self._service is None:
            self._service = WebhookService.from_settings(get_settings(), logger=self.logger)
        return self._service


state = State()


def setup_logging(debug: bool) -> logging.Logger:
    """Configure logging based on debug flag."""
    logger = logging.getLogger("murmure")
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    if debug:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.WARNING)

    return logger


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"murmure-webhook {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging"),
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, is_eager=True),
    ] = None,
) -> None:
    """Murmure webhook CLI - manage the webhook and its delivery history."""
    # Load .env file
    load_dotenv()

    # Setup logging
    state.debug = debug or get_settings().debug
    state.logger = setup_logging(state.debug)

    if state.debug:
        state.logger.debug("Debug mode enabled")
        state.logger.debug(f"Config directory: {get_settings().config_dir}")


# Import and register subcommands
from murmure.cli.config import token_cmd, url_cmd
from murmure.cli.history import clear_history_cmd, history_cmd
from murmure.cli.send import send_cmd, test_cmd

app.command(name="url")(url_cmd)
app.command(name="token")(token_cmd)
app.command(name="history")(history_cmd)
app.command(name="clear-history")(clear_history_cmd)
app.command(name="send")(send_cmd)
app.command(name="test")(test_cmd)


if __name__ == "__main__":
    app()
