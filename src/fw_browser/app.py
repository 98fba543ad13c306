"""Root Typer app — global options and command registration."""

from __future__ import annotations

from typing import Optional

import typer

from fw_browser import __version__
from fw_browser.client.errors import ConfigurationError
from fw_browser.commands import _common, browse, config_cmd, firmware
from fw_browser.config.models import LOG_LEVELS
from fw_browser.logging_setup import setup_logging

app = typer.Typer(
    name="fw-browser",
    help="Browse the UniFi firmware catalog.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        print(f"fw-browser {__version__}")
        raise typer.Exit()


def log_level_callback(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(f"must be one of: {', '.join(LOG_LEVELS)}")
    return level


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", callback=log_level_callback,
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."
    ),
) -> None:
    """Firmware catalog browser: list, search, inspect and download builds."""
    requested = "DEBUG" if verbose else log_level
    try:
        level = _common.get_manager().resolve(log_level=requested).log_level
    except ConfigurationError:
        # Commands report configuration problems themselves
        level = "WARNING"
    setup_logging(level)


# Register commands
app.command("list")(firmware.list_firmware)
app.command()(firmware.latest)
app.command()(firmware.show)
app.command()(firmware.url)
app.command()(firmware.download)
app.command()(firmware.filters)
app.command()(firmware.platforms)
app.command()(browse.browse)
app.add_typer(config_cmd.app, name="config")


def main() -> None:
    app()
