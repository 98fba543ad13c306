"""Config commands: view and change CLI settings."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console
from rich.prompt import Confirm

from fw_browser.client.errors import error_handler
from fw_browser.commands import _common
from fw_browser.config.constants import CATALOG_BASE_URL
from fw_browser.output.formatter import output

app = typer.Typer(name="config", help="View and change CLI configuration.")
console = Console()


@app.command()
@error_handler
def show(
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format")] = "table",
) -> None:
    """Show the current settings."""
    mgr = _common.get_manager()
    data = mgr.config.model_dump()
    data["catalog_url"] = CATALOG_BASE_URL
    output(data, fmt, kv=True, title="Configuration")


@app.command("set")
@error_handler
def set_value(
    key: Annotated[str, typer.Argument(help="Setting name")],
    value: Annotated[str, typer.Argument(help="New value ('none' to unset)")],
) -> None:
    """Change a setting."""
    mgr = _common.get_manager()
    parsed = mgr.set_value(key, value)
    console.print(f"[green]{key} = {parsed}[/]")


@app.command()
@error_handler
def reset(
    force: Annotated[bool, typer.Option("--force", "-y", help="Skip confirmation")] = False,
) -> None:
    """Restore all settings to their defaults."""
    mgr = _common.get_manager()
    if not force and not Confirm.ask("Reset all settings to defaults?"):
        console.print("Cancelled.")
        raise typer.Exit()
    mgr.reset()
    console.print("[green]Configuration reset.[/]")


@app.command()
def path() -> None:
    """Print the config file location."""
    typer.echo(str(_common.get_manager().config_path))
