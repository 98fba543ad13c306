"""Shared helpers for CLI commands: service factory, options, settings."""

from __future__ import annotations

from typing import Annotated

import typer

from fw_browser.client.catalog import CatalogClient
from fw_browser.config.manager import ConfigManager
from fw_browser.config.models import BrowserConfig
from fw_browser.service.firmware import FirmwareService

# Shared Typer option type aliases
FormatOpt = Annotated[
    str | None,
    typer.Option("--format", "-f", help="Output format (table, json, yaml, csv)"),
]
TimeoutOpt = Annotated[
    float | None,
    typer.Option("--timeout", help="Request timeout in seconds"),
]
ProductOpt = Annotated[
    str | None,
    typer.Option("--product", "-p", help="Product name, e.g. 'G4 Pro'"),
]
PlatformOpt = Annotated[
    str | None,
    typer.Option("--platform", "-P", help="Platform code, e.g. s5l"),
]
ChannelOpt = Annotated[
    str | None,
    typer.Option("--channel", "-c", help="Channel: release, beta-public, beta, alpha"),
]
LimitOpt = Annotated[
    int | None,
    typer.Option("--limit", help="Max items to return"),
]
OffsetOpt = Annotated[
    int | None,
    typer.Option("--offset", help="Offset for pagination"),
]


def get_manager() -> ConfigManager:
    return ConfigManager()


def load_settings(
    *, timeout: float | None = None, fmt: str | None = None,
) -> BrowserConfig:
    """Effective settings from CLI options, env vars, and the config file."""
    return get_manager().resolve(timeout=timeout, fmt=fmt)


def make_service(settings: BrowserConfig) -> FirmwareService:
    """Create a FirmwareService backed by a fresh cached client."""
    client = CatalogClient(timeout=settings.timeout, verify_ssl=settings.verify_ssl)
    return FirmwareService(client)
