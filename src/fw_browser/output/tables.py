"""Rich table rendering helpers."""

from __future__ import annotations

from typing import Any, Sequence

from rich.table import Table

from fw_browser.models.firmware import FirmwareItem
from fw_browser.service.formatting import (
    format_date,
    format_file_size,
    get_channel_display_name,
    get_download_url,
    is_stable_channel,
)

FIRMWARE_COLUMNS = ["Product", "Platform", "Version", "Channel", "Size", "Created", "ID"]


def make_table(
    title: str | None,
    columns: Sequence[str],
    rows: Sequence[Sequence[Any]],
    *,
    caption: str | None = None,
    show_lines: bool = False,
) -> Table:
    """Build a Rich Table from column headers and row data."""
    table = Table(title=title, caption=caption, show_lines=show_lines)
    for col in columns:
        table.add_column(col, no_wrap=False)
    for row in rows:
        table.add_row(*(str(cell) if cell is not None else "" for cell in row))
    return table


def kv_table(data: dict[str, Any], *, title: str | None = None) -> Table:
    """Render a key-value dict as a two-column table."""
    table = Table(title=title, show_header=False, show_lines=False)
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Value")
    for key, value in data.items():
        table.add_row(key, str(value) if value is not None else "")
    return table


def firmware_row(item: FirmwareItem) -> list[str]:
    channel = get_channel_display_name(item.channel)
    if not is_stable_channel(item.channel):
        channel = f"[yellow]{channel}[/]"
    return [
        item.product,
        item.platform,
        item.display_version,
        channel,
        format_file_size(item.file_size),
        format_date(item.created),
        item.id,
    ]


def firmware_csv_row(item: FirmwareItem) -> list[str]:
    return [
        item.product,
        item.platform,
        item.display_version,
        item.channel,
        str(item.file_size),
        item.created.isoformat() if item.created else "",
        item.id,
    ]


def firmware_details(item: FirmwareItem) -> dict[str, Any]:
    """Key/value view of a single firmware item."""
    details: dict[str, Any] = {
        "ID": item.id,
        "Product": item.product,
        "Platform": item.platform,
        "Version": item.display_version,
        "Channel": get_channel_display_name(item.channel),
        "Size": f"{format_file_size(item.file_size)} ({item.file_size} bytes)",
        "Created": format_date(item.created),
        "Updated": format_date(item.updated),
        "MD5": item.md5,
        "SHA-256": item.sha256_checksum,
        "Probability": item.probability_computed,
        "Download": get_download_url(item),
    }
    for key, value in item.tags.items():
        details[f"Tag: {key}"] = value
    return details
