"""Pure presentation helpers for firmware items."""

from __future__ import annotations

from datetime import datetime

from fw_browser.models.firmware import Channel, FirmwareItem

_SIZE_UNITS = ("B", "KB", "MB", "GB")

_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_CHANNEL_NAMES = {
    Channel.RELEASE.value: "Official",
    Channel.BETA_PUBLIC.value: "Beta",
    Channel.BETA.value: "Beta",
    Channel.ALPHA.value: "Alpha",
}


def format_file_size(num_bytes: int) -> str:
    """Format a byte count with binary units, e.g. ``1536`` -> ``1.5 KB``."""
    if num_bytes <= 0:
        return "0 B"
    # floor(log1024(n)), computed on integers, capped at the largest unit
    index = 0
    while index < len(_SIZE_UNITS) - 1 and num_bytes >= 1024 ** (index + 1):
        index += 1
    return f"{num_bytes / 1024 ** index:.1f} {_SIZE_UNITS[index]}"


def format_date(value: datetime | str | None) -> str:
    """Short en-US date, e.g. ``Mar 5, 2024``."""
    if value is None or value == "":
        return ""
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    return f"{_MONTHS[value.month - 1]} {value.day}, {value.year}"


def get_channel_display_name(channel: str) -> str:
    if channel in _CHANNEL_NAMES:
        return _CHANNEL_NAMES[channel]
    return channel[:1].upper() + channel[1:]


def is_stable_channel(channel: str) -> bool:
    return channel == Channel.RELEASE.value


def get_download_url(item: FirmwareItem) -> str | None:
    """The authoritative download link (``_links.data.href``)."""
    if item.links.data is None:
        return None
    return item.links.data.href
