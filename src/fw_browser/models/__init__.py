"""Pydantic data models for the firmware catalog."""

from fw_browser.models.filters import FilterState, SortDirection
from fw_browser.models.firmware import (
    Channel,
    FilterOptions,
    FirmwareItem,
    FirmwareLinks,
    FirmwareLookup,
    FirmwareResponse,
    PageMetadata,
)

__all__ = [
    "Channel",
    "FilterOptions",
    "FilterState",
    "FirmwareItem",
    "FirmwareLinks",
    "FirmwareLookup",
    "FirmwareResponse",
    "PageMetadata",
    "SortDirection",
]
