"""Firmware catalog data models (HAL-style payloads)."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from fw_browser.client.errors import NotFoundError


class Channel(str, Enum):
    """Firmware release track."""

    RELEASE = "release"
    BETA_PUBLIC = "beta-public"
    BETA = "beta"
    ALPHA = "alpha"


class Link(BaseModel):
    model_config = ConfigDict(frozen=True)

    href: str


class UploadLink(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str | None = None
    href: str


class FirmwareLinks(BaseModel):
    """Hyperlinks carried by a firmware item."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    self_: Link | None = Field(default=None, alias="self")
    data: Link | None = None
    upload: list[UploadLink] | None = None


class FirmwareItem(BaseModel):
    """One firmware build as returned by the catalog."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    channel: str
    created: datetime | None = None
    updated: datetime | None = None
    file_size: int = 0
    md5: str | None = None
    sha256_checksum: str | None = None
    platform: str
    product: str
    version: str | None = None
    version_major: int = 0
    version_minor: int = 0
    version_patch: int = 0
    version_prerelease: str | None = None
    probability_computed: float | None = None
    tags: dict[str, Any] = Field(default_factory=dict)
    links: FirmwareLinks = Field(default_factory=FirmwareLinks, alias="_links")

    @property
    def version_triple(self) -> tuple[int, int, int]:
        return (self.version_major, self.version_minor, self.version_patch)

    @property
    def display_version(self) -> str:
        """Full version string, preferring the catalog's own tag."""
        full = self.tags.get("fullVersion")
        if full:
            return str(full)
        if self.version:
            return self.version
        base = ".".join(str(part) for part in self.version_triple)
        if self.version_prerelease:
            return f"{base}-{self.version_prerelease}"
        return base


class EmbeddedFirmware(BaseModel):
    model_config = ConfigDict(frozen=True)

    firmware: list[FirmwareItem] = Field(default_factory=list)


class ResponseLinks(BaseModel):
    """Collection navigation links."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    self_: Link | None = Field(default=None, alias="self")
    next: Link | None = None
    prev: Link | None = None


class PageMetadata(BaseModel):
    """Pagination metadata from the catalog."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    size: int = 0
    total_elements: int = Field(default=0, alias="totalElements")
    total_pages: int = Field(default=0, alias="totalPages")
    number: int = 0


class FirmwareResponse(BaseModel):
    """Result of one catalog collection call.

    Format: ``{"_embedded": {"firmware": [...]}, "_links": {...}, "page": {...}}``
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    embedded: EmbeddedFirmware = Field(
        default_factory=EmbeddedFirmware, alias="_embedded",
    )
    links: ResponseLinks | None = Field(default=None, alias="_links")
    page: PageMetadata | None = None

    @property
    def items(self) -> list[FirmwareItem]:
        return self.embedded.firmware

    @property
    def has_next(self) -> bool:
        if self.links is not None and self.links.next is not None:
            return True
        if self.page is not None:
            return self.page.number + 1 < self.page.total_pages
        return False


class FilterOptions(BaseModel):
    """Distinct values available for populating filter choices."""

    products: list[str] = Field(default_factory=list)
    platforms: list[str] = Field(default_factory=list)
    channels: list[str] = Field(default_factory=list)


class FirmwareLookup(BaseModel):
    """Outcome of a single-item lookup: the item, or a confirmed absence."""

    model_config = ConfigDict(frozen=True)

    firmware_id: str
    item: FirmwareItem | None = None

    @property
    def found(self) -> bool:
        return self.item is not None

    def unwrap(self) -> FirmwareItem:
        if self.item is None:
            raise NotFoundError(f"Firmware '{self.firmware_id}' not found")
        return self.item
