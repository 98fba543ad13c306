"""Firmware service: the query façade over the cached catalog client."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from fw_browser.client.catalog import CatalogClient
from fw_browser.client.errors import (
    FirmwareBrowserError,
    HttpError,
    InvalidResponseError,
)
from fw_browser.config.constants import (
    CATALOG_BASE_URL,
    DEFAULT_PAGE_SIZE,
    FIRMWARE_ENDPOINT,
    FIRMWARE_LATEST_ENDPOINT,
)
from fw_browser.models.firmware import (
    FilterOptions,
    FirmwareItem,
    FirmwareLookup,
    FirmwareResponse,
)
from fw_browser.service.query import (
    FilterCondition,
    FirmwareFilters,
    build_firmware_query,
    search_conditions,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _casefold_sorted(values: set[str]) -> list[str]:
    return sorted(values, key=lambda v: (v.lower(), v))


def _parse(model: type[M], data: Any, url: str) -> M:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        logger.debug("Unexpected payload from %s: %s", url, exc)
        raise InvalidResponseError(
            f"Unexpected payload from {url}: {exc.error_count()} validation error(s)"
        ) from exc


class FirmwareService:
    """Typed read-only access to the firmware catalog."""

    def __init__(self, client: CatalogClient, base_url: str = CATALOG_BASE_URL) -> None:
        self.client = client
        self.base_url = base_url.rstrip("/")

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> FirmwareService:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def firmware_url(self, query: str = "") -> str:
        url = f"{self.base_url}{FIRMWARE_ENDPOINT}"
        return f"{url}?{query}" if query else url

    def fetch_firmware(
        self,
        filters: FirmwareFilters | None = None,
        extra_conditions: list[FilterCondition] | None = None,
    ) -> FirmwareResponse:
        """Fetch one page of firmware matching *filters*.

        Defaults to ``limit=50, offset=0`` when paging is unset.
        """
        filters = filters or FirmwareFilters()
        paged = filters.model_copy(update={
            "limit": filters.limit or DEFAULT_PAGE_SIZE,
            "offset": filters.offset or 0,
        })
        url = self.firmware_url(build_firmware_query(paged, extra_conditions))
        try:
            data = self.client.get_json(url)
        except FirmwareBrowserError as exc:
            logger.debug("Error fetching firmware: %s", exc)
            raise
        return _parse(FirmwareResponse, data, url)

    def fetch_latest_firmware(self) -> FirmwareResponse:
        """Fetch the newest build per (product, platform, channel)."""
        url = f"{self.base_url}{FIRMWARE_LATEST_ENDPOINT}"
        try:
            data = self.client.get_json(url)
        except FirmwareBrowserError as exc:
            logger.debug("Error fetching latest firmware: %s", exc)
            raise
        return _parse(FirmwareResponse, data, url)

    def search_firmware(
        self, term: str, filters: FirmwareFilters | None = None,
    ) -> FirmwareResponse:
        """Substring search on product name, combined with *filters*."""
        return self.fetch_firmware(filters, search_conditions(term))

    def lookup_firmware(self, firmware_id: str) -> FirmwareLookup:
        """Fetch a single item; a 404 becomes a not-found result, not an error."""
        url = f"{self.base_url}{FIRMWARE_ENDPOINT}/{firmware_id}"
        try:
            data = self.client.get_json(url)
        except HttpError as exc:
            if exc.status_code == 404:
                logger.info("Firmware %s not found", firmware_id)
                return FirmwareLookup(firmware_id=firmware_id)
            logger.debug("Error fetching firmware by ID: %s", exc)
            raise
        except FirmwareBrowserError as exc:
            logger.debug("Error fetching firmware by ID: %s", exc)
            raise
        return FirmwareLookup(
            firmware_id=firmware_id, item=_parse(FirmwareItem, data, url),
        )

    def get_firmware_by_id(self, firmware_id: str) -> FirmwareItem | None:
        return self.lookup_firmware(firmware_id).item

    def get_initial_filter_values(self) -> FilterOptions:
        """Distinct products, platforms and channels from the latest listing.

        Failures are logged and yield empty lists so that callers can still
        render without filter choices.
        """
        try:
            firmware = self.fetch_latest_firmware().items
        except FirmwareBrowserError as exc:
            logger.warning("Error fetching initial filter values: %s", exc)
            return FilterOptions()
        return FilterOptions(
            products=_casefold_sorted({fw.product for fw in firmware}),
            platforms=_casefold_sorted({fw.platform for fw in firmware}),
            channels=_casefold_sorted({fw.channel for fw in firmware}),
        )
