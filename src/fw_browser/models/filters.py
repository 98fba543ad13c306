"""User-facing filter selection."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from fw_browser.config.constants import DEFAULT_SORT
from fw_browser.service.query import FirmwareFilters, parse_sort, sort_expression

_DEFAULT_FIELD, _DEFAULT_DESC = parse_sort(DEFAULT_SORT)


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class FilterState(BaseModel):
    """Current product/platform selection, sort, and page position."""

    product: str | None = None
    platform: str | None = None
    channel: str | None = None
    search: str = ""
    sort_field: str = _DEFAULT_FIELD
    sort_direction: SortDirection = (
        SortDirection.DESC if _DEFAULT_DESC else SortDirection.ASC
    )
    offset: int = 0

    @property
    def sort(self) -> str:
        return sort_expression(
            self.sort_field, self.sort_direction is SortDirection.DESC,
        )

    def to_filters(self, limit: int) -> FirmwareFilters:
        return FirmwareFilters(
            product=self.product or None,
            platform=self.platform or None,
            channel=self.channel or None,
            limit=limit,
            offset=self.offset,
            sort=self.sort,
        )
