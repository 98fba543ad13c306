"""Query-string builder for the catalog's filter grammar.

Each condition becomes a repeated ``filter`` parameter of the form
``<operator>~~<field>~~<value>``; the catalog applies them conjunctively.
"""

from __future__ import annotations

from enum import Enum
from urllib.parse import quote_plus

from pydantic import BaseModel, ConfigDict

# Characters the catalog grammar relies on; left unescaped
_SAFE = "~*"


class FilterOperator(str, Enum):
    EQ = "eq"
    NE = "ne"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    LIKE = "like"
    IN = "in"


class FilterCondition(BaseModel):
    """A single ``filter`` clause."""

    model_config = ConfigDict(frozen=True)

    field: str
    operator: FilterOperator = FilterOperator.EQ
    value: str

    def to_param(self) -> str:
        return f"{self.operator.value}~~{self.field}~~{self.value}"


class FirmwareFilters(BaseModel):
    """Simple equality filters plus paging and sort for a collection query."""

    product: str | None = None
    platform: str | None = None
    channel: str | None = None
    version: str | None = None
    limit: int | None = None
    offset: int | None = None
    sort: str | None = None


_EQ_FIELDS = ("product", "platform", "channel", "version")


def _encode(key: str, value: str) -> str:
    return f"{key}={quote_plus(value, safe=_SAFE)}"


def build_firmware_query(
    filters: FirmwareFilters | None = None,
    extra_conditions: list[FilterCondition] | None = None,
) -> str:
    """Serialize filters into a query string (without the leading ``?``).

    Conditions with empty values are dropped rather than sent as empty
    clauses. ``limit``, ``offset`` and ``sort`` are only emitted when set.
    """
    filters = filters or FirmwareFilters()
    conditions = list(extra_conditions or [])
    for name in _EQ_FIELDS:
        value = getattr(filters, name)
        if value:
            conditions.append(FilterCondition(field=name, value=value))

    parts = [_encode("filter", c.to_param()) for c in conditions if c.value and c.field]
    if filters.limit is not None:
        parts.append(_encode("limit", str(filters.limit)))
    if filters.offset is not None:
        parts.append(_encode("offset", str(filters.offset)))
    if filters.sort:
        parts.append(_encode("sort", filters.sort))
    return "&".join(parts)


def sort_expression(field: str, descending: bool = False) -> str:
    """Return the catalog sort expression, e.g. ``-created`` for newest first."""
    return f"-{field}" if descending else field


def parse_sort(expr: str) -> tuple[str, bool]:
    """Split a sort expression into ``(field, descending)``."""
    if expr.startswith("-"):
        return expr[1:], True
    return expr, False


def search_conditions(term: str) -> list[FilterCondition]:
    """Wildcard substring match on the product name."""
    term = term.strip()
    if not term:
        return []
    return [FilterCondition(field="product", operator=FilterOperator.LIKE, value=f"*{term}*")]
