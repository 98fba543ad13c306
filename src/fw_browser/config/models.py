"""Pydantic models for CLI configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from fw_browser.config.constants import (
    DEFAULT_DEBOUNCE_SECONDS,
    DEFAULT_PAGE_SIZE,
    DEFAULT_TIMEOUT,
    OUTPUT_FORMATS,
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class BrowserConfig(BaseModel):
    """Root configuration model."""

    default_format: str = Field(default="table", description="Output format")
    page_size: int = Field(
        default=DEFAULT_PAGE_SIZE, ge=1, le=500, description="Rows per page",
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, le=600, description="Request timeout in seconds",
    )
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    debounce_seconds: float = Field(
        default=DEFAULT_DEBOUNCE_SECONDS, ge=0, le=5,
        description="Quiet period before a filter change triggers a fetch",
    )
    default_sort: str | None = Field(
        default=None, description="Sort expression, e.g. -created",
    )
    log_level: str = Field(default="WARNING", description="Logging level")

    @field_validator("default_format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in OUTPUT_FORMATS:
            raise ValueError(f"Format must be one of: {', '.join(OUTPUT_FORMATS)}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of: {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("default_sort")
    @classmethod
    def validate_sort(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        if not v or v == "-":
            return None
        return v
