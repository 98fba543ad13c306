"""Catalog endpoints, default paths, environment variable names."""

from __future__ import annotations

import platformdirs

APP_NAME = "fw-browser"
APP_AUTHOR = "fw-browser"

CONFIG_DIR = platformdirs.user_config_path(APP_NAME, APP_AUTHOR)
CONFIG_FILE = CONFIG_DIR / "config.toml"

# Environment variable names
ENV_TIMEOUT = "FW_BROWSER_TIMEOUT"
ENV_FORMAT = "FW_BROWSER_FORMAT"
ENV_LOG_LEVEL = "FW_BROWSER_LOG_LEVEL"

# Catalog API (fixed, not configurable)
CATALOG_BASE_URL = "https://fw-update.ubnt.com/api"
FIRMWARE_ENDPOINT = "/firmware"
FIRMWARE_LATEST_ENDPOINT = "/firmware-latest"

# Defaults
DEFAULT_PAGE_SIZE = 50
DEFAULT_TIMEOUT = 30.0
DEFAULT_DEBOUNCE_SECONDS = 0.3
DEFAULT_SORT = "-created"

OUTPUT_FORMATS = ("table", "json", "yaml", "csv")
