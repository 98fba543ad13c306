"""Configuration manager — read/write TOML config, resolve overrides."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import tomli_w
from pydantic import ValidationError

from fw_browser.client.errors import ConfigurationError
from fw_browser.config.constants import (
    CONFIG_FILE,
    ENV_FORMAT,
    ENV_LOG_LEVEL,
    ENV_TIMEOUT,
)
from fw_browser.config.models import BrowserConfig

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib


class ConfigManager:
    """Manages CLI configuration on disk and resolves runtime overrides."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or CONFIG_FILE
        self._config: BrowserConfig | None = None

    @property
    def config(self) -> BrowserConfig:
        if self._config is None:
            self._config = self._load()
        return self._config

    def _load(self) -> BrowserConfig:
        if not self.config_path.exists():
            return BrowserConfig()
        raw = self.config_path.read_bytes()
        try:
            data = tomllib.loads(raw.decode())
            return BrowserConfig(**data)
        except (tomllib.TOMLDecodeError, ValidationError) as exc:
            raise ConfigurationError(
                f"Invalid config file {self.config_path}: {exc}"
            ) from exc

    def save(self) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        defaults = BrowserConfig().model_dump()
        # Only persist values that differ from the defaults
        data: dict[str, Any] = {
            key: value
            for key, value in self.config.model_dump(exclude_none=True).items()
            if defaults.get(key) != value
        }
        # Atomic write: write to temp file, then rename
        temp = self.config_path.with_suffix(".tmp")
        temp.write_text(tomli_w.dumps(data))
        temp.replace(self.config_path)

    def set_value(self, key: str, raw: str) -> Any:
        """Validate and persist a single setting, returning the parsed value."""
        if key not in BrowserConfig.model_fields:
            known = ", ".join(BrowserConfig.model_fields)
            raise ConfigurationError(f"Unknown setting '{key}'. Known settings: {known}")
        values = self.config.model_dump()
        values[key] = None if raw.lower() in ("", "none", "null") else raw
        try:
            self._config = BrowserConfig(**values)
        except ValidationError as exc:
            msg = exc.errors()[0]["msg"]
            raise ConfigurationError(f"Invalid value for '{key}': {msg}") from exc
        self.save()
        return getattr(self._config, key)

    def reset(self) -> None:
        self._config = BrowserConfig()
        if self.config_path.exists():
            self.config_path.unlink()

    def resolve(
        self,
        *,
        timeout: float | None = None,
        fmt: str | None = None,
        log_level: str | None = None,
    ) -> BrowserConfig:
        """Resolve effective settings.

        Precedence: CLI flags > env vars > config file > defaults.
        """
        values = self.config.model_dump()
        env_timeout = os.environ.get(ENV_TIMEOUT)
        env_format = os.environ.get(ENV_FORMAT)
        env_log_level = os.environ.get(ENV_LOG_LEVEL)

        if timeout is not None:
            values["timeout"] = timeout
        elif env_timeout:
            values["timeout"] = env_timeout
        if fmt:
            values["default_format"] = fmt
        elif env_format:
            values["default_format"] = env_format
        if log_level:
            values["log_level"] = log_level
        elif env_log_level:
            values["log_level"] = env_log_level

        try:
            return BrowserConfig(**values)
        except ValidationError as exc:
            msg = exc.errors()[0]["msg"]
            raise ConfigurationError(f"Invalid configuration override: {msg}") from exc
