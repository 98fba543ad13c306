"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from fw_browser.client.catalog import CatalogClient
from fw_browser.config.manager import ConfigManager
from fw_browser.service.firmware import FirmwareService

BASE = "https://fw-update.ubnt.com/api"


def build_item(**overrides: Any) -> dict[str, Any]:
    """A catalog firmware item as the API returns it."""
    fw_id = overrides.pop("id", "0b6f1c2e-aaaa-4bbb-8ccc-000000000001")
    item: dict[str, Any] = {
        "id": fw_id,
        "channel": "release",
        "created": "2024-03-05T14:22:10.000Z",
        "updated": "2024-03-06T09:00:00.000Z",
        "file_size": 1536,
        "md5": "d41d8cd98f00b204e9800998ecf8427e",
        "sha256_checksum": "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855",
        "platform": "s5l",
        "product": "G4 Pro",
        "version": "v4.69.55",
        "version_major": 4,
        "version_minor": 69,
        "version_patch": 55,
        "probability_computed": 0.5,
        "tags": {"fullVersion": "4.69.55.67.bc8a1f4.240305.1422"},
        "_links": {
            "self": {"href": f"{BASE}/firmware/{fw_id}"},
            "data": {"href": f"https://dl.ui.com/firmware/{fw_id}/uvc.s5l.bin"},
        },
    }
    item.update(overrides)
    return item


def build_response(
    items: list[dict[str, Any]], *, page: dict[str, int] | None = None,
) -> dict[str, Any]:
    body: dict[str, Any] = {
        "_embedded": {"firmware": items},
        "_links": {"self": {"href": f"{BASE}/firmware"}},
    }
    if page is not None:
        body["page"] = page
    return body


@pytest.fixture
def make_item():
    """Factory for catalog item payloads; keyword arguments override fields."""
    return build_item


@pytest.fixture
def make_response():
    """Factory for HAL collection payloads."""
    return build_response


@pytest.fixture
def firmware_item() -> dict[str, Any]:
    return build_item()


@pytest.fixture
def latest_response() -> dict[str, Any]:
    """Sample firmware-latest payload with mixed-case product names."""
    return build_response([
        build_item(id="1", product="B", platform="s5l", channel="release"),
        build_item(id="2", product="a", platform="sav530q", channel="beta"),
        build_item(id="3", product="C", platform="S2L", channel="alpha"),
        build_item(id="4", product="a", platform="s5l", channel="release"),
    ])


@pytest.fixture
def paged_response() -> dict[str, Any]:
    return build_response(
        [build_item(id="1"), build_item(id="2", channel="beta")],
        page={"size": 2, "totalElements": 10, "totalPages": 5, "number": 0},
    )


@pytest.fixture
def client():
    with CatalogClient() as c:
        yield c


@pytest.fixture
def service(client: CatalogClient) -> FirmwareService:
    return FirmwareService(client)


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)
