"""Integration tests for the interactive browse command."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import httpx
import pytest
import respx
from typer.testing import CliRunner

from fw_browser.app import app
from fw_browser.browser import FirmwareBrowser
from fw_browser.commands.browse import apply_command
from fw_browser.config.manager import ConfigManager
from fw_browser.models.filters import SortDirection

runner = CliRunner()

BASE = "https://fw-update.ubnt.com/api"


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path):
    mgr = ConfigManager(config_path=tmp_path / "config.toml")
    mgr.set_value("debounce_seconds", "0")
    with patch("fw_browser.commands._common.get_manager", return_value=mgr):
        yield


class TestApplyCommand:
    def test_quit(self):
        assert apply_command(None, "quit") is False  # type: ignore[arg-type]

    @respx.mock
    def test_field_updates(self, service, make_response):
        respx.get(f"{BASE}/firmware").mock(
            return_value=httpx.Response(200, json=make_response([]))
        )
        browser = FirmwareBrowser(service, debounce_seconds=0)
        assert apply_command(browser, "platform s5l")
        assert browser.state.platform == "s5l"
        assert apply_command(browser, "sort -version")
        assert browser.state.sort_field == "version"
        assert browser.state.sort_direction is SortDirection.DESC
        assert apply_command(browser, "asc")
        assert browser.state.sort_direction is SortDirection.ASC
        assert apply_command(browser, "next")
        assert browser.state.offset == 50
        assert apply_command(browser, "clear")
        assert browser.state.platform is None
        assert browser.state.offset == 0


class TestBrowseCommand:
    @respx.mock
    def test_browse_session(self, make_item, make_response):
        respx.get(f"{BASE}/firmware-latest").mock(
            return_value=httpx.Response(200, json=make_response([make_item()]))
        )
        route = respx.get(f"{BASE}/firmware").mock(
            return_value=httpx.Response(200, json=make_response(
                [make_item(id="fw-1", product="G4 Dome")],
                page={"size": 50, "totalElements": 1, "totalPages": 1, "number": 0},
            ))
        )
        result = runner.invoke(app, ["browse"], input="product G4 Dome\nquit\n")
        assert result.exit_code == 0, result.output
        assert "fw-1" in result.output
        assert route.calls.last.request.url.params["filter"] == "eq~~product~~G4 Dome"

    @respx.mock
    def test_browse_shows_fetch_error(self):
        respx.get(f"{BASE}/firmware-latest").mock(return_value=httpx.Response(503))
        respx.get(f"{BASE}/firmware").mock(return_value=httpx.Response(500))
        result = runner.invoke(app, ["browse"], input="quit\n")
        assert result.exit_code == 0
        assert "Failed to fetch: 500" in result.output
