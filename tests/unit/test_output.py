"""Tests for output formatting and table helpers."""

from __future__ import annotations

from io import StringIO
from unittest.mock import patch

from rich.console import Console

from fw_browser.models.firmware import FirmwareItem, FirmwareResponse
from fw_browser.output.formatter import output, output_csv
from fw_browser.output.tables import (
    firmware_csv_row,
    firmware_details,
    firmware_row,
    kv_table,
    make_table,
)


def _capture():
    buf = StringIO()
    return buf, Console(file=buf, force_terminal=False, width=200)


class TestTables:
    def test_make_table(self):
        table = make_table("Test", ["A", "B"], [["1", "2"], ["3", None]], caption="cap")
        buf, console = _capture()
        console.print(table)
        out = buf.getvalue()
        assert "Test" in out
        assert "cap" in out
        assert "3" in out

    def test_kv_table(self):
        buf, console = _capture()
        console.print(kv_table({"key1": "val1", "key2": None}, title="KV"))
        out = buf.getvalue()
        assert "key1" in out
        assert "val1" in out


class TestFirmwareRows:
    def test_row(self, make_item):
        item = FirmwareItem.model_validate(make_item(id="abc"))
        row = firmware_row(item)
        assert row[0] == "G4 Pro"
        assert row[3] == "Official"
        assert row[4] == "1.5 KB"
        assert row[5] == "Mar 5, 2024"
        assert row[6] == "abc"

    def test_beta_channel_highlighted(self, make_item):
        item = FirmwareItem.model_validate(make_item(channel="beta-public"))
        assert firmware_row(item)[3] == "[yellow]Beta[/]"

    def test_csv_row_is_raw(self, make_item):
        item = FirmwareItem.model_validate(make_item(channel="beta-public"))
        row = firmware_csv_row(item)
        assert row[3] == "beta-public"
        assert row[4] == "1536"
        assert row[5].startswith("2024-03-05T14:22:10")

    def test_details(self, make_item):
        item = FirmwareItem.model_validate(make_item(id="abc"))
        details = firmware_details(item)
        assert details["Download"] == "https://dl.ui.com/firmware/abc/uvc.s5l.bin"
        assert details["Size"] == "1.5 KB (1536 bytes)"
        assert details["Tag: fullVersion"] == "4.69.55.67.bc8a1f4.240305.1422"


class TestOutput:
    def test_csv_output(self):
        buf, console = _capture()
        with patch("fw_browser.output.formatter.console", console):
            output_csv(["Name", "Value"], [["a", "1"], ["b", None]])
        out = buf.getvalue()
        assert "Name,Value" in out
        assert "b," in out

    def test_json_uses_aliases(self, make_item, make_response):
        buf, console = _capture()
        resp = FirmwareResponse.model_validate(make_response([make_item(id="z")]))
        with patch("fw_browser.output.formatter.console", console):
            output(resp, "json")
        out = buf.getvalue()
        assert '"_embedded"' in out
        assert '"_links"' in out

    def test_yaml_list_of_models(self, make_item):
        buf, console = _capture()
        items = [FirmwareItem.model_validate(make_item(id="y"))]
        with patch("fw_browser.output.formatter.console", console):
            output(items, "yaml")
        assert "id: y" in buf.getvalue()

    def test_csv_without_rows_falls_back_to_json(self):
        buf, console = _capture()
        with patch("fw_browser.output.formatter.console", console):
            output({"a": 1}, "csv")
        assert '"a": 1' in buf.getvalue()
