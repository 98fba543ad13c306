"""Tests for download checksum verification."""

from __future__ import annotations

import hashlib
from pathlib import Path

import pytest

from fw_browser.client.errors import ChecksumMismatchError
from fw_browser.models.firmware import FirmwareItem
from fw_browser.service.checksum import verify_checksum

PAYLOAD = b"firmware-image"


def _write(tmp_path: Path) -> Path:
    path = tmp_path / "fw.bin"
    path.write_bytes(PAYLOAD)
    return path


class TestVerifyChecksum:
    def test_sha256_match(self, tmp_path: Path, make_item):
        item = FirmwareItem.model_validate(
            make_item(sha256_checksum=hashlib.sha256(PAYLOAD).hexdigest().upper())
        )
        assert verify_checksum(_write(tmp_path), item) == "sha256"

    def test_sha256_mismatch(self, tmp_path: Path, make_item):
        item = FirmwareItem.model_validate(make_item(sha256_checksum="00" * 32))
        with pytest.raises(ChecksumMismatchError) as exc_info:
            verify_checksum(_write(tmp_path), item)
        assert exc_info.value.algorithm == "sha256"
        assert exc_info.value.exit_code == 6

    def test_md5_fallback(self, tmp_path: Path, make_item):
        item = FirmwareItem.model_validate(
            make_item(sha256_checksum=None, md5=hashlib.md5(PAYLOAD).hexdigest())
        )
        assert verify_checksum(_write(tmp_path), item) == "md5"

    def test_no_checksum(self, tmp_path: Path, make_item):
        item = FirmwareItem.model_validate(make_item(sha256_checksum=None, md5=None))
        assert verify_checksum(_write(tmp_path), item) is None
