"""Integrity checks for downloaded firmware images."""

from __future__ import annotations

import hashlib
from pathlib import Path

from fw_browser.client.errors import ChecksumMismatchError
from fw_browser.models.firmware import FirmwareItem


def file_digest(path: Path, algorithm: str) -> str:
    digest = hashlib.new(algorithm)
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            digest.update(chunk)
    return digest.hexdigest()


def verify_checksum(path: Path, item: FirmwareItem) -> str | None:
    """Check *path* against the item's sha256, falling back to md5.

    Returns the algorithm that was verified, or ``None`` when the catalog
    publishes no checksum for the item.
    """
    for algorithm, expected in (("sha256", item.sha256_checksum), ("md5", item.md5)):
        if not expected:
            continue
        actual = file_digest(path, algorithm)
        if actual.lower() != expected.lower():
            raise ChecksumMismatchError(algorithm, expected, actual)
        return algorithm
    return None
