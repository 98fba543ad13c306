"""In-memory response cache keyed by request URL."""

from __future__ import annotations

import threading
from typing import Any


class ResponseCache:
    """Session-lifetime map of request URL to parsed response body.

    Keys are compared as exact strings, so two URLs that differ only in
    parameter order are separate entries. Entries are never expired or
    evicted; the catalog is treated as immutable per query.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        with self._lock:
            return self._entries.get(key)

    def put(self, key: str, value: Any) -> None:
        with self._lock:
            self._entries[key] = value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
