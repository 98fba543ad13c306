"""Tests for the response cache."""

from __future__ import annotations

import threading

from fw_browser.client.cache import ResponseCache


class TestResponseCache:
    def test_miss_returns_none(self):
        assert ResponseCache().get("https://x/a") is None

    def test_put_and_get(self):
        cache = ResponseCache()
        cache.put("https://x/a", {"v": 1})
        assert cache.get("https://x/a") == {"v": 1}
        assert "https://x/a" in cache
        assert len(cache) == 1

    def test_keys_are_exact_strings(self):
        cache = ResponseCache()
        cache.put("https://x/a?b=1&c=2", {"v": 1})
        assert cache.get("https://x/a?c=2&b=1") is None

    def test_put_overwrites_single_entry(self):
        cache = ResponseCache()
        cache.put("k", 1)
        cache.put("k", 2)
        assert len(cache) == 1
        assert cache.get("k") == 2

    def test_clear(self):
        cache = ResponseCache()
        cache.put("k", 1)
        cache.clear()
        assert len(cache) == 0
        assert "k" not in cache
        assert cache.get("k") is None

    def test_concurrent_puts(self):
        cache = ResponseCache()

        def fill(start: int) -> None:
            for i in range(start, start + 200):
                cache.put(f"k{i}", i)

        threads = [threading.Thread(target=fill, args=(n * 200,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(cache) == 800
