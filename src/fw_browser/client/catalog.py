"""Cached HTTP client for the firmware catalog."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import httpx

from fw_browser.client.cache import ResponseCache
from fw_browser.client.errors import (
    FirmwareBrowserError,
    HttpError,
    InvalidResponseError,
    TransportError,
)
from fw_browser.config.constants import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


class CatalogClient:
    """Synchronous HTTP client that memoizes successful GET responses by URL."""

    def __init__(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        verify_ssl: bool = True,
        cache: ResponseCache | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.cache = cache if cache is not None else ResponseCache()
        self._client = httpx.Client(
            verify=verify_ssl,
            timeout=timeout,
            transport=transport,
            follow_redirects=True,
            headers={"Accept": "application/json"},
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> CatalogClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _handle_response(self, response: httpx.Response) -> httpx.Response:
        if response.is_success:
            return response
        raise HttpError(response.status_code, response.reason_phrase)

    def _send(self, url: str) -> httpx.Response:
        try:
            response = self._client.get(url)
        except httpx.TimeoutException as exc:
            raise TransportError(f"Request to {url} timed out: {exc}") from exc
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            raise TransportError(f"Invalid URL {url}: {exc}") from exc
        except httpx.TransportError as exc:
            raise TransportError(f"Cannot reach {url}: {exc}") from exc
        except httpx.RequestError as exc:
            raise TransportError(f"Request to {url} failed: {exc}") from exc
        return self._handle_response(response)

    def get_json(self, url: str) -> Any:
        """Return the parsed body for *url*, from the cache when present.

        A failed request leaves the cache untouched, so the next call for
        the same URL goes back to the network.
        """
        cached = self.cache.get(url)
        if cached is not None:
            logger.debug("Cache hit: %s", url)
            return cached

        logger.debug("Cache miss: %s", url)
        response = self._send(url)
        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise InvalidResponseError(f"Invalid JSON body from {url}: {exc}") from exc
        self.cache.put(url, data)
        return data

    def stream_to_file(self, url: str, dest: Path) -> int:
        """Stream a response body to a file, returning bytes written.

        Uses atomic write: streams to a .partial temp file, then renames
        on success. Cleans up the temp file on any error. Not cached.
        """
        temp = dest.with_suffix(dest.suffix + ".partial")
        try:
            with self._client.stream("GET", url) as response:
                if response.status_code >= 400:
                    response.read()  # must read body before _handle_response
                self._handle_response(response)
                total = 0
                with open(temp, "wb") as f:
                    for chunk in response.iter_bytes(chunk_size=65536):
                        f.write(chunk)
                        total += len(chunk)
            if total == 0:
                raise FirmwareBrowserError(f"Empty response when downloading to {dest}")
            temp.replace(dest)
            return total
        except httpx.TimeoutException as exc:
            raise TransportError(f"Request to {url} timed out: {exc}") from exc
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            raise TransportError(f"Invalid URL {url}: {exc}") from exc
        except httpx.TransportError as exc:
            raise TransportError(f"Cannot reach {url}: {exc}") from exc
        except httpx.RequestError as exc:
            raise TransportError(f"Request to {url} failed: {exc}") from exc
        except OSError as exc:
            raise FirmwareBrowserError(f"Cannot write to {dest}: {exc}") from exc
        finally:
            if temp.exists():
                temp.unlink(missing_ok=True)
