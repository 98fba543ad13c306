"""Interactive browsing session: filter state with debounced refetch."""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable

from fw_browser.client.errors import FirmwareBrowserError
from fw_browser.config.constants import DEFAULT_DEBOUNCE_SECONDS, DEFAULT_PAGE_SIZE
from fw_browser.models.filters import FilterState
from fw_browser.models.firmware import FirmwareResponse
from fw_browser.service.firmware import FirmwareService
from fw_browser.utils.debounce import Debouncer

logger = logging.getLogger(__name__)

ResultCallback = Callable[[FirmwareResponse], None]


class FirmwareBrowser:
    """Holds the current filter selection and the result set it produced.

    Every change schedules a refetch after a quiet period. Each fetch is
    tagged with a generation number; a response that arrives after a newer
    fetch has started is dropped.
    """

    def __init__(
        self,
        service: FirmwareService,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
        state: FilterState | None = None,
        on_result: ResultCallback | None = None,
    ) -> None:
        self.service = service
        self.page_size = page_size
        self.state = state or FilterState()
        self.on_result = on_result
        self.result: FirmwareResponse | None = None
        self.error: FirmwareBrowserError | None = None
        self._generation = 0
        self._lock = threading.Lock()
        self._settled = threading.Event()
        self._debouncer = Debouncer(debounce_seconds, self.refresh)

    @property
    def generation(self) -> int:
        return self._generation

    def update(self, **changes: Any) -> None:
        """Apply filter changes and schedule a refetch.

        Changing anything other than ``offset`` returns to the first page.
        """
        if "offset" not in changes:
            changes["offset"] = 0
        with self._lock:
            self.state = self.state.model_copy(update=changes)
            self._settled.clear()
        self._debouncer.trigger()

    def next_page(self) -> None:
        self.update(offset=self.state.offset + self.page_size)

    def prev_page(self) -> None:
        self.update(offset=max(0, self.state.offset - self.page_size))

    def refresh(self) -> None:
        """Fetch for the current state now, publishing only if still current."""
        with self._lock:
            self._generation += 1
            generation = self._generation
            state = self.state
            self._settled.clear()

        filters = state.to_filters(self.page_size)
        try:
            if state.search.strip():
                response = self.service.search_firmware(state.search, filters)
            else:
                response = self.service.fetch_firmware(filters)
        except FirmwareBrowserError as exc:
            self._publish(generation, error=exc)
            return
        self._publish(generation, response=response)

    def _publish(
        self,
        generation: int,
        *,
        response: FirmwareResponse | None = None,
        error: FirmwareBrowserError | None = None,
    ) -> None:
        with self._lock:
            if generation != self._generation:
                logger.debug(
                    "Discarding stale result (generation %d, current %d)",
                    generation, self._generation,
                )
                return
            self.result = response
            self.error = error
            self._settled.set()
        if response is not None and self.on_result is not None:
            self.on_result(response)

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the latest fetch has settled. Returns False on timeout."""
        if self._debouncer.pending:
            self._debouncer.flush()
        return self._settled.wait(timeout)

    def close(self) -> None:
        self._debouncer.cancel()
