"""Trailing-edge debounce on a background timer."""

from __future__ import annotations

import threading
from typing import Any, Callable


class Debouncer:
    """Collapse bursts of calls into one, run after *delay* seconds of quiet."""

    def __init__(self, delay: float, func: Callable[..., Any]) -> None:
        self.delay = delay
        self.func = func
        self._timer: threading.Timer | None = None
        self._pending: tuple[tuple[Any, ...], dict[str, Any]] | None = None
        self._lock = threading.Lock()

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._pending is not None

    def trigger(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._pending = (args, kwargs)
            if self.delay <= 0:
                self._timer = None
            else:
                self._timer = threading.Timer(self.delay, self._fire)
                self._timer.daemon = True
                self._timer.start()
                return
        self._fire()

    def _fire(self) -> None:
        with self._lock:
            call = self._pending
            self._pending = None
            self._timer = None
        if call is not None:
            args, kwargs = call
            self.func(*args, **kwargs)

    def flush(self) -> None:
        """Run the pending call now, if any."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
        self._fire()

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._pending = None
