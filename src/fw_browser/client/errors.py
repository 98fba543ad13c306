"""Typed exceptions and error handling decorator."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from rich.console import Console

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class FirmwareBrowserError(Exception):
    """Base exception for fw-browser."""

    exit_code: int = 1


class TransportError(FirmwareBrowserError):
    """Network-level failure; no response was received."""

    exit_code = 2


class HttpError(FirmwareBrowserError):
    """The catalog answered with a non-success status."""

    exit_code = 3

    def __init__(self, status_code: int, reason: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Failed to fetch: {status_code} {reason}".rstrip())


class NotFoundError(FirmwareBrowserError):
    """A firmware lookup confirmed the item is absent."""

    exit_code = 4


class ConfigurationError(FirmwareBrowserError):
    """Invalid or unreadable configuration."""

    exit_code = 5


class ChecksumMismatchError(FirmwareBrowserError):
    """A downloaded image does not match the catalog checksum."""

    exit_code = 6

    def __init__(self, algorithm: str, expected: str, actual: str) -> None:
        self.algorithm = algorithm
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{algorithm} mismatch: expected {expected}, got {actual}"
        )


class InvalidResponseError(FirmwareBrowserError):
    """The catalog answered, but the body is not a valid catalog payload."""

    exit_code = 7


def error_handler(func: F) -> F:
    """Decorator that catches FirmwareBrowserError and prints user-friendly messages."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except FirmwareBrowserError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(exc.exit_code)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
