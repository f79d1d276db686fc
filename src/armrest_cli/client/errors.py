"""Typed exceptions and error handling decorator."""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from rich.console import Console

if TYPE_CHECKING:
    import httpx

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class ArmrestError(Exception):
    """Base exception for armrest-cli."""

    exit_code: int = 1


class ConnectionFailedError(ArmrestError):
    """Cannot reach the management endpoint."""

    exit_code = 2


class AuthenticationError(ArmrestError):
    """Authentication failed (401/403) or no token could be acquired."""

    exit_code = 3

    def __init__(
        self, message: str, *, response: httpx.Response | None = None,
    ) -> None:
        self.response = response
        super().__init__(message)


class ConfigurationError(ArmrestError, ValueError):
    """Missing or invalid configuration, or a missing required argument."""

    exit_code = 6


class ApiError(ArmrestError):
    """Non-success response from the management API.

    ``code`` and ``detail`` come from the ARM error envelope
    (``{"error": {"code": ..., "message": ...}}``) when the body has one.
    """

    def __init__(
        self,
        status_code: int,
        detail: str = "",
        *,
        code: str | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        self.status_code = status_code
        self.code = code
        self.detail = detail
        self.response = response
        super().__init__(self._format())

    def _format(self) -> str:
        prefix = f"{self.code}: " if self.code else ""
        return f"API returned {self.status_code}: {prefix}{self.detail}"


class NotFoundError(ApiError):
    """Resource not found (404)."""

    exit_code = 4

    def _format(self) -> str:
        return f"Not found: {self.detail}"


class ResourceNotFoundError(NotFoundError):
    """Delete answered 204: the backend reports the resource as absent."""

    def __init__(
        self,
        status_code: int,
        message: str,
        response: httpx.Response | None = None,
    ) -> None:
        super().__init__(status_code, message, response=response)

    def _format(self) -> str:
        return self.detail


class ConflictError(ApiError):
    """Resource conflict (409)."""

    exit_code = 5

    def _format(self) -> str:
        return f"Conflict: {self.detail}"


class BadRequestError(ApiError):
    """Request rejected by the API (400/422)."""

    exit_code = 7

    def _format(self) -> str:
        return self.detail or "Bad request"


def error_handler(func: F) -> F:
    """Decorator that catches ArmrestError and prints user-friendly messages."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ArmrestError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(exc.exit_code)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
