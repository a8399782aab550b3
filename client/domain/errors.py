"""Failure taxonomy for remote calls made by the client.

Every adapter talking to a remote collaborator translates transport and
protocol problems into one of these classes, so screens and state machines
only ever handle three outcomes:

- ``NetworkFailure``: the call could not complete (connectivity, timeout).
- ``RemoteRejection``: the call completed with a non-success status.
- ``MalformedResponse``: success status, but the payload has the wrong shape.
"""

from __future__ import annotations

from typing import Optional


class WatchlistClientError(Exception):
    """Base class for client-side remote call failures."""

    def __init__(self, message: str, *, operation: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.operation = operation

    def __str__(self) -> str:
        if self.operation:
            return f"{self.operation}: {self.message}"
        return self.message


class NetworkFailure(WatchlistClientError):
    """The remote call could not complete (connection refused, DNS, timeout)."""


class RemoteRejection(WatchlistClientError):
    """The remote call completed with a non-2xx status.

    ``message`` is the human-readable server message when the body carried one,
    otherwise the raw body text. ``body`` always holds the raw text.
    """

    def __init__(
        self,
        message: str,
        *,
        status: int,
        body: str = "",
        operation: str = "",
    ) -> None:
        super().__init__(message, operation=operation)
        self.status = status
        self.body = body

    def __str__(self) -> str:
        base = f"{self.message} (status={self.status})"
        if self.operation:
            return f"{self.operation}: {base}"
        return base


class MalformedResponse(WatchlistClientError):
    """The remote call succeeded but its payload could not be interpreted."""

    def __init__(self, message: str, *, operation: str = "", payload: Optional[str] = None) -> None:
        super().__init__(message, operation=operation)
        self.payload = payload


class IncompleteCredentials(ValueError):
    """Login was attempted with a blank username or password."""
