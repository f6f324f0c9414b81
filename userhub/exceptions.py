"""
UserHub client errors.

Every failure of a remote call is classified into one of these types before it
reaches the caller. Nothing here is retried or recovered locally.
"""

import asyncio
from typing import Any, Optional


class UserHubError(Exception):
    """
    Base error for all classified UserHub failures.

    Attributes:
        message: Human-readable error message (server-provided when available)
        status_code: HTTP status of the response, None if no response arrived
        response_body: Parsed JSON body or raw text of the response, if any
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_body = response_body

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.message} (HTTP {self.status_code})"
        return self.message


class NetworkError(UserHubError):
    """Transport-level failure: no response was received."""


class AuthError(UserHubError):
    """Authentication or token exchange was rejected or returned a malformed body."""


class InvitationError(UserHubError):
    """Invitation request was rejected by the server or was locally invalid."""


class CancelledError(asyncio.CancelledError):
    """
    An in-flight request was cancelled by the caller.

    Subclasses asyncio.CancelledError, not UserHubError, so an ``except
    UserHubError`` block never swallows a task cancellation. On Python 3.11 the
    plain asyncio.CancelledError is re-raised instead, since asyncio.timeout()
    there only turns that exact class into TimeoutError.
    """

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} was cancelled")
        self.operation = operation
