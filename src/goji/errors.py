"""
Exception hierarchy for the Jira client.

Every failure a caller can observe is a subclass of JiraError:

- UnauthorizedError, MethodNotAllowedError, NotFoundError: special HTTP statuses
- FaultError: any other 4xx, carrying the remote error list
- TransportError: the HTTP client could not complete the round trip
- SerializationError / DeserializationError: JSON encoding and decoding failures
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional


if TYPE_CHECKING:
    from .rep import Errors


__all__ = [
    "JiraError",
    "HttpError",
    "UnauthorizedError",
    "MethodNotAllowedError",
    "NotFoundError",
    "FaultError",
    "TransportError",
    "SerializationError",
    "DeserializationError",
]


class JiraError(Exception):
    """Base exception for all Jira client errors."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class HttpError(JiraError):
    """A response was received but its status signals failure."""

    def __init__(self, message: str, status: int):
        super().__init__(message)
        self.status = status


class UnauthorizedError(HttpError):
    """Credentials were rejected (HTTP 401)."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, 401)


class MethodNotAllowedError(HttpError):
    """The endpoint does not support the HTTP method (HTTP 405)."""

    def __init__(self, message: str = "Method not allowed"):
        super().__init__(message, 405)


class NotFoundError(HttpError):
    """The resource does not exist or is not visible (HTTP 404)."""

    def __init__(self, message: str = "Not found"):
        super().__init__(message, 404)


class FaultError(HttpError):
    """Any other client error, with the errors reported by Jira."""

    def __init__(self, status: int, errors: "Errors"):
        details = "; ".join(errors.messages()) or "no details"
        super().__init__(f"Jira returned {status}: {details}", status)
        self.errors = errors


class TransportError(JiraError):
    """Network-level failure reported by the HTTP client."""
    pass


class SerializationError(JiraError):
    """A request payload could not be encoded as JSON."""
    pass


class DeserializationError(JiraError):
    """A response body did not match the expected schema."""

    def __init__(
        self,
        message: str,
        body: bytes = b"",
        cause: Optional[BaseException] = None,
        status: Optional[int] = None,
    ):
        super().__init__(message, cause)
        self.body = body
        self.status = status

    @property
    def is_empty_body(self) -> bool:
        """True when the server sent no content at all."""
        return not self.body.strip()

    @property
    def is_empty_success(self) -> bool:
        """True for a 2xx response that carried no content."""
        return self.status is not None and 200 <= self.status < 300 and self.is_empty_body
