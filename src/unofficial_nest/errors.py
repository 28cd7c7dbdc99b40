"""Custom exceptions raised by the unofficial Nest client."""

from __future__ import annotations

from typing import Any


class NestError(Exception):
    """Base error for all client failures."""

    def __init__(self, message: str, *, context: Any | None = None) -> None:
        super().__init__(message)
        self.context = context


class SessionError(NestError):
    """Raised when an authenticated call is made without a valid session."""


class EncodingError(NestError):
    """Raised when request parameters cannot be serialized."""


class RequestError(NestError):
    """Raised when a request cannot be constructed from its method and URL."""


class ConnectionError(NestError):
    """Raised when the client cannot reach the server."""


class AuthenticationError(NestError):
    """Raised when the server rejects the session credentials."""


class AuthorizationError(NestError):
    """Raised when the server denies access to a resource."""


class CommandError(NestError):
    """Raised when the server rejects the request as invalid."""


class NotFoundError(NestError):
    """Raised when the target resource does not exist."""


class ServerError(NestError):
    """Raised for 5xx style failures."""


class ParseError(NestError):
    """Raised when a response cannot be parsed."""


__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "CommandError",
    "ConnectionError",
    "EncodingError",
    "NestError",
    "NotFoundError",
    "ParseError",
    "RequestError",
    "ServerError",
    "SessionError",
]
