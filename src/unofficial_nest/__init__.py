"""Public surface for the unofficial Nest API client."""

from .builder import RequestBuilder
from .client import ClientOptions, NestClient
from .constants import DEFAULT_USER_AGENT, EXPIRES_FORMAT
from .errors import (
    AuthenticationError,
    AuthorizationError,
    CommandError,
    ConnectionError,
    EncodingError,
    NestError,
    NotFoundError,
    ParseError,
    RequestError,
    ServerError,
    SessionError,
)
from .params import FormParams, JSONParams, PostParams, encode_form
from .session import NestSession, Session, parse_expires
from .transport import HttpTransport, Transport, TransportResponse
from .types import ExecuteResult
from .version import __version__

__all__ = [
    "__version__",
    "AuthenticationError",
    "AuthorizationError",
    "ClientOptions",
    "CommandError",
    "ConnectionError",
    "DEFAULT_USER_AGENT",
    "EXPIRES_FORMAT",
    "EncodingError",
    "ExecuteResult",
    "FormParams",
    "HttpTransport",
    "JSONParams",
    "NestClient",
    "NestError",
    "NestSession",
    "NotFoundError",
    "ParseError",
    "PostParams",
    "RequestBuilder",
    "RequestError",
    "ServerError",
    "Session",
    "SessionError",
    "Transport",
    "TransportResponse",
    "encode_form",
    "parse_expires",
]
