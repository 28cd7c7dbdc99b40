"""Transport implementations exposed to users."""

from .base import Transport, TransportResponse
from .http import HttpTransport, make_client

__all__ = [
    "HttpTransport",
    "Transport",
    "TransportResponse",
    "make_client",
]
