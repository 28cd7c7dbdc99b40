"""Response decoding helpers."""

from __future__ import annotations

import json
from typing import Any

from .errors import ParseError
from .transport.base import TransportResponse

_ERROR_KEYS = ("error_description", "message", "error")


def parse_json_response(response: TransportResponse) -> Any:
    """Decode a JSON body; an empty body decodes to ``None``."""
    text = _decode_body(response.body or b"").strip()
    if not text:
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Invalid JSON response: {exc}", context=text) from exc


def extract_error_message(body: str | None) -> str:
    if not body:
        return "Error occurred"
    try:
        parsed = json.loads(body)
    except json.JSONDecodeError:
        return body.strip() or "Error occurred"

    if isinstance(parsed, dict):
        for key in _ERROR_KEYS:
            message = parsed.get(key)
            if message:
                return message if isinstance(message, str) else str(message)
    return body.strip() or "Error occurred"


def _decode_body(body: bytes) -> str:
    return body.decode("utf-8", errors="replace")


__all__ = ["extract_error_message", "parse_json_response"]
