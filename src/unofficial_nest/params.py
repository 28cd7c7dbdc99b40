"""Request parameter variants and their body encodings."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence, Union
from urllib.parse import urlencode

from .constants import CONTENT_TYPE_FORM, CONTENT_TYPE_JSON
from .errors import EncodingError

FormValue = Union[str, Sequence[str]]


@dataclass(frozen=True)
class FormParams:
    """Key/value pairs sent as ``application/x-www-form-urlencoded``."""

    values: Mapping[str, FormValue] = field(default_factory=dict)

    def encode(self) -> str:
        return encode_form(self.values)


@dataclass(frozen=True)
class JSONParams:
    """Any JSON-serializable value sent as ``application/json``."""

    value: Any

    def encode(self) -> bytes:
        return encode_json(self.value)


PostParams = Union[FormParams, JSONParams, None]


def encode_form(values: Mapping[str, FormValue] | None) -> str:
    """Form-encode ``values`` with keys in sorted order.

    A string value yields one pair; a sequence yields one pair per item, in
    order. Escaping follows ``quote_plus`` so spaces become ``+``.
    """
    if not values:
        return ""
    pairs: list[tuple[str, str]] = []
    for key in sorted(values):
        value = values[key]
        if isinstance(value, str):
            pairs.append((key, value))
        elif isinstance(value, Sequence) and all(isinstance(item, str) for item in value):
            pairs.extend((key, item) for item in value)
        else:
            raise EncodingError(
                f"Form value for {key!r} must be a string or a sequence of strings, "
                f"got {type(value).__name__}",
                context=values,
            )
    return urlencode(pairs)


def encode_json(value: Any) -> bytes:
    try:
        return json.dumps(value, separators=(",", ":"), allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise EncodingError(f"Cannot encode parameters as JSON: {exc}", context=value) from exc


def encode_body(params: PostParams) -> tuple[bytes | None, str | None]:
    """Return ``(body, content_type)`` for a POST parameter variant."""
    if params is None:
        return None, None
    if isinstance(params, FormParams):
        return params.encode().encode("utf-8"), CONTENT_TYPE_FORM
    if isinstance(params, JSONParams):
        return params.encode(), CONTENT_TYPE_JSON
    raise TypeError(f"Expected FormParams, JSONParams or None, got {type(params).__name__}")


__all__ = [
    "FormParams",
    "FormValue",
    "JSONParams",
    "PostParams",
    "encode_body",
    "encode_form",
    "encode_json",
]
