"""Construction of outgoing API requests."""

from __future__ import annotations

from typing import Mapping

import httpx

from .constants import (
    ACCEPT_LANGUAGE,
    AUTHORIZATION_PREFIX,
    DEFAULT_USER_AGENT,
    HEADER_ACCEPT_LANGUAGE,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_PROTOCOL_VERSION,
    HEADER_USER_AGENT,
    HEADER_USER_ID,
    PROTOCOL_VERSION,
)
from .errors import RequestError
from .logger import BoundLogger, create_logger
from .params import FormParams, FormValue, PostParams, encode_body, encode_form
from .session import Session


class RequestBuilder:
    """Builds ``httpx.Request`` objects carrying the headers the API expects.

    Authenticated builds call ``session.require_login()`` first and let its
    ``SessionError`` propagate, so a request is either returned complete with
    every credential header or not returned at all. The builder keeps no state
    besides its configuration and reads the session afresh on every call.
    """

    def __init__(
        self,
        session: Session,
        *,
        user_agent: str = DEFAULT_USER_AGENT,
        logger: BoundLogger | None = None,
    ) -> None:
        self._session = session
        self._user_agent = user_agent
        self._logger = (logger or create_logger()).child("builder")

    @property
    def session(self) -> Session:
        return self._session

    def build_request(
        self,
        method: str,
        host: str,
        path: str,
        body: bytes | None = None,
        authenticated: bool = False,
    ) -> httpx.Request:
        """Create a request for ``host + path``.

        An empty ``host`` is replaced by the session's transport URL when
        ``authenticated`` is set. ``path`` is appended verbatim.
        """
        if authenticated:
            self._session.require_login()
            if not host:
                host = self._session.transport_url

        url = host + path
        try:
            request = httpx.Request(
                method,
                url,
                content=body,
                headers={HEADER_USER_AGENT: self._user_agent},
            )
        except httpx.InvalidURL as exc:
            raise RequestError(f"Invalid request URL {url!r}: {exc}", context=url) from exc

        if authenticated:
            self.authenticate(request)

        self._logger.debug("Built %s %s authenticated=%s", request.method, url, authenticated)
        return request

    def build_post(
        self,
        host: str,
        path: str,
        params: PostParams = None,
        authenticated: bool = False,
    ) -> httpx.Request:
        """Create a POST whose body encoding follows the params variant.

        ``FormParams`` are form-encoded, ``JSONParams`` are serialized as JSON
        and ``None`` sends an empty body without a ``Content-Type``.
        """
        body, content_type = encode_body(params)
        request = self.build_request("POST", host, path, body, authenticated)
        if content_type is not None:
            request.headers[HEADER_CONTENT_TYPE] = content_type
        return request

    def build_get(
        self,
        host: str,
        path: str,
        params: FormParams | Mapping[str, FormValue] | None = None,
        authenticated: bool = False,
    ) -> httpx.Request:
        values = params.values if isinstance(params, FormParams) else params
        query = encode_form(values)
        if query:
            path = f"{path}?{query}"
        return self.build_request("GET", host, path, None, authenticated)

    def authenticate(self, request: httpx.Request) -> None:
        """Add the session credential headers to ``request``."""
        self._session.require_login()
        request.headers[HEADER_USER_ID] = self._session.user_id
        request.headers[HEADER_PROTOCOL_VERSION] = PROTOCOL_VERSION
        request.headers[HEADER_AUTHORIZATION] = AUTHORIZATION_PREFIX + self._session.access_token
        request.headers[HEADER_ACCEPT_LANGUAGE] = ACCEPT_LANGUAGE
        self._logger.trace("Attached credentials for user %s", self._session.user_id)


__all__ = ["RequestBuilder"]
