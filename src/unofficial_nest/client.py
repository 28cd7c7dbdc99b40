"""High-level client that builds, sends and decodes API calls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

import httpx

from .builder import RequestBuilder
from .constants import DEFAULT_USER_AGENT
from .errors import (
    AuthenticationError,
    AuthorizationError,
    CommandError,
    ConnectionError,
    NotFoundError,
    ServerError,
)
from .logger import LogLevel, create_logger
from .params import FormParams, FormValue, PostParams
from .parser import extract_error_message, parse_json_response
from .session import Session
from .transport import HttpTransport, Transport, TransportResponse
from .types import ExecuteResult, JSONValue


@dataclass
class ClientOptions:
    timeout: float = 60.0
    user_agent: str = DEFAULT_USER_AGENT
    transport: Transport | None = None
    logger: object | None = None
    log_level: LogLevel = "info"


class NestClient:
    """Primary entry point for talking to the API with an existing session."""

    def __init__(
        self,
        session: Session,
        *,
        timeout: float = 60.0,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: Transport | None = None,
        logger: object | None = None,
        log_level: LogLevel = "info",
    ) -> None:
        options = ClientOptions(
            timeout=timeout,
            user_agent=user_agent,
            transport=transport,
            logger=logger,
            log_level=log_level,
        )
        self._logger = create_logger(logger=options.logger, level=options.log_level)
        self._transport = options.transport or HttpTransport(timeout=options.timeout, logger=self._logger)
        self._builder = RequestBuilder(session, user_agent=options.user_agent, logger=self._logger)

    @property
    def builder(self) -> RequestBuilder:
        return self._builder

    def get(
        self,
        path: str,
        params: FormParams | Mapping[str, FormValue] | None = None,
        *,
        host: str = "",
        authenticated: bool = True,
    ) -> JSONValue:
        request = self._builder.build_get(host, path, params, authenticated)
        return self.execute(request)

    def post(
        self,
        path: str,
        params: PostParams = None,
        *,
        host: str = "",
        authenticated: bool = True,
    ) -> JSONValue:
        request = self._builder.build_post(host, path, params, authenticated)
        return self.execute(request)

    def execute(self, request: httpx.Request) -> JSONValue:
        response = self._transport.send(request)
        return self._handle_response(response)

    def execute_safe(self, request: httpx.Request) -> ExecuteResult[JSONValue]:
        try:
            data = self.execute(request)
            return ExecuteResult(ok=True, data=data)
        except Exception as exc:
            return ExecuteResult(ok=False, error=exc)

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> "NestClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _handle_response(self, response: TransportResponse) -> JSONValue:
        status = response.status
        if 200 <= status < 300:
            return parse_json_response(response)
        body_text = response.body.decode("utf-8", errors="replace")
        message = extract_error_message(body_text)
        self._logger.warn("Request failed status=%s message=%s", status, message)
        if status == 400:
            raise CommandError(message, context=status)
        if status == 401:
            raise AuthenticationError(message, context=status)
        if status == 403:
            raise AuthorizationError(message, context=status)
        if status == 404:
            raise NotFoundError(message, context=status)
        if status >= 500:
            raise ServerError(message, context=status)
        raise ConnectionError(f"Unexpected response {status}: {body_text}", context=status)


__all__ = ["ClientOptions", "NestClient"]
