import json
from urllib.parse import parse_qs

import httpx
import pytest

from unofficial_nest import (
    DEFAULT_USER_AGENT,
    EncodingError,
    FormParams,
    JSONParams,
    NestSession,
    RequestBuilder,
    RequestError,
    SessionError,
)
from unofficial_nest.params import encode_form

AUTH_HEADERS = ("X-nl-user-id", "X-nl-protocol-version", "Authorization", "Accept-Language")


class FailingSession:
    transport_url = "https://prod.example"
    user_id = "u1"
    access_token = "tok"

    def __init__(self) -> None:
        self.error = SessionError("login required")
        self.calls = 0

    def require_login(self) -> None:
        self.calls += 1
        raise self.error


@pytest.fixture
def session() -> NestSession:
    return NestSession(transport_url="https://prod.example", user_id="u1", access_token="tok")


@pytest.fixture
def builder(session: NestSession) -> RequestBuilder:
    return RequestBuilder(session)


def test_authenticated_get_uses_transport_url_and_headers(builder: RequestBuilder) -> None:
    request = builder.build_get("", "/v2/user", {}, authenticated=True)
    assert request.method == "GET"
    assert str(request.url) == "https://prod.example/v2/user"
    assert request.headers["X-nl-user-id"] == "u1"
    assert request.headers["Authorization"] == "Basic tok"
    assert request.headers["Accept-Language"] == "en"
    assert request.headers["X-nl-protocol-version"] == "1"
    assert request.headers["User-Agent"] == "Nest/3.0.15 (iOS) os=6.0 platform=iPad3,1"


def test_unauthenticated_form_post_has_sorted_body_and_no_auth_headers(builder: RequestBuilder) -> None:
    params = FormParams({"username": "a", "password": "b"})
    request = builder.build_post("https://home.example", "/user/login", params, authenticated=False)
    assert request.method == "POST"
    assert str(request.url) == "https://home.example/user/login"
    assert request.content == b"password=b&username=a"
    assert request.headers["Content-Type"] == "application/x-www-form-urlencoded; charset=utf-8"
    assert request.headers["User-Agent"] == DEFAULT_USER_AGENT
    for name in AUTH_HEADERS:
        assert name not in request.headers


def test_form_body_decodes_back_to_params(builder: RequestBuilder) -> None:
    values = {"email": "me+nest@example.com", "note": "living room & hall", "tags": ["a", "b"]}
    request = builder.build_post("https://home.example", "/form", FormParams(values))
    decoded = parse_qs(request.content.decode("utf-8"))
    assert decoded == {"email": ["me+nest@example.com"], "note": ["living room & hall"], "tags": ["a", "b"]}


def test_json_post_serializes_structured_value(builder: RequestBuilder) -> None:
    payload = {"target_temperature": 21.5, "objects": [{"object_key": "shared.1", "op": "MERGE"}]}
    request = builder.build_post("", "/v5/put", JSONParams(payload), authenticated=True)
    assert json.loads(request.content) == payload
    assert request.headers["Content-Type"] == "application/json"
    assert str(request.url) == "https://prod.example/v5/put"
    for name in AUTH_HEADERS:
        assert name in request.headers


def test_json_post_accepts_non_mapping_values(builder: RequestBuilder) -> None:
    request = builder.build_post("https://home.example", "/list", JSONParams(["a", 1, None]))
    assert request.content == b'["a",1,null]'


@pytest.mark.parametrize("value", [{"bad": {1, 2}}, float("nan"), object()])
def test_json_post_raises_encoding_error(builder: RequestBuilder, value: object) -> None:
    with pytest.raises(EncodingError):
        builder.build_post("https://home.example", "/v5/put", JSONParams(value))


def test_post_without_params_sends_empty_body_and_no_content_type(builder: RequestBuilder) -> None:
    request = builder.build_post("https://home.example", "/ping")
    assert request.content == b""
    assert "Content-Type" not in request.headers


def test_post_rejects_plain_mapping(builder: RequestBuilder) -> None:
    with pytest.raises(TypeError):
        builder.build_post("https://home.example", "/ping", {"a": "b"})  # type: ignore[arg-type]


def test_get_appends_encoded_query(builder: RequestBuilder) -> None:
    params = {"serial": "01AB", "limit": "5"}
    request = builder.build_get("https://home.example", "/v3/mobile", params)
    assert str(request.url).endswith("/v3/mobile?" + encode_form(params))
    assert dict(request.url.params) == params


def test_get_accepts_form_params(builder: RequestBuilder) -> None:
    request = builder.build_get("https://home.example", "/v3/mobile", FormParams({"b": "2", "a": "1"}))
    assert str(request.url) == "https://home.example/v3/mobile?a=1&b=2"


def test_get_with_empty_params_leaves_path_unchanged(builder: RequestBuilder) -> None:
    request = builder.build_get("https://home.example", "/v3/mobile", {})
    assert str(request.url) == "https://home.example/v3/mobile"
    assert request.content == b""


def test_explicit_host_wins_over_transport_url(builder: RequestBuilder) -> None:
    request = builder.build_get("https://other.example", "/v2/user", authenticated=True)
    assert request.url.host == "other.example"


def test_unauthenticated_request_keeps_empty_host(builder: RequestBuilder) -> None:
    request = builder.build_request("GET", "", "/v2/user")
    assert request.url.host == ""
    assert request.url.path == "/v2/user"


@pytest.mark.parametrize(
    "build",
    [
        lambda b: b.build_get("", "/v2/user", authenticated=True),
        lambda b: b.build_post("", "/v5/put", JSONParams({"a": 1}), authenticated=True),
        lambda b: b.build_request("DELETE", "", "/v5/put", authenticated=True),
    ],
)
def test_authenticated_build_propagates_session_error(build) -> None:
    session = FailingSession()
    builder = RequestBuilder(session)
    with pytest.raises(SessionError) as info:
        build(builder)
    assert info.value is session.error
    assert session.calls == 1


def test_session_without_token_cannot_authenticate() -> None:
    builder = RequestBuilder(NestSession(transport_url="https://prod.example"))
    with pytest.raises(SessionError):
        builder.build_get("", "/v2/user", authenticated=True)


def test_authenticated_build_requires_transport_url_when_host_is_empty() -> None:
    builder = RequestBuilder(NestSession(user_id="u1", access_token="tok"))
    with pytest.raises(SessionError):
        builder.build_get("", "/v2/user", authenticated=True)


def test_unauthenticated_build_never_consults_session() -> None:
    session = FailingSession()
    request = RequestBuilder(session).build_get("https://home.example", "/status")
    assert session.calls == 0
    assert "Authorization" not in request.headers


def test_authenticate_adds_headers_to_existing_request(builder: RequestBuilder) -> None:
    request = httpx.Request("GET", "https://prod.example/v2/user")
    builder.authenticate(request)
    assert request.headers["X-nl-user-id"] == "u1"
    assert request.headers["Authorization"] == "Basic tok"


def test_authenticate_failure_leaves_request_untouched() -> None:
    request = httpx.Request("GET", "https://prod.example/v2/user")
    with pytest.raises(SessionError):
        RequestBuilder(FailingSession()).authenticate(request)
    assert "Authorization" not in request.headers


def test_invalid_url_raises_request_error(builder: RequestBuilder) -> None:
    with pytest.raises(RequestError) as info:
        builder.build_request("GET", "https://home.example", "/bad\npath")
    assert isinstance(info.value.__cause__, httpx.InvalidURL)


def test_custom_user_agent(session: NestSession) -> None:
    request = RequestBuilder(session, user_agent="Nest/5.0").build_get("https://home.example", "/")
    assert request.headers["User-Agent"] == "Nest/5.0"


def test_builder_reads_session_at_build_time() -> None:
    class MutableSession:
        transport_url = "https://a.example"
        user_id = "u1"
        access_token = "first"

        def require_login(self) -> None:
            return None

    session = MutableSession()
    builder = RequestBuilder(session)
    first = builder.build_get("", "/v2/user", authenticated=True)
    session.access_token = "second"
    second = builder.build_get("", "/v2/user", authenticated=True)
    assert first.headers["Authorization"] == "Basic first"
    assert second.headers["Authorization"] == "Basic second"
