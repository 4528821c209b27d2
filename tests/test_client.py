import asyncio

import httpx

from app.ccb import placeholder_body
from app.client import CCBClient
from app.config import Settings
from app.errors import RemoteTransportFailure

SETTINGS = Settings(
    username="user",
    password="secret",
    search_url="https://ccb.example.invalid/api.php",
    request_timeout=5.0,
)


def search(handler, params):
    client = CCBClient(SETTINGS, transport=httpx.MockTransport(handler))
    return asyncio.run(client.search_individuals(params, placeholder_body()))


def test_search_posts_authenticated_query():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, content=b"<ccb_api />")

    result = search(handler, {"first_name": "Jane", "last_name": "Doe"})
    assert result.success
    assert result.unwrap() == b"<ccb_api />"

    assert len(seen) == 1
    request = seen[0]
    assert request.method == "POST"
    assert request.url.host == "ccb.example.invalid"
    assert request.url.path == "/api.php"
    assert request.url.query == b"srv=individual_search&first_name=Jane&last_name=Doe"
    assert request.headers["Authorization"] == "Basic dXNlcjpzZWNyZXQ="
    assert request.content == b"<ccb_api />"


def test_single_token_query_has_no_last_name():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, content=b"<ccb_api />")

    search(handler, {"first_name": "Jane"})
    assert seen[0].url.params.get("first_name") == "Jane"
    assert "last_name" not in seen[0].url.params


def test_non_success_status_is_a_transport_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, content=b"Unauthorized")

    result = search(handler, {"first_name": "Jane"})
    assert not result.success
    assert isinstance(result.error, RemoteTransportFailure)
    assert str(result.error) == "remote transport failure: HTTP 401"


def test_network_error_is_a_transport_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    result = search(handler, {"first_name": "Jane"})
    assert not result.success
    assert isinstance(result.error, RemoteTransportFailure)
    assert "connection refused" in str(result.error)


def test_timeout_is_a_transport_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.extensions["timeout"]["read"] == 5.0
        raise httpx.ReadTimeout("timed out", request=request)

    result = search(handler, {"first_name": "Jane"})
    assert not result.success
    assert isinstance(result.error, RemoteTransportFailure)
