"""Tests for the HTTP client."""

import httpx
import pytest

from gifscroll.errors import GiphyHTTPError, GiphyNetworkError
from gifscroll.http import HTTPClient


@pytest.mark.asyncio
async def test_api_key_sent_as_query_param(http_client):
    client, transport, calls = http_client
    await client.get("/trending", params={"limit": 20, "offset": 0})

    assert calls[0]["method"] == "GET"
    assert calls[0]["path"] == "/v1/gifs/trending"
    assert calls[0]["params"] == {"api_key": "test-key", "limit": "20", "offset": "0"}
    await client.close()


@pytest.mark.asyncio
async def test_missing_api_key_sends_empty_value(mock_transport):
    transport, calls = mock_transport
    client = HTTPClient("https://giphy.test/v1/gifs")
    client._client = httpx.AsyncClient(base_url="https://giphy.test/v1/gifs", transport=transport)

    await client.get("/trending")
    assert calls[0]["params"]["api_key"] == ""
    await client.close()


@pytest.mark.asyncio
async def test_api_key_setter():
    client = HTTPClient(api_key=None)
    assert client.api_key is None
    client.api_key = "new-key"
    assert client._params(None) == {"api_key": "new-key"}
    await client.close()


def test_base_url_trailing_slash_stripped():
    client = HTTPClient("https://giphy.test/v1/gifs/")
    assert client.base_url == "https://giphy.test/v1/gifs"


@pytest.mark.asyncio
async def test_raises_on_4xx_with_meta(http_client):
    client, transport, calls = http_client
    transport.response = httpx.Response(
        403,
        json={"meta": {"status": 403, "msg": "Forbidden", "response_id": "r1"}},
    )

    with pytest.raises(GiphyHTTPError) as exc_info:
        await client.get("/search", params={"q": "cats"})

    assert exc_info.value.status == 403
    assert exc_info.value.message == "Forbidden"
    assert exc_info.value.meta.response_id == "r1"


@pytest.mark.asyncio
async def test_raises_on_401_bare_message(http_client):
    client, transport, calls = http_client
    transport.response = httpx.Response(401, json={"message": "Unauthorized"})

    with pytest.raises(GiphyHTTPError) as exc_info:
        await client.get("/trending")

    assert exc_info.value.status == 401
    assert exc_info.value.meta is None
    assert str(exc_info.value) == "[401] Unauthorized"


@pytest.mark.asyncio
async def test_5xx_is_not_retried(http_client):
    client, transport, calls = http_client
    transport.response = httpx.Response(503, text="Service Unavailable")

    with pytest.raises(GiphyHTTPError) as exc_info:
        await client.get("/trending")

    assert exc_info.value.status == 503
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_transport_error_wrapped():
    class FailingTransport(httpx.AsyncBaseTransport):
        async def handle_async_request(self, request):
            raise httpx.ConnectError("connection refused", request=request)

    client = HTTPClient("https://giphy.test/v1/gifs", api_key="k")
    client._client = httpx.AsyncClient(base_url="https://giphy.test/v1/gifs", transport=FailingTransport())

    with pytest.raises(GiphyNetworkError, match="connection refused"):
        await client.get("/trending")
    await client.close()
