"""Shared test fixtures for gifscroll tests."""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from gifscroll.http import HTTPClient

from payloads import page


@pytest.fixture
def mock_transport():
    """Returns an httpx mock transport that records requests."""
    calls: list[dict[str, Any]] = []
    default_response = httpx.Response(200, json=page())

    class RecordingTransport(httpx.AsyncBaseTransport):
        def __init__(self):
            self.response = default_response

        async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
            calls.append({
                "method": request.method,
                "url": str(request.url),
                "path": request.url.path,
                "params": dict(request.url.params),
            })
            return self.response

    transport = RecordingTransport()
    return transport, calls


@pytest.fixture
def http_client(mock_transport):
    """HTTPClient with a mock transport."""
    transport, calls = mock_transport
    client = HTTPClient("https://giphy.test/v1/gifs", api_key="test-key")
    # Replace the inner httpx client with one using our mock transport
    client._client = httpx.AsyncClient(
        base_url="https://giphy.test/v1/gifs",
        transport=transport,
    )
    return client, transport, calls


class ScriptedTransport(httpx.AsyncBaseTransport):
    """Replays queued responses in order; an exception in the queue is raised.

    When ``gate`` is set, each request waits for it before answering, which
    keeps a fetch in flight for as long as a test needs.
    """

    def __init__(self, *responses: Any) -> None:
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []
        self.gate: Any = None

    def queue(self, *responses: Any) -> None:
        self.responses.extend(responses)

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.gate is not None:
            await self.gate.wait()
        item = self.responses.pop(0) if self.responses else httpx.Response(200, json=page())
        if isinstance(item, Exception):
            raise item
        if isinstance(item, dict):
            return httpx.Response(200, json=item)
        return item

    @property
    def params(self) -> list[dict[str, str]]:
        return [dict(r.url.params) for r in self.requests]


@pytest.fixture
def scripted():
    """A Client whose HTTP layer is served by a :class:`ScriptedTransport`."""
    from gifscroll.client import Client

    transport = ScriptedTransport()
    client = Client("test-key", "https://giphy.test/v1/gifs")
    client.http._client = httpx.AsyncClient(
        base_url="https://giphy.test/v1/gifs",
        transport=transport,
    )
    return client, transport
