"""HTTP client wrapping httpx with the GIPHY api_key and error mapping."""

from __future__ import annotations

from typing import Any

import httpx

from gifscroll.errors import GiphyHTTPError, GiphyNetworkError

DEFAULT_BASE_URL = "https://api.giphy.com/v1/gifs"


class HTTPClient:
    """Async HTTP client for the GIPHY REST API.

    Every request carries the ``api_key`` query parameter. There is no retry
    policy: each call is exactly one round trip.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        api_key: str | None = None,
        *,
        timeout: float = 10.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
        )

    @property
    def api_key(self) -> str | None:
        return self._api_key

    @api_key.setter
    def api_key(self, value: str | None) -> None:
        self._api_key = value

    def _params(self, params: dict[str, Any] | None) -> dict[str, Any]:
        merged: dict[str, Any] = {"api_key": self._api_key or ""}
        if params:
            merged.update(params)
        return merged

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Make an API request, mapping transport and status failures to SDK errors."""
        try:
            response = await self._client.request(
                method,
                path,
                params=self._params(params),
                headers=headers,
            )
        except httpx.TransportError as exc:
            raise GiphyNetworkError(str(exc) or type(exc).__name__) from exc

        if response.status_code >= 400:
            raise GiphyHTTPError.from_response(response)

        return response

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", path, **kwargs)

    async def close(self) -> None:
        await self._client.aclose()
