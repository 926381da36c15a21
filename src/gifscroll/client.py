"""High-level GIPHY client composing HTTP and API groups."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from gifscroll.api.gifs import PAGE_SIZE, GifsAPI
from gifscroll.http import DEFAULT_BASE_URL, HTTPClient

if TYPE_CHECKING:
    from gifscroll.config import Settings


class Client:
    """Top-level SDK client.

    Usage::

        async with Client(api_key) as client:
            page = await client.gifs.search("cats", offset=20)
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = 10.0,
        page_size: int = PAGE_SIZE,
    ) -> None:
        self.http = HTTPClient(base_url, api_key, timeout=timeout)
        self.gifs = GifsAPI(self.http, page_size=page_size)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> Client:
        if settings is None:
            from gifscroll.config import get_settings
            settings = get_settings()
        return cls(
            settings.api_key,
            settings.base_url,
            timeout=settings.timeout,
            page_size=settings.page_size,
        )

    # --- Context manager ---

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()
