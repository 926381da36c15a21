"""GIF search API methods."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from gifscroll.errors import GiphyDecodeError
from gifscroll.models.gifs import GifPage

if TYPE_CHECKING:
    import httpx

    from gifscroll.http import HTTPClient

PAGE_SIZE = 20


def _parse_page(r: httpx.Response) -> GifPage:
    try:
        return GifPage.model_validate(r.json())
    except ValueError as exc:
        raise GiphyDecodeError(f"Malformed GIF page from {r.request.url.path}: {exc}", r) from exc


class GifsAPI:
    def __init__(self, http: HTTPClient, *, page_size: int = PAGE_SIZE) -> None:
        self._http = http
        self.page_size = page_size

    async def trending(self, offset: int = 0, limit: int | None = None) -> GifPage:
        params: dict[str, Any] = {"limit": limit or self.page_size, "offset": offset}
        r = await self._http.get("/trending", params=params)
        return _parse_page(r)

    async def search(self, query: str, offset: int = 0, limit: int | None = None) -> GifPage:
        params: dict[str, Any] = {"limit": limit or self.page_size, "offset": offset, "q": query}
        r = await self._http.get("/search", params=params)
        return _parse_page(r)

    async def page(self, query: str, offset: int = 0, limit: int | None = None) -> GifPage:
        """Search when ``query`` is non-empty, otherwise list trending GIFs."""
        if query:
            return await self.search(query, offset=offset, limit=limit)
        return await self.trending(offset=offset, limit=limit)
