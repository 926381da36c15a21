"""API method groups."""

from gifscroll.api.gifs import PAGE_SIZE, GifsAPI

__all__ = ["GifsAPI", "PAGE_SIZE"]
