"""Paginated GIF feed: fetch state and the controller that mutates it."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Any

from gifscroll.api.gifs import PAGE_SIZE
from gifscroll.errors import GiphyError
from gifscroll.models.gifs import Gif

if TYPE_CHECKING:
    from gifscroll.api.gifs import GifsAPI

log = logging.getLogger(__name__)

GENERIC_ERROR = "Failed to fetch GIFs. Please try again later."


def no_results_message(query: str) -> str:
    return f'No results found for "{query}".'


class FetchStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"


@dataclass(frozen=True)
class FeedState:
    """Snapshot of the feed. Replaced wholesale on every change."""

    items: tuple[Gif, ...] = ()
    offset: int = 0
    has_more: bool = True
    loading: bool = False
    error: str | None = None
    generation: int = 0

    @property
    def status(self) -> FetchStatus:
        if self.loading:
            return FetchStatus.LOADING
        if self.error is not None:
            return FetchStatus.ERROR
        return FetchStatus.IDLE


Listener = Callable[[FeedState], None]


class FeedController:
    """Owns the :class:`FeedState` and is the only thing that changes it.

    At most one request is in flight. Each request is tagged with the
    generation it was issued under; :meth:`supersede` bumps the generation so
    a response that arrives afterwards is dropped instead of merged.
    """

    def __init__(self, gifs: GifsAPI, *, page_size: int = PAGE_SIZE) -> None:
        self._gifs = gifs
        self.page_size = page_size
        self._state = FeedState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> FeedState:
        return self._state

    @property
    def loading(self) -> bool:
        return self._state.loading

    @property
    def has_more(self) -> bool:
        return self._state.has_more

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def supersede(self) -> None:
        """Invalidate whatever request is in flight."""
        self._state = replace(self._state, generation=self._state.generation + 1)
        if self._state.loading:
            log.debug("Superseded in-flight request (generation %d)", self._state.generation)

    async def fetch_page(
        self, query: str, reset: bool = False, *, generation: int | None = None
    ) -> bool:
        """Fetch one page for ``query``; returns False when the call was a no-op.

        ``reset`` starts over at offset 0 and replaces the current items;
        otherwise the next page is appended. Refused while another fetch is
        in flight, and for non-reset calls once the feed is exhausted.
        A ``generation`` other than the current one (the caller was built
        before a :meth:`supersede`) is refused too.
        """
        state = self._state
        if state.loading:
            return False
        if not reset and not state.has_more:
            return False
        if generation is not None and generation != state.generation:
            log.debug("Refusing fetch from superseded generation %d", generation)
            return False

        generation = state.generation
        offset = 0 if reset else state.offset
        self._update(loading=True, error=None)

        changes: dict[str, Any] = {}
        try:
            page = await self._gifs.page(query, offset=offset, limit=self.page_size)
        except GiphyError as exc:
            log.warning("Error fetching GIFs (query=%r, offset=%d): %s", query, offset, exc)
            changes = {"error": GENERIC_ERROR}
        else:
            changes = self._merge(page.data, query, reset)
        finally:
            if self._state.generation != generation:
                log.debug("Discarding stale response (query=%r, offset=%d)", query, offset)
                changes = {}
            self._update(loading=False, **changes)
        return True

    def _merge(self, gifs: list[Gif], query: str, reset: bool) -> dict[str, Any]:
        received = tuple(gifs)
        if reset:
            items = received
            offset = self.page_size
        else:
            items = self._state.items + received
            offset = self._state.offset + self.page_size
        error = no_results_message(query) if not received and query else None
        return {"items": items, "offset": offset, "has_more": bool(received), "error": error}

    def _update(self, **changes: Any) -> None:
        self._state = replace(self._state, **changes)
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                log.exception("Error in feed listener")
