"""The GIF browser component: debounced search over an infinite-scrolling feed."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from gifscroll.client import Client
from gifscroll.debounce import DEFAULT_DELAY, Debouncer
from gifscroll.feed import GENERIC_ERROR, FeedController, FeedState
from gifscroll.models.gifs import DEFAULT_VARIANT
from gifscroll.render import GridView, build_view, render_html
from gifscroll.scroll import LoadMore, ScrollTrigger

if TYPE_CHECKING:
    from gifscroll.config import Settings

log = logging.getLogger(__name__)

EventHandler = Callable[[Any], Coroutine[Any, Any, None]]


@dataclass
class QueryState:
    raw: str = ""
    confirmed: str = ""


class GifBrowser:
    """Wires input, feed, scroll trigger and rendering together.

    Usage::

        async with GifBrowser.from_settings() as browser:

            @browser.on("update")
            async def redraw(view):
                page.replace(render_html(view))

            await browser.mount()          # trending GIFs
            browser.set_input("cats")      # searched 300ms later
            browser.observe_sentinel(1.0)  # next page

    Events: ``"query"`` receives the confirmed query string, ``"update"``
    receives a fresh :class:`GridView` after every state change.
    """

    def __init__(
        self,
        client: Client,
        *,
        debounce_delay: float = DEFAULT_DELAY,
        variant: str = DEFAULT_VARIANT,
        owns_client: bool = False,
    ) -> None:
        self.client = client
        self.variant = variant
        self.query = QueryState()
        self.feed = FeedController(client.gifs, page_size=client.gifs.page_size)
        self._owns_client = owns_client
        self._debouncer: Debouncer[str] = Debouncer(self._confirm, debounce_delay)
        self._trigger = ScrollTrigger(self._spawn)
        self._handlers: dict[str, list[EventHandler]] = {}
        self._tasks: set[asyncio.Task[Any]] = set()
        self._pending_reset: str | None = None
        self._bound: tuple[str, bool, bool, int] | None = None
        self._mounted = False
        self._closed = False
        self.feed.add_listener(self._on_feed_change)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> GifBrowser:
        if settings is None:
            from gifscroll.config import get_settings
            settings = get_settings()
        return cls(
            Client.from_settings(settings),
            debounce_delay=settings.debounce_delay,
            variant=settings.image_variant,
            owns_client=True,
        )

    # --- Events ---

    def on(self, event_type: str) -> Callable[[EventHandler], EventHandler]:
        """Decorator to register an event handler."""
        def decorator(func: EventHandler) -> EventHandler:
            self._handlers.setdefault(event_type, []).append(func)
            return func
        return decorator

    def add_handler(self, event_type: str, handler: EventHandler) -> None:
        """Register an event handler programmatically."""
        self._handlers.setdefault(event_type, []).append(handler)

    # --- Rendering ---

    @property
    def state(self) -> FeedState:
        return self.feed.state

    @property
    def view(self) -> GridView:
        return build_view(self.query.raw, self.query.confirmed, self.feed.state, variant=self.variant)

    def render(self) -> str:
        return render_html(self.view)

    # --- Lifecycle ---

    async def mount(self) -> None:
        """Load the first page for the current query (trending when empty)."""
        if self._closed:
            raise RuntimeError("GifBrowser is closed")
        self._mounted = True
        self._pending_reset = self.query.confirmed
        self._rebind()
        await self._run_pending_reset()

    async def settle(self) -> None:
        """Wait for every background task, including ones spawned while waiting."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._debouncer.close()
        self._trigger.unbind()
        self.feed.remove_listener(self._on_feed_change)
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        if self._owns_client:
            await self.client.close()

    async def __aenter__(self) -> GifBrowser:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    # --- Input ---

    def set_input(self, text: str) -> None:
        """Update the search box; the query is confirmed once typing pauses."""
        if self._closed:
            return
        self.query.raw = text
        self._debouncer.push(text)
        self._spawn(self._dispatch("update", self.view))

    def observe_sentinel(self, ratio: float) -> bool:
        """Report the sentinel's intersection ratio; True if a page load started."""
        return self._trigger.observe(ratio)

    # --- Internals ---

    def _confirm(self, query: str) -> None:
        if self._closed or query == self.query.confirmed:
            return
        self.query.confirmed = query
        if not self._mounted:
            # mount() loads the first page for whatever is confirmed by then.
            self._spawn(self._dispatch("query", query))
            return
        self.feed.supersede()
        self._pending_reset = query
        self._rebind()
        self._spawn(self._dispatch("query", query))
        self._spawn(self._run_pending_reset())

    async def _run_pending_reset(self) -> None:
        query = self._pending_reset
        if query is None:
            return
        if self.feed.loading:
            # Picked up again by _on_feed_change once the request settles.
            log.debug("Fetch in flight, deferring reset for %r", query)
            return
        self._pending_reset = None
        await self.feed.fetch_page(query, reset=True)

    def _on_feed_change(self, state: FeedState) -> None:
        if not state.loading and self._pending_reset is not None:
            self._spawn(self._run_pending_reset())
        self._rebind()
        self._spawn(self._dispatch("update", self.view))

    def _rebind(self) -> None:
        if not self._mounted or self._closed:
            return
        state = self.feed.state
        busy = state.loading or self._pending_reset is not None
        key = (self.query.confirmed, state.has_more, busy, state.generation)
        if key == self._bound:
            return
        self._bound = key
        # After a failed fetch only a fresh scroll retries, never a rebind.
        self._trigger.bind(
            LoadMore(
                self.query.confirmed,
                state.has_more,
                busy,
                self.feed.fetch_page,
                generation=state.generation,
            ),
            recheck=state.error != GENERIC_ERROR,
        )

    def _spawn(self, coro: Coroutine[Any, Any, Any]) -> asyncio.Task[Any] | None:
        if self._closed:
            coro.close()
            return None
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._task_done)
        return task

    def _task_done(self, task: asyncio.Task[Any]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            log.error("Background task failed", exc_info=exc)

    async def _dispatch(self, event_type: str, payload: Any) -> None:
        for handler in list(self._handlers.get(event_type, [])):
            try:
                await handler(payload)
            except Exception:
                log.exception("Error in event handler for %s", event_type)
