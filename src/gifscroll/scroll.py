"""Infinite-scroll trigger driven by sentinel visibility."""

from __future__ import annotations

import logging
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from typing import Any

log = logging.getLogger(__name__)

FULL_VISIBILITY = 1.0

FetchPage = Callable[..., Coroutine[Any, Any, bool]]
Spawn = Callable[[Coroutine[Any, Any, Any]], Any]


@dataclass(frozen=True)
class LoadMore:
    """Permission to request the next page, frozen at the state it was built from.

    A new one is built whenever the query, ``has_more`` or the loading flag
    changes, so the trigger never acts on stale values. The feed generation
    it was built under travels with the request, so a call that only runs
    after the query moved on is refused.
    """

    query: str
    has_more: bool
    loading: bool
    fetch: FetchPage
    generation: int | None = None

    @property
    def allowed(self) -> bool:
        return self.has_more and not self.loading

    def __call__(self) -> Coroutine[Any, Any, bool]:
        return self.fetch(self.query, False, generation=self.generation)


class ScrollTrigger:
    """Watches the sentinel placed after the grid.

    The host reports the sentinel's intersection ratio through
    :meth:`observe`. Crossing into full visibility runs the bound
    :class:`LoadMore`, as does binding a new one while the sentinel is
    already visible (a freshly attached observer reports its initial state).
    """

    def __init__(self, spawn: Spawn, *, threshold: float = FULL_VISIBILITY) -> None:
        self._spawn = spawn
        self.threshold = threshold
        self._load_more: LoadMore | None = None
        self._visible = False

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def load_more(self) -> LoadMore | None:
        return self._load_more

    def bind(self, load_more: LoadMore, *, recheck: bool = True) -> None:
        """Swap in a new capability.

        With ``recheck`` off, an already-visible sentinel waits for its next
        transition instead of firing right away.
        """
        self._load_more = load_more
        if recheck and self._visible:
            self._fire()

    def unbind(self) -> None:
        self._load_more = None

    def observe(self, ratio: float) -> bool:
        """Record a visibility change; returns True if a page load was started."""
        was_visible = self._visible
        self._visible = ratio >= self.threshold
        if self._visible and not was_visible:
            return self._fire()
        return False

    def _fire(self) -> bool:
        load_more = self._load_more
        if load_more is None or not load_more.allowed:
            return False
        log.debug("Sentinel visible, loading more for %r", load_more.query)
        self._spawn(load_more())
        return True
