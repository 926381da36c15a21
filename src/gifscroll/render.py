"""View model and HTML rendering for the GIF grid."""

from __future__ import annotations

from dataclasses import dataclass

from jinja2 import Environment, PackageLoader

from gifscroll.feed import FeedState
from gifscroll.models.gifs import DEFAULT_VARIANT

PLACEHOLDER = "Search GIFs..."
TRENDING_HEADING = "Trending GIFs"
END_OF_RESULTS = "No more GIFs to load."

_env = Environment(
    loader=PackageLoader("gifscroll", "templates"),
    autoescape=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


@dataclass(frozen=True)
class Tile:
    key: str
    src: str
    alt: str


@dataclass(frozen=True)
class GridView:
    """Everything the page shows, derived from query and feed state."""

    query: str
    heading: str
    error: str | None
    tiles: tuple[Tile, ...]
    loading: bool
    exhausted: bool
    placeholder: str = PLACEHOLDER
    end_message: str = END_OF_RESULTS


def heading_for(query: str) -> str:
    return f'Results for "{query}"' if query else TRENDING_HEADING


def build_view(
    raw_query: str,
    confirmed_query: str,
    state: FeedState,
    *,
    variant: str = DEFAULT_VARIANT,
) -> GridView:
    # Ids can repeat across pages, so keys include the position.
    tiles = tuple(
        Tile(key=f"{gif.id}-{index}", src=gif.image_url(variant) or "", alt=gif.title)
        for index, gif in enumerate(state.items)
    )
    return GridView(
        query=raw_query,
        heading=heading_for(confirmed_query),
        error=state.error,
        tiles=tiles,
        loading=state.loading,
        exhausted=not state.has_more and state.error is None,
    )


def render_html(view: GridView) -> str:
    return _env.get_template("grid.html").render(view=view)
