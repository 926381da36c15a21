"""gifscroll: debounced GIPHY search with an infinite-scrolling feed."""

from gifscroll.browser import GifBrowser
from gifscroll.client import Client
from gifscroll.errors import GiphyDecodeError, GiphyError, GiphyHTTPError, GiphyNetworkError
from gifscroll.feed import FeedController, FeedState, FetchStatus

__all__ = [
    "Client",
    "FeedController",
    "FeedState",
    "FetchStatus",
    "GifBrowser",
    "GiphyDecodeError",
    "GiphyError",
    "GiphyHTTPError",
    "GiphyNetworkError",
]
