"""SDK response models."""

from gifscroll.models.base import GiphyModel
from gifscroll.models.errors import Meta
from gifscroll.models.gifs import DEFAULT_VARIANT, Gif, GifImage, GifPage, Pagination

__all__ = [
    "DEFAULT_VARIANT",
    "Gif",
    "GifImage",
    "GifPage",
    "GiphyModel",
    "Meta",
    "Pagination",
]
