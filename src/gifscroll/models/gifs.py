"""GIF search response models."""

from __future__ import annotations

from pydantic import Field

from gifscroll.models.base import GiphyModel
from gifscroll.models.errors import Meta

DEFAULT_VARIANT = "fixed_height"


class GifImage(GiphyModel):
    url: str | None = None
    width: str | None = None
    height: str | None = None


class Gif(GiphyModel):
    id: str
    title: str = ""
    images: dict[str, GifImage] = Field(default_factory=dict)

    def image_url(self, variant: str = DEFAULT_VARIANT) -> str | None:
        """URL of the named rendition, falling back to the first one with a URL."""
        image = self.images.get(variant)
        if image is not None and image.url:
            return image.url
        for image in self.images.values():
            if image.url:
                return image.url
        return None


class Pagination(GiphyModel):
    total_count: int | None = None
    count: int = 0
    offset: int = 0


class GifPage(GiphyModel):
    data: list[Gif]
    pagination: Pagination | None = None
    meta: Meta | None = None
