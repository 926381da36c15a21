"""Response metadata returned alongside every GIPHY payload."""

from __future__ import annotations

from gifscroll.models.base import GiphyModel


class Meta(GiphyModel):
    status: int
    msg: str = ""
    response_id: str | None = None
