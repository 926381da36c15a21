"""Base model shared by all GIPHY response models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class GiphyModel(BaseModel):
    # GIPHY adds fields freely; only what we read is declared.
    model_config = ConfigDict(extra="ignore", frozen=True)
