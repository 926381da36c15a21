"""Runtime configuration loaded from the environment."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from gifscroll.api.gifs import PAGE_SIZE
from gifscroll.http import DEFAULT_BASE_URL
from gifscroll.models.gifs import DEFAULT_VARIANT


class Settings(BaseSettings):
    """GIPHY client settings, read from ``GIPHY_*`` variables or a ``.env`` file."""

    model_config = SettingsConfigDict(
        env_prefix="GIPHY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str = Field(default="", description="GIPHY API key")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="Base URL of the GIF endpoints")
    timeout: float = Field(default=10.0, description="HTTP request timeout in seconds")
    page_size: int = Field(default=PAGE_SIZE, ge=1, description="GIFs requested per page")
    debounce_delay: float = Field(default=0.3, ge=0, description="Search input debounce in seconds")
    image_variant: str = Field(default=DEFAULT_VARIANT, description="Rendition shown in the grid")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
