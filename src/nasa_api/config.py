"""Client configuration utilities."""
from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, field_validator

BASE_URL = "https://api.nasa.gov"
IMAGE_LIBRARY_URL = "https://images-api.nasa.gov"
DEMO_KEY = "DEMO_KEY"


class ClientSettings(BaseModel):
    """Transport options shared by every request a client makes."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(default=BASE_URL, description="Host for key-authenticated endpoints")
    image_library_url: str = Field(default=IMAGE_LIBRARY_URL, description="Host for the Image and Video Library")
    timeout: float = Field(default=30, gt=0, description="Per-request transport timeout in seconds")
    raise_for_status: bool = Field(
        default=True,
        description="Raise RemoteError on non-2xx responses instead of returning the error payload",
    )

    @field_validator("base_url", "image_library_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("URL must not be empty")
        return value


@lru_cache(maxsize=1)
def get_settings() -> ClientSettings:
    """Return cached default settings instance."""
    return ClientSettings()
