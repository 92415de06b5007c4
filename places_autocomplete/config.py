"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal

from pydantic import AnyHttpUrl, BaseModel, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CACHE_TTL_SECONDS = 24 * 60 * 60


class PlacesApiSettings(BaseModel):
    """Settings for the HTTP-backed Places provider adapter."""

    api_key: SecretStr | None = None
    base_url: AnyHttpUrl = Field(
        default="https://maps.googleapis.com/maps/api/place/autocomplete/json",
        description="Places Autocomplete web service endpoint.",
    )
    request_timeout_seconds: int = Field(default=10, ge=1, le=60)


class AutocompleteSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="UPA_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    request_options: dict[str, Any] = Field(default_factory=dict)
    debounce_ms: int = Field(default=200, ge=0)
    cache: Literal[False] | int = Field(default=DEFAULT_CACHE_TTL_SECONDS)
    cache_key: str = Field(default="upa", min_length=1)
    callback_name: str | None = None
    init_on_mount: bool = True
    default_value: str = ""

    places_api: PlacesApiSettings = Field(default_factory=PlacesApiSettings)

    @field_validator("cache", mode="before")
    @classmethod
    def _disable_cache_aliases(cls, value):
        if value is None:
            return False
        if isinstance(value, str) and value.strip().lower() in {"", "false", "off", "no"}:
            return False
        return value

    @field_validator("cache")
    @classmethod
    def _non_negative_ttl(cls, value):
        if value is not False and value < 0:
            raise ValueError("cache TTL must be a non-negative number of seconds")
        return value

    @field_validator("request_options")
    @classmethod
    def _strip_input(cls, value: dict[str, Any]) -> dict[str, Any]:
        # The query is always supplied per request.
        return {key: val for key, val in value.items() if key != "input"}

    @field_validator("callback_name", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def cache_ttl(self) -> int | None:
        """TTL in seconds, or ``None`` when caching is disabled."""

        if self.cache is False or self.cache == 0:
            return None
        return self.cache


@lru_cache
def get_settings() -> AutocompleteSettings:
    """Return cached settings instance."""

    return AutocompleteSettings()


__all__ = [
    "AutocompleteSettings",
    "DEFAULT_CACHE_TTL_SECONDS",
    "PlacesApiSettings",
    "get_settings",
]
