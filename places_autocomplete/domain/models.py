"""Pydantic models shared across the engine and its services."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class PlacesStatus(str, Enum):
    """Outcome codes reported by the Places autocomplete provider."""

    OK = "OK"
    ZERO_RESULTS = "ZERO_RESULTS"
    INVALID_REQUEST = "INVALID_REQUEST"
    OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"
    REQUEST_DENIED = "REQUEST_DENIED"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    NOT_FOUND = "NOT_FOUND"


class SuggestionState(BaseModel):
    model_config = ConfigDict(frozen=True)

    loading: bool = False
    # Empty until the first fetch completes, then a provider status code.
    status: str = ""
    data: list[Any] = Field(default_factory=list)


class CacheEntry(BaseModel):
    data: list[Any]
    expiry: int  # epoch milliseconds


CacheStore = dict[str, CacheEntry]

cache_store_adapter: TypeAdapter[CacheStore] = TypeAdapter(CacheStore)


__all__ = [
    "CacheEntry",
    "CacheStore",
    "PlacesStatus",
    "SuggestionState",
    "cache_store_adapter",
]
