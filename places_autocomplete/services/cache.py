"""TTL-scoped suggestion cache stored as one JSON blob in a session store."""

from __future__ import annotations

from typing import Any, Callable, Sequence

from pydantic import ValidationError

from places_autocomplete.domain.models import CacheEntry, CacheStore, cache_store_adapter
from places_autocomplete.logging import logger
from places_autocomplete.services.storage import SessionStore
from places_autocomplete.utils.datetime import epoch_millis


class SuggestionCache:
    """Lookup, write and clear cached predictions keyed by query string.

    Expired entries are pruned on every read. All storage and serialization
    failures are swallowed so the cache degrades to a no-op.
    """

    def __init__(
        self,
        store: SessionStore,
        *,
        storage_key: str = "upa",
        ttl_seconds: int | None = None,
        clock: Callable[[], int] = epoch_millis,
    ) -> None:
        self.store = store
        self.storage_key = storage_key
        self.ttl_seconds = ttl_seconds or None
        self._clock = clock

    @property
    def enabled(self) -> bool:
        return self.ttl_seconds is not None

    def get(self, key: str) -> list[Any] | None:
        """Return cached data for ``key`` or ``None`` on a miss."""

        if not self.enabled:
            return None
        entries = self._read()
        live = self._prune(entries)
        if len(live) != len(entries):
            self._write(live)
        entry = live.get(key)
        return list(entry.data) if entry is not None else None

    def put(self, key: str, data: Sequence[Any], ttl_seconds: int | None = None) -> None:
        ttl = ttl_seconds if ttl_seconds is not None else self.ttl_seconds
        if not ttl:
            return
        entries = self._prune(self._read())
        entries[key] = CacheEntry(data=list(data), expiry=self._clock() + ttl * 1000)
        self._write(entries)

    def clear(self, key: str | None = None) -> None:
        """Drop one entry, or the whole blob when ``key`` is omitted."""

        if key is None:
            try:
                self.store.remove(self.storage_key)
            except Exception as exc:
                logger.debug("suggestion_cache_clear_failed", storage_key=self.storage_key, error=str(exc))
            return

        entries = self._read()
        if entries.pop(key, None) is not None:
            self._write(entries)

    def _prune(self, entries: CacheStore) -> CacheStore:
        now = self._clock()
        return {key: entry for key, entry in entries.items() if entry.expiry > now}

    def _read(self) -> CacheStore:
        try:
            raw = self.store.get(self.storage_key)
        except Exception as exc:
            logger.debug("suggestion_cache_read_failed", storage_key=self.storage_key, error=str(exc))
            return {}
        if not raw:
            return {}
        try:
            return cache_store_adapter.validate_json(raw)
        except ValidationError as exc:
            logger.debug("suggestion_cache_blob_invalid", storage_key=self.storage_key, error=str(exc))
            return {}

    def _write(self, entries: CacheStore) -> None:
        try:
            payload = cache_store_adapter.dump_json(entries).decode("utf-8")
            self.store.set(self.storage_key, payload)
        except Exception as exc:
            logger.debug("suggestion_cache_write_failed", storage_key=self.storage_key, error=str(exc))


__all__ = ["SuggestionCache"]
