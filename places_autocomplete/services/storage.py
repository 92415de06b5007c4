"""Session-scoped key/value stores backing the suggestion cache."""

from __future__ import annotations

from typing import Protocol

from places_autocomplete.services.exceptions import StorageError, StorageQuotaExceeded

# Browsers commonly cap sessionStorage at about five megabytes per origin.
DEFAULT_QUOTA_BYTES = 5 * 1024 * 1024


class SessionStore(Protocol):
    """String key/value store; every call may raise ``StorageError``."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemorySessionStore:
    """Process-lifetime store with a byte quota."""

    def __init__(self, *, quota_bytes: int | None = DEFAULT_QUOTA_BYTES) -> None:
        self.quota_bytes = quota_bytes
        self._items: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise StorageError(f"Session store only accepts strings, got {type(value).__name__}.")
        if self.quota_bytes is not None:
            projected = self.size_bytes() - self._entry_size(key, self._items.get(key)) + self._entry_size(key, value)
            if projected > self.quota_bytes:
                raise StorageQuotaExceeded(
                    f"Writing {key!r} would use {projected} of {self.quota_bytes} bytes."
                )
        self._items[key] = value

    def remove(self, key: str) -> None:
        self._items.pop(key, None)

    def size_bytes(self) -> int:
        return sum(self._entry_size(key, value) for key, value in self._items.items())

    @staticmethod
    def _entry_size(key: str, value: str | None) -> int:
        if value is None:
            return 0
        return len(key.encode("utf-8")) + len(value.encode("utf-8"))


default_session_store = MemorySessionStore()


__all__ = [
    "DEFAULT_QUOTA_BYTES",
    "MemorySessionStore",
    "SessionStore",
    "default_session_store",
]
