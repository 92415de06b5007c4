"""Registry standing in for the page-global scope of a script-loaded library.

An asynchronously loaded Places library announces itself by publishing its
namespace and invoking a named, zero-argument callback exactly once. Engines
that start before the library arrives register their ``init`` under that name.
"""

from __future__ import annotations

from typing import Any, Callable

from places_autocomplete.logging import logger

ReadyCallback = Callable[[], None]


class ScriptScope:
    def __init__(self, places: Any | None = None) -> None:
        self.places = places
        self._callbacks: dict[str, ReadyCallback] = {}

    def register_callback(self, name: str, callback: ReadyCallback) -> None:
        self._callbacks[name] = callback

    def get_callback(self, name: str) -> ReadyCallback | None:
        return self._callbacks.get(name)

    def remove_callback(self, name: str, callback: ReadyCallback | None = None) -> bool:
        """Delete the slot, optionally only when it still holds ``callback``."""

        current = self._callbacks.get(name)
        if current is None:
            return False
        if callback is not None and current != callback:
            return False
        del self._callbacks[name]
        return True

    def script_loaded(self, places: Any, *, callback: str | None = None) -> None:
        """Publish the loaded namespace and fire the one-shot ready callback."""

        self.places = places
        if callback is None:
            return
        handler = self._callbacks.pop(callback, None)
        if handler is None:
            logger.warning("script_callback_missing", callback=callback)
            return
        handler()


default_scope = ScriptScope()


__all__ = ["ReadyCallback", "ScriptScope", "default_scope"]
