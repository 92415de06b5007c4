"""Public surface composing value ownership, fetching, caching and init."""

from __future__ import annotations

from typing import Any, Callable

from places_autocomplete.config import AutocompleteSettings, get_settings
from places_autocomplete.domain.models import SuggestionState
from places_autocomplete.logging import logger
from places_autocomplete.services.cache import SuggestionCache
from places_autocomplete.services.fetch import FetchOrchestrator
from places_autocomplete.services.provider import PlacesNamespace, ProviderInitializer
from places_autocomplete.services.script import ScriptScope
from places_autocomplete.services.storage import SessionStore, default_session_store
from places_autocomplete.services.value import UNSET, ValueController
from places_autocomplete.utils.datetime import epoch_millis


class PlacesAutocomplete:
    """Type-ahead state engine backed by an asynchronous Places provider.

    Use it as a context manager (or call ``mount``/``close``) so the provider is
    initialized on entry and pending work is cancelled on exit. ``set_value``
    must run inside the event loop that will drive the debounced fetches.
    """

    def __init__(
        self,
        settings: AutocompleteSettings | None = None,
        *,
        value: str | None = None,
        on_change: Callable[..., None] | None = None,
        places: PlacesNamespace | None = None,
        store: SessionStore | None = None,
        scope: ScriptScope | None = None,
        clock: Callable[[], int] = epoch_millis,
    ) -> None:
        self.settings = settings or get_settings()
        self._value = ValueController(
            value=value,
            default_value=self.settings.default_value,
            final_value="",
            on_change=on_change,
        )
        self._provider = ProviderInitializer(
            places=places,
            scope=scope,
            callback_name=self.settings.callback_name,
        )
        self._cache = SuggestionCache(
            store if store is not None else default_session_store,
            storage_key=self.settings.cache_key,
            ttl_seconds=self.settings.cache_ttl,
            clock=clock,
        )
        self._fetcher = FetchOrchestrator(
            client_getter=lambda: self._provider.client,
            cache=self._cache,
            request_options=self.settings.request_options,
            debounce_ms=self.settings.debounce_ms,
        )
        self._mounted = False

    def __enter__(self) -> "PlacesAutocomplete":
        self.mount()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    @property
    def ready(self) -> bool:
        return self._provider.ready

    @property
    def value(self) -> str:
        return self._value.current

    @property
    def suggestions(self) -> SuggestionState:
        return self._fetcher.state

    @property
    def is_controlled(self) -> bool:
        return self._value.is_controlled

    def bind_value(self, value: str | None, *, on_change: Callable[..., None] | None = UNSET) -> None:
        """Feed the caller-owned value back in; ``None`` hands ownership to the engine."""

        self._value.bind(value=value, on_change=on_change)

    def set_value(self, val: str, should_fetch: bool = True) -> None:
        self._value.change(val)
        if not (should_fetch and self.ready):
            return
        try:
            self._fetcher.fetch_predictions(val)
        except RuntimeError as exc:
            logger.warning("fetch_skipped_no_event_loop", query=val, error=str(exc))

    def clear_suggestions(self) -> None:
        self._fetcher.clear_suggestions()

    def clear_cache(self, key: str | None = None) -> None:
        self._cache.clear(key)

    def init(self) -> None:
        self._provider.init()

    def mount(self) -> None:
        if self._mounted:
            return
        self._mounted = True
        self._fetcher.open()
        if self.settings.init_on_mount:
            self.init()

    def close(self) -> None:
        self._fetcher.close()
        self._provider.teardown()
        self._mounted = False

    async def wait_ready(self, timeout: float | None = None) -> bool:
        return await self._provider.wait_ready(timeout)

    async def wait_idle(self) -> None:
        """Wait for scheduled and in-flight fetches to settle."""

        await self._fetcher.wait_idle()


__all__ = ["PlacesAutocomplete"]
