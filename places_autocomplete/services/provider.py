"""Lazy, idempotent construction of the Places prediction client."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Protocol

from places_autocomplete.logging import logger
from places_autocomplete.services.script import ScriptScope, default_scope

PredictionsCallback = Callable[[list[Any] | None, str], None]

LOAD_API_ERR = (
    "use-places-autocomplete: the Places library must be loaded before init(); "
    "pass `places=` or configure `callback_name` for asynchronous script loading."
)


class PredictionClient(Protocol):
    def get_place_predictions(self, request: dict[str, Any], callback: PredictionsCallback) -> None:
        """Request predictions; ``callback`` fires exactly once, asynchronously."""


class PlacesNamespace(Protocol):
    def autocomplete_service(self) -> PredictionClient: ...


class ProviderInitializer:
    """Own the single prediction client of one engine instance."""

    def __init__(
        self,
        *,
        places: PlacesNamespace | None = None,
        scope: ScriptScope | None = None,
        callback_name: str | None = None,
    ) -> None:
        self.places = places
        self.scope = scope if scope is not None else default_scope
        self.callback_name = callback_name
        self.client: PredictionClient | None = None
        self._ready_event = asyncio.Event()

    @property
    def ready(self) -> bool:
        return self.client is not None

    def resolve_namespace(self) -> PlacesNamespace | None:
        return self.places if self.places is not None else self.scope.places

    def init(self) -> None:
        if self.client is not None:
            return

        places = self.resolve_namespace()
        if places is None:
            if self.callback_name:
                self.scope.register_callback(self.callback_name, self.init)
                logger.debug("places_init_deferred", callback=self.callback_name)
            else:
                logger.error("places_library_not_loaded", detail=LOAD_API_ERR)
            return

        try:
            client = places.autocomplete_service()
        except Exception:
            logger.exception("places_client_construction_failed")
            return

        self.client = client
        self._ready_event.set()
        logger.info("places_client_ready")

    async def wait_ready(self, timeout: float | None = None) -> bool:
        """Wait for ``init`` to succeed; return ``False`` on timeout."""

        if self.ready:
            return True
        try:
            await asyncio.wait_for(self._ready_event.wait(), timeout)
        except asyncio.TimeoutError:
            return False
        return True

    def teardown(self) -> None:
        if not self.callback_name:
            return
        if self.scope.remove_callback(self.callback_name, self.init):
            logger.debug("places_callback_removed", callback=self.callback_name)


__all__ = [
    "LOAD_API_ERR",
    "PlacesNamespace",
    "PredictionClient",
    "PredictionsCallback",
    "ProviderInitializer",
]
