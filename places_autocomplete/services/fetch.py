"""Debounced, cache-first prediction fetching."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Mapping

from places_autocomplete.domain.models import PlacesStatus, SuggestionState
from places_autocomplete.logging import logger
from places_autocomplete.services.cache import SuggestionCache
from places_autocomplete.services.provider import PredictionClient
from places_autocomplete.utils.debounce import Debouncer

class FetchOrchestrator:
    """Turn a stream of queries into coalesced provider requests.

    Every fetch, clear and close bumps a generation counter; a provider
    response is applied only if its generation is still current, so late or
    superseded responses never overwrite newer state.
    """

    def __init__(
        self,
        *,
        client_getter: Callable[[], PredictionClient | None],
        cache: SuggestionCache,
        request_options: Mapping[str, Any] | None = None,
        debounce_ms: int = 200,
    ) -> None:
        self._client_getter = client_getter
        self.cache = cache
        self.request_options = dict(request_options or {})
        self.state = SuggestionState()
        self._debouncer = Debouncer(debounce_ms / 1000)
        self._generation = 0
        self._closed = False

    def fetch_predictions(self, query: str) -> None:
        """Schedule a fetch for ``query`` behind the debounce window."""

        if self._closed:
            return
        self._debouncer.submit(lambda: self._fetch(query))

    def clear_suggestions(self) -> None:
        self._generation += 1
        self.state = SuggestionState()

    async def wait_idle(self) -> None:
        await self._debouncer.join()

    def open(self) -> None:
        """Accept fetches again after ``close``; the generation keeps counting."""

        self._closed = False

    def close(self) -> None:
        self._closed = True
        self._generation += 1
        self._debouncer.cancel()

    async def _fetch(self, query: str) -> None:
        if not query:
            self.clear_suggestions()
            return

        self._generation += 1
        generation = self._generation
        self.state = self.state.model_copy(update={"loading": True})

        if self.cache.enabled:
            cached = self.cache.get(query)
            if cached is not None:
                logger.debug("suggestions_cache_hit", query=query)
                self.state = SuggestionState(loading=False, status=PlacesStatus.OK.value, data=cached)
                return

        client = self._client_getter()
        if client is None:
            # Not ready; leave the previous results in place.
            self.state = self.state.model_copy(update={"loading": False})
            return

        data, status = await self._request(client, {**self.request_options, "input": query})

        # An OK reply without predictions is not worth a cache hit.
        if status == PlacesStatus.OK.value and data and self.cache.enabled:
            self.cache.put(query, data)

        if self._closed or generation != self._generation:
            logger.debug(
                "stale_predictions_discarded",
                query=query,
                generation=generation,
                current_generation=self._generation,
            )
            return

        self.state = SuggestionState(loading=False, status=status, data=list(data or []))

    @staticmethod
    async def _request(client: PredictionClient, request: dict[str, Any]) -> tuple[list[Any] | None, str]:
        loop = asyncio.get_running_loop()
        future: asyncio.Future[tuple[list[Any] | None, str]] = loop.create_future()

        def _callback(data: list[Any] | None, status: str) -> None:
            if not future.done():
                future.set_result((data, str(getattr(status, "value", status))))

        try:
            client.get_place_predictions(request, _callback)
        except Exception:
            logger.exception("place_predictions_request_failed", input=request.get("input"))
            return None, PlacesStatus.UNKNOWN_ERROR.value
        return await future


__all__ = ["FetchOrchestrator"]
