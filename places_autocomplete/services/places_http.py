"""HTTP-backed Places namespace built on the autocomplete web service."""

from __future__ import annotations

import asyncio
from typing import Any, Mapping

import httpx

from places_autocomplete.config import PlacesApiSettings
from places_autocomplete.domain.models import PlacesStatus
from places_autocomplete.logging import logger
from places_autocomplete.services.exceptions import ProviderError
from places_autocomplete.services.provider import PredictionsCallback


def _encode_param(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return "|".join(_encode_param(item) for item in value)
    return str(value)


class HttpAutocompleteService:
    """Callback-style prediction client issuing one GET per request."""

    def __init__(self, http_client: httpx.AsyncClient, settings: PlacesApiSettings) -> None:
        self._client = http_client
        self._settings = settings
        self._tasks: set[asyncio.Task[None]] = set()

    def get_place_predictions(self, request: Mapping[str, Any], callback: PredictionsCallback) -> None:
        task = asyncio.get_running_loop().create_task(self._deliver(dict(request), callback))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def fetch(self, request: Mapping[str, Any]) -> tuple[list[Any] | None, str]:
        """Return ``(predictions, status)`` for one request."""

        try:
            payload = await self._get(request)
        except ProviderError as exc:
            logger.warning("places_request_failed", input=request.get("input"), error=str(exc))
            return None, PlacesStatus.UNKNOWN_ERROR.value

        status = str(payload.get("status") or PlacesStatus.UNKNOWN_ERROR.value)
        if status != PlacesStatus.OK.value:
            logger.info(
                "places_request_not_ok",
                status=status,
                error_message=payload.get("error_message"),
            )
            return None, status
        return list(payload.get("predictions") or []), status

    async def _deliver(self, request: dict[str, Any], callback: PredictionsCallback) -> None:
        try:
            data, status = await self.fetch(request)
        except Exception:
            logger.exception("places_request_crashed", input=request.get("input"))
            data, status = None, PlacesStatus.UNKNOWN_ERROR.value
        callback(data, status)

    async def _get(self, request: Mapping[str, Any]) -> dict[str, Any]:
        params = {key: _encode_param(value) for key, value in request.items() if value is not None}
        if self._settings.api_key:
            params["key"] = self._settings.api_key.get_secret_value()

        try:
            response = await self._client.get(
                str(self._settings.base_url),
                params=params,
                timeout=self._settings.request_timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            detail = exc.response.text[:500] if exc.response is not None else str(exc)
            status_code = exc.response.status_code if exc.response is not None else "unknown"
            raise ProviderError(f"Places request failed ({status_code}): {detail}") from exc
        except httpx.RequestError as exc:
            raise ProviderError(f"Places request failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise ProviderError("Places response is not valid JSON.") from exc
        if not isinstance(payload, dict):
            raise ProviderError("Places response has an unexpected shape.")
        return payload


class HttpPlacesLibrary:
    """Namespace object handed to the engine as ``places``."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: PlacesApiSettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or PlacesApiSettings()

    def autocomplete_service(self) -> HttpAutocompleteService:
        return HttpAutocompleteService(self._client, self._settings)


__all__ = ["HttpAutocompleteService", "HttpPlacesLibrary"]
