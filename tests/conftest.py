"""Shared pytest fixtures: fake Places provider, clock, store and scope."""

from __future__ import annotations

import asyncio
from typing import Any, Callable

import pytest

from places_autocomplete.config import AutocompleteSettings
from places_autocomplete.services.script import ScriptScope
from places_autocomplete.services.storage import MemorySessionStore


class FakeClock:
    def __init__(self, start_ms: int = 1_700_000_000_000) -> None:
        self.now = start_ms

    def __call__(self) -> int:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += int(seconds * 1000)


class FakePredictionClient:
    """Records requests and answers on the next loop iteration.

    With ``hold=True`` answers are parked until ``release`` is called, which
    lets tests control the order responses arrive in.
    """

    def __init__(self, responses: dict[str, tuple[list[Any] | None, str]] | None = None) -> None:
        self.responses = responses or {}
        self.requests: list[dict[str, Any]] = []
        self.hold = False
        self.pending: list[tuple[Callable[..., None], list[Any] | None, str]] = []

    def get_place_predictions(self, request: dict[str, Any], callback: Callable[..., None]) -> None:
        self.requests.append(dict(request))
        data, status = self.responses.get(request["input"], (None, "ZERO_RESULTS"))
        if self.hold:
            self.pending.append((callback, data, status))
            return
        asyncio.get_running_loop().call_soon(callback, data, status)

    def release(self, index: int = 0) -> None:
        callback, data, status = self.pending.pop(index)
        callback(data, status)


class FakePlaces:
    def __init__(self, client: FakePredictionClient | None = None) -> None:
        self.client = client or FakePredictionClient()
        self.constructed = 0

    def autocomplete_service(self) -> FakePredictionClient:
        self.constructed += 1
        return self.client


async def _wait_until(predicate: Callable[[], bool], *, attempts: int = 200) -> None:
    for _ in range(attempts):
        if predicate():
            return
        await asyncio.sleep(0)
    raise AssertionError("condition not reached")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> MemorySessionStore:
    return MemorySessionStore()


@pytest.fixture
def scope() -> ScriptScope:
    return ScriptScope()


@pytest.fixture
def places() -> FakePlaces:
    return FakePlaces()


@pytest.fixture
def make_client() -> type[FakePredictionClient]:
    return FakePredictionClient


@pytest.fixture
def make_places() -> type[FakePlaces]:
    return FakePlaces


@pytest.fixture
def wait_until() -> Callable[..., Any]:
    return _wait_until


@pytest.fixture
def make_settings(monkeypatch) -> Callable[..., AutocompleteSettings]:
    monkeypatch.delenv("UPA_CACHE", raising=False)
    monkeypatch.delenv("UPA_DEBOUNCE_MS", raising=False)

    def _factory(**overrides: Any) -> AutocompleteSettings:
        overrides.setdefault("debounce_ms", 0)
        return AutocompleteSettings(_env_file=None, **overrides)

    return _factory
