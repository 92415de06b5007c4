"""Trailing-edge async debounce helper."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

from places_autocomplete.logging import logger


class Debouncer:
    """Coalesce rapid-fire submissions into a single delayed coroutine run.

    Each ``submit`` cancels the pending timer, so only the last call inside a
    window executes. Once a timer has fired its coroutine runs to completion;
    later submissions never cancel work that already started.
    """

    def __init__(self, delay: float = 0.2) -> None:
        self.delay = delay
        self._timer: asyncio.Task[Any] | None = None
        self._tasks: set[asyncio.Task[Any]] = set()

    @property
    def pending(self) -> bool:
        return self._timer is not None

    def submit(self, coro_factory: Callable[[], Awaitable[Any]]) -> None:
        """Schedule a coroutine, cancelling any pending invocation.

        Must be called from inside a running event loop.
        """

        loop = asyncio.get_running_loop()
        self.cancel()
        task = loop.create_task(self._runner(coro_factory))
        self._timer = task
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def cancel(self) -> None:
        """Cancel any pending invocation."""

        if self._timer:
            self._timer.cancel()
            self._timer = None

    async def join(self) -> None:
        """Wait until no timer is pending and no fired call is still running."""

        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def _runner(self, coro_factory: Callable[[], Awaitable[Any]]) -> None:
        try:
            await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            return
        if self._timer is asyncio.current_task():
            self._timer = None
        try:
            await coro_factory()
        except Exception:
            logger.exception("debounced_call_failed")


__all__ = ["Debouncer"]
