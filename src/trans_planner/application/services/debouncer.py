"""Cancellable debounce timer on the running event loop."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Coroutine
from typing import Any

logger = logging.getLogger(__name__)

DebouncedCallback = Callable[[], Coroutine[Any, Any, None]]


class Debouncer:
    """Holds at most one pending timer.

    Arming cancels the pending timer before scheduling the new one, so rapid
    triggers collapse into a single callback run with the latest arguments.
    A callback that has already started is not cancelled by re-arming.
    """

    def __init__(self) -> None:
        """Initialize an idle debouncer."""
        self._handle: asyncio.TimerHandle | None = None
        self._tasks: set[asyncio.Task[None]] = set()
        self._closed = False

    @property
    def is_pending(self) -> bool:
        """Whether a timer is armed and has not fired yet."""
        return self._handle is not None

    def arm(self, delay_seconds: float, callback: DebouncedCallback) -> None:
        """Cancel any pending timer and schedule ``callback`` after ``delay_seconds``."""
        if self._closed:
            logger.debug("Ignoring arm on closed debouncer")
            return
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(delay_seconds, self._fire, callback)

    def cancel(self) -> None:
        """Cancel the pending timer, if any."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, callback: DebouncedCallback) -> None:
        self._handle = None
        task = asyncio.create_task(callback())
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)

    def _on_task_done(self, task: asyncio.Task[None]) -> None:
        self._tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.error(f"Debounced callback failed: {task.exception()!r}")

    async def drain(self) -> None:
        """Wait for callbacks that have already fired to finish."""
        while self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    async def close(self) -> None:
        """Cancel the pending timer and any running callbacks."""
        self._closed = True
        self.cancel()
        for task in self._tasks:
            task.cancel()
        await self.drain()
