"""
Collapsing of concurrent identical computations.

While a computation for a key is running, every other caller asking for
the same key awaits that computation instead of starting a new one.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Dict, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InFlightRequests(Generic[T]):
    """
    Map of key to the task computing it.

    At most one task exists per key. The entry is removed as soon as the
    task finishes, whether it succeeded, failed or was cancelled, so a
    later caller starts a fresh computation.

    Typical usage:
        >>> inflight = InFlightRequests()
        >>> result = await inflight.run("YouTube-watch-python", compute)
    """

    def __init__(self):
        self._pending: Dict[str, "asyncio.Task[T]"] = {}

    async def run(self, key: str, factory: Callable[[], Awaitable[T]]) -> T:
        """
        Return the result of the computation for `key`.

        Args:
            key: Deduplication key.
            factory: Zero-argument coroutine function; called only when no
                computation for `key` is running.

        Returns:
            The computation's result. Exceptions raised by the computation
            propagate to every caller awaiting it.
        """
        task = self._pending.get(key)
        if task is not None:
            logger.info(f"Joining in-flight computation: {key}")
        else:
            task = asyncio.ensure_future(factory())
            self._pending[key] = task
            task.add_done_callback(lambda done: self._discard(key, done))

        # A cancelled caller, including the one that started the task,
        # must not cancel the shared computation
        return await asyncio.shield(task)

    def _discard(self, key: str, task: "asyncio.Task[T]") -> None:
        if self._pending.get(key) is task:
            del self._pending[key]

    def is_pending(self, key: str) -> bool:
        return key in self._pending

    def __len__(self) -> int:
        return len(self._pending)
