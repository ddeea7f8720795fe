# SPDX-License-Identifier: Apache-2.0
"""Serial, rate-limited translation request queue."""

from __future__ import annotations

import asyncio
import logging
import time
from collections import deque
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from sdg_explorer.translators.base import RequestTimeoutError

logger = logging.getLogger(__name__)

DispatchFunc = Callable[[str, str], Awaitable[str]]
SleepFunc = Callable[[float], Awaitable[None]]


@dataclass
class QueuedRequest:
    """One pending translation request."""

    text: str
    target_lang: str
    enqueued_at: float
    future: asyncio.Future[str] = field(repr=False)

    def age(self, now: float) -> float:
        return now - self.enqueued_at


class RequestQueue:
    """FIFO queue that dispatches one request at a time.

    A single drain task processes the queue head first and pauses
    ``request_delay`` seconds after every dispatched request, whether it
    succeeded or failed. Requests older than ``stale_after`` seconds are
    failed with RequestTimeoutError without being dispatched.
    """

    def __init__(
        self,
        dispatch: DispatchFunc,
        request_delay: float = 1.0,
        stale_after: float = 0.0,
        clock: Callable[[], float] = time.monotonic,
        sleep: SleepFunc = asyncio.sleep,
    ) -> None:
        """Initialize RequestQueue.

        Args:
            dispatch: Coroutine performing one translation (text, target_lang).
            request_delay: Pause in seconds after each dispatched request.
            stale_after: Maximum queueing age in seconds (0 disables the check).
            clock: Monotonic time source.
            sleep: Awaitable sleep function.
        """
        self._dispatch = dispatch
        self._request_delay = request_delay
        self._stale_after = stale_after
        self._clock = clock
        self._sleep = sleep
        self._queue: deque[QueuedRequest] = deque()
        self._draining = False
        self._drain_task: asyncio.Task[None] | None = None

    @property
    def pending(self) -> int:
        """Number of requests waiting for dispatch."""
        return len(self._queue)

    @property
    def is_draining(self) -> bool:
        return self._draining

    def enqueue(self, text: str, target_lang: str) -> asyncio.Future[str]:
        """Append a request and start draining if the queue is idle.

        Must be called from a running event loop.

        Returns:
            Future resolved with the translated text, or failed with the
            dispatch error.
        """
        loop = asyncio.get_running_loop()
        request = QueuedRequest(
            text=text,
            target_lang=target_lang,
            enqueued_at=self._clock(),
            future=loop.create_future(),
        )
        self._queue.append(request)

        if not self._draining:
            self._draining = True
            self._drain_task = loop.create_task(self._drain())
        return request.future

    async def join(self) -> None:
        """Wait until the queue is empty and the drainer has stopped."""
        if self._drain_task is not None:
            await asyncio.shield(self._drain_task)

    async def close(self) -> None:
        """Stop the drainer and cancel every request still waiting."""
        task, self._drain_task = self._drain_task, None
        if task is not None and not task.done():
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)

        while self._queue:
            request = self._queue.popleft()
            if not request.future.done():
                request.future.cancel()

    async def _drain(self) -> None:
        try:
            while self._queue:
                request = self._queue.popleft()

                if request.future.done():
                    # Caller gave up before dispatch
                    continue

                if self._is_stale(request):
                    age = request.age(self._clock())
                    logger.warning(
                        "Dropping stale translation request after %.1fs", age
                    )
                    request.future.set_exception(
                        RequestTimeoutError("Translation request timed out in queue", age=age)
                    )
                    continue

                try:
                    result = await self._dispatch(request.text, request.target_lang)
                except asyncio.CancelledError:
                    request.future.cancel()
                    raise
                except Exception as e:
                    if not request.future.done():
                        request.future.set_exception(e)
                else:
                    if not request.future.done():
                        request.future.set_result(result)

                await self._sleep(self._request_delay)
        finally:
            self._draining = False

    def _is_stale(self, request: QueuedRequest) -> bool:
        if self._stale_after <= 0:
            return False
        return request.age(self._clock()) > self._stale_after
