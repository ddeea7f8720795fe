# SPDX-License-Identifier: Apache-2.0
"""Translation service combining cache, request queue, and retry policy."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any

from sdg_explorer.config import TranslationConfig
from sdg_explorer.translation.cache import (
    JsonFileStorage,
    KeyValueStorage,
    MemoryStorage,
    TranslationCache,
)
from sdg_explorer.translation.queue import RequestQueue, SleepFunc
from sdg_explorer.translation.retry import RetryPolicy, call_with_retry
from sdg_explorer.translators.base import QuotaExceededError, TranslatorBackend

logger = logging.getLogger(__name__)

NoticeCallback = Callable[[str], None]


class TranslationService:
    """Entry point for all translations.

    ``translate`` never raises for remote failures: on any unrecoverable
    error the original text is returned. Single-text cache misses go through
    a serial request queue; batch mode runs one group at a time concurrently.
    Both wrap the backend call in a bounded retry.

    Usage:
        async with TranslationService(MyMemoryTranslator(), config) as service:
            text = await service.translate("Hello", "fr")
    """

    QUOTA_MESSAGE = "Daily translation quota reached. Please try again tomorrow."

    def __init__(
        self,
        backend: TranslatorBackend,
        config: TranslationConfig | None = None,
        storage: KeyValueStorage | None = None,
        *,
        clock: Callable[[], float] = time.time,
        sleep: SleepFunc = asyncio.sleep,
        notice: NoticeCallback | None = None,
    ) -> None:
        """Initialize TranslationService.

        Args:
            backend: Remote translation backend.
            config: Translation configuration.
            storage: Cache snapshot storage. Defaults to a JSON file at
                ``config.cache_path``, or memory when no path is set.
            clock: Time source in epoch seconds.
            sleep: Awaitable sleep used for request spacing and backoff.
            notice: Called with a user-facing message when the quota is hit.
        """
        self._backend = backend
        self._config = config or TranslationConfig()
        self._clock = clock
        self._sleep = sleep
        self._notice = notice
        self._last_notice_at: float | None = None
        self._persist_task: asyncio.Task[None] | None = None
        self._started = False

        if storage is None:
            if self._config.cache_path is not None:
                storage = JsonFileStorage(self._config.cache_path)
            else:
                storage = MemoryStorage()

        self._cache = TranslationCache(
            storage,
            cache_duration=self._config.cache_duration,
            clock=clock,
        )
        self._retry = RetryPolicy(
            max_retries=self._config.max_retries,
            base_delay=self._config.retry_delay,
        )
        self._queue = RequestQueue(
            self._dispatch,
            request_delay=self._config.request_delay,
            stale_after=self._config.stale_after,
            clock=clock,
            sleep=sleep,
        )

    @property
    def config(self) -> TranslationConfig:
        return self._config

    @property
    def cache(self) -> TranslationCache:
        return self._cache

    @property
    def queue(self) -> RequestQueue:
        return self._queue

    @property
    def default_language(self) -> str:
        return self._config.default_language

    async def __aenter__(self) -> TranslationService:
        await self.start()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.stop()

    async def start(self) -> None:
        """Load the cache snapshot and start periodic persistence."""
        if self._started:
            return
        self._cache.load_snapshot()
        if self._config.persist_interval > 0:
            self._persist_task = asyncio.create_task(self._persist_periodically())
        self._started = True

    async def stop(self) -> None:
        """Stop background work, persist the cache and close the backend.

        Requests already queued are dispatched first, so pending
        ``translate`` calls still resolve.
        """
        task, self._persist_task = self._persist_task, None
        if task is not None:
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)

        await self._queue.join()
        await self._queue.close()
        self._cache.save_snapshot()
        await self._backend.close()
        self._started = False

    def flush(self) -> None:
        """Persist the cache snapshot now."""
        self._cache.save_snapshot()

    async def _persist_periodically(self) -> None:
        while True:
            await asyncio.sleep(self._config.persist_interval)
            self._cache.save_snapshot()

    def is_passthrough(self, text: str, target_lang: str) -> bool:
        """Whether ``text`` is returned as-is without any lookup."""
        return (
            not text
            or not text.strip()
            or not target_lang
            or target_lang == self._config.default_language
        )

    async def translate(self, text: str, target_lang: str) -> str:
        """Translate text into ``target_lang``.

        Cache misses go through the serial request queue.

        Args:
            text: Text in the default language.
            target_lang: Target language code.

        Returns:
            Translated text, or ``text`` itself when no translation is
            needed or the translation failed.
        """
        return await self._translate_with(self._queue.enqueue, text, target_lang)

    async def translate_batch(self, texts: list[str], target_lang: str) -> list[str]:
        """Translate many texts in small concurrent groups.

        Groups of ``batch_size`` run concurrently, bypassing the serial
        queue; groups run one after the other with ``request_delay``
        between them.

        Args:
            texts: Texts in the default language.
            target_lang: Target language code.

        Returns:
            Translations in input order.
        """
        if not texts:
            return []

        batch_size = self._config.batch_size
        results: list[str] = []
        for start in range(0, len(texts), batch_size):
            batch = texts[start : start + batch_size]
            results.extend(
                await asyncio.gather(
                    *(self._translate_with(self._dispatch, t, target_lang) for t in batch)
                )
            )
            if start + batch_size < len(texts):
                await self._sleep(self._config.request_delay)
        return results

    async def _translate_with(
        self,
        fetch: Callable[[str, str], Awaitable[str]],
        text: str,
        target_lang: str,
    ) -> str:
        if self.is_passthrough(text, target_lang):
            return text

        cached = self._cache.get(text, target_lang)
        if cached is not None:
            logger.debug("Cache hit for %r (%s)", text[:40], target_lang)
            return cached

        try:
            translated = await fetch(text, target_lang)
        except QuotaExceededError as e:
            logger.warning("Translation quota reached: %s", e)
            self._notify_quota()
            return text
        except Exception as e:
            logger.warning(
                "Translation to %s failed, keeping original text: %s", target_lang, e
            )
            return text

        self._cache.put(text, target_lang, translated)
        return translated

    async def _dispatch(self, text: str, target_lang: str) -> str:
        source_lang = self._config.default_language
        return await call_with_retry(
            lambda: self._backend.translate(text, source_lang, target_lang),
            self._retry.max_retries,
            self._retry.base_delay,
            sleep=self._sleep,
        )

    def _notify_quota(self) -> None:
        now = self._clock()
        if (
            self._last_notice_at is not None
            and now - self._last_notice_at < self._config.notice_duration
        ):
            return
        self._last_notice_at = now
        if self._notice is not None:
            self._notice(self.QUOTA_MESSAGE)
