# SPDX-License-Identifier: Apache-2.0
"""Shared test doubles for the translation pipeline."""

from __future__ import annotations

import asyncio

import pytest

from sdg_explorer.config import TranslationConfig
from sdg_explorer.translation.service import TranslationService


class FakeBackend:
    """Scripted translation backend.

    Each call consumes the next scripted response; exceptions are raised.
    Once the script is exhausted, returns "<text> [<target>]".
    """

    def __init__(self, responses: list[object] | None = None) -> None:
        self.calls: list[tuple[str, str, str]] = []
        self.closed = False
        self.in_flight = 0
        self.peak_in_flight = 0
        self._responses = list(responses or [])

    @property
    def name(self) -> str:
        return "fake"

    async def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        self.calls.append((text, source_lang, target_lang))
        self.in_flight += 1
        self.peak_in_flight = max(self.peak_in_flight, self.in_flight)
        try:
            await asyncio.sleep(0)
        finally:
            self.in_flight -= 1
        if self._responses:
            response = self._responses.pop(0)
            if isinstance(response, BaseException):
                raise response
            return str(response)
        return f"{text} [{target_lang}]"

    async def close(self) -> None:
        self.closed = True

    @property
    def texts(self) -> list[str]:
        return [text for text, _, _ in self.calls]


class RecordingSleep:
    """Awaitable sleep that records delays and returns immediately."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)
        await asyncio.sleep(0)


class FakeClock:
    """Manually advanced clock (epoch seconds)."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def config() -> TranslationConfig:
    return TranslationConfig(
        request_delay=0.5,
        retry_delay=1.0,
        max_retries=3,
        persist_interval=0,
    )


def make_service(
    backend: FakeBackend,
    config: TranslationConfig,
    clock: FakeClock,
    sleep: RecordingSleep,
    **kwargs: object,
) -> TranslationService:
    return TranslationService(backend, config, clock=clock, sleep=sleep, **kwargs)  # type: ignore[arg-type]
