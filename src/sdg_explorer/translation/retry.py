# SPDX-License-Identifier: Apache-2.0
"""Bounded retry with exponential backoff."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

from sdg_explorer.translators.base import ConfigurationError, QuotaExceededError

logger = logging.getLogger(__name__)

T = TypeVar("T")

SleepFunc = Callable[[float], Awaitable[None]]

NON_RETRYABLE: tuple[type[BaseException], ...] = (QuotaExceededError, ConfigurationError)


@dataclass(frozen=True)
class RetryPolicy:
    """Retry settings for one logical call."""

    max_retries: int = 3
    base_delay: float = 1.0


async def call_with_retry(
    operation: Callable[[], Awaitable[T]],
    max_retries: int,
    base_delay: float,
    *,
    sleep: SleepFunc = asyncio.sleep,
    non_retryable: tuple[type[BaseException], ...] = NON_RETRYABLE,
) -> T:
    """Run ``operation`` until it succeeds or ``max_retries`` retries are spent.

    The delay starts at ``base_delay`` and doubles after every failure. Attempt
    count and delay live in this call only, so concurrent calls never affect
    each other's backoff.

    Args:
        operation: Zero-argument coroutine factory, called once per attempt.
        max_retries: Number of retries after the first attempt.
        base_delay: Delay in seconds before the first retry.
        sleep: Awaitable sleep function.
        non_retryable: Exception types re-raised immediately.

    Returns:
        Result of the first successful attempt.

    Raises:
        Exception: The last failure once retries are exhausted, or any
            non-retryable failure.
    """
    retries = 0
    delay = base_delay
    while True:
        try:
            return await operation()
        except non_retryable:
            raise
        except Exception as e:
            if retries >= max_retries:
                logger.warning("Giving up after %d retries: %s", retries, e)
                raise
            retries += 1
            logger.warning(
                "Attempt failed (%s), waiting %.2fs before retry %d/%d",
                e,
                delay,
                retries,
                max_retries,
            )
            await sleep(delay)
            delay *= 2
