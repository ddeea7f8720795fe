# SPDX-License-Identifier: Apache-2.0
"""Translation pipeline package."""

from .cache import JsonFileStorage, KeyValueStorage, MemoryStorage, TranslationCache
from .queue import QueuedRequest, RequestQueue
from .retry import RetryPolicy, call_with_retry
from .service import TranslationService

__all__ = [
    "JsonFileStorage",
    "KeyValueStorage",
    "MemoryStorage",
    "QueuedRequest",
    "RequestQueue",
    "RetryPolicy",
    "TranslationCache",
    "TranslationService",
    "call_with_retry",
]
