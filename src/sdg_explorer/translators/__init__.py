# SPDX-License-Identifier: Apache-2.0
"""Translation backend modules.

This module provides the translation backend protocol, the error hierarchy
shared by the translation pipeline, and the MyMemory backend.

Usage:
    from sdg_explorer.translators import MyMemoryTranslator
    async with MyMemoryTranslator() as translator:
        result = await translator.translate("Hello", "en", "fr")
"""

from sdg_explorer.translators.base import (
    ConfigurationError,
    QuotaExceededError,
    RateLimitError,
    RequestTimeoutError,
    TranslationError,
    TranslatorBackend,
    TranslatorError,
)
from sdg_explorer.translators.mymemory import MyMemoryTranslator

__all__ = [
    # Protocol and exceptions
    "TranslatorBackend",
    "TranslatorError",
    "TranslationError",
    "RateLimitError",
    "QuotaExceededError",
    "ConfigurationError",
    "RequestTimeoutError",
    # Backends
    "MyMemoryTranslator",
]
