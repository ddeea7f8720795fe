# SPDX-License-Identifier: Apache-2.0
"""Base classes and protocols for translation backends."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


class TranslatorError(Exception):
    """Base exception for translator module."""

    pass


class TranslationError(TranslatorError):
    """Error during translation (API call failure, malformed response, etc.).

    This error type is potentially retryable.
    """

    pass


class RateLimitError(TranslationError):
    """The remote service answered with HTTP 429.

    Retried with backoff like any other TranslationError.
    """

    def __init__(self, message: str, status: int = 429) -> None:
        super().__init__(message)
        self.status = status


class QuotaExceededError(TranslatorError):
    """The daily translation quota of the remote service is exhausted.

    This error type is NOT retryable - further calls fail until the quota resets.
    """

    pass


class ConfigurationError(TranslatorError):
    """Configuration error (invalid URL, invalid parameters, etc.).

    This error type is NOT retryable - fix the configuration first.
    """

    pass


class RequestTimeoutError(TranslatorError):
    """A queued request waited too long and was dropped before dispatch."""

    def __init__(self, message: str, age: float) -> None:
        super().__init__(message)
        self.age = age


@runtime_checkable
class TranslatorBackend(Protocol):
    """Protocol definition for translation backends.

    All translator implementations must conform to this protocol.
    """

    @property
    def name(self) -> str:
        """Backend name ("mymemory")."""
        ...

    async def translate(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
    ) -> str:
        """Translate a single text.

        Args:
            text: Text to translate.
            source_lang: Source language code ("en").
            target_lang: Target language code ("fr", "es").

        Returns:
            Translated text.

        Raises:
            TranslationError: On a retryable failure.
            QuotaExceededError: When the service quota is exhausted.
        """
        ...

    async def close(self) -> None:
        """Release network resources held by the backend."""
        ...
