# SPDX-License-Identifier: Apache-2.0
"""MyMemory translation backend."""

from __future__ import annotations

import asyncio
from typing import Any

import aiohttp

from sdg_explorer.translators.base import (
    ConfigurationError,
    QuotaExceededError,
    RateLimitError,
    TranslationError,
)

# Marker MyMemory embeds in translatedText once the free quota is used up
QUOTA_MARKER = "QUOTA"


class MyMemoryTranslator:
    """MyMemory translation backend.

    Uses the free MyMemory REST API (no API key required). One text per
    request; rate limiting and retries are handled by the caller.

    Attributes:
        name: Backend identifier ("mymemory").
    """

    DEFAULT_API_URL = "https://api.mymemory.translated.net/get"
    DEFAULT_TIMEOUT = 10.0

    def __init__(
        self,
        api_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize MyMemoryTranslator.

        Args:
            api_url: API URL (default: public MyMemory endpoint).
            timeout: Total timeout in seconds for one HTTP request.

        Raises:
            ConfigurationError: If the URL or timeout is invalid.
        """
        self._api_url = api_url or self.DEFAULT_API_URL
        if not self._api_url.startswith(("http://", "https://")):
            raise ConfigurationError(f"Invalid translation API URL: {self._api_url}")

        self._timeout = self.DEFAULT_TIMEOUT if timeout is None else timeout
        if self._timeout <= 0:
            raise ConfigurationError("Request timeout must be positive")

        self._session: aiohttp.ClientSession | None = None

    @property
    def name(self) -> str:
        """Return backend name."""
        return "mymemory"

    async def __aenter__(self) -> MyMemoryTranslator:
        """Enter async context manager."""
        await self._ensure_session()
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Exit async context manager."""
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure aiohttp session exists.

        Returns:
            Active aiohttp session.
        """
        if self._session is None:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._timeout)
            )
        return self._session

    async def translate(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
    ) -> str:
        """Translate a single text using MyMemory.

        Args:
            text: Text to translate.
            source_lang: Source language code ("en").
            target_lang: Target language code ("fr").

        Returns:
            Translated text.

        Raises:
            RateLimitError: On HTTP 429.
            QuotaExceededError: When the daily quota is exhausted.
            TranslationError: On any other failure.
        """
        # Early return for empty or whitespace-only text
        if not text or not text.strip():
            return text

        session = await self._ensure_session()
        params = {"q": text, "langpair": f"{source_lang}|{target_lang}"}

        try:
            async with session.get(self._api_url, params=params) as response:
                if response.status == 429:
                    raise RateLimitError("MyMemory rate limit exceeded, please retry later")
                elif response.status == 403:
                    raise QuotaExceededError("MyMemory daily quota reached")
                elif response.status != 200:
                    raise TranslationError(f"MyMemory API error (status {response.status})")

                try:
                    data = await response.json(content_type=None)
                except ValueError as e:
                    raise TranslationError(f"MyMemory returned invalid JSON: {e}") from e
        except aiohttp.ClientError as e:
            raise TranslationError(f"MyMemory request failed: {e}") from e
        except asyncio.TimeoutError as e:
            raise TranslationError("MyMemory request timed out") from e

        return self._parse_response(data)

    def _parse_response(self, data: Any) -> str:
        """Extract the translated text from a MyMemory response body.

        Args:
            data: Decoded JSON body.

        Returns:
            Translated text.

        Raises:
            QuotaExceededError: If the body signals an exhausted quota.
            TranslationError: If the body is malformed.
        """
        if not isinstance(data, dict):
            raise TranslationError("MyMemory returned invalid response")

        # responseStatus is optional; when present it must be 200
        status: int | None = None
        if data.get("responseStatus") is not None:
            try:
                status = int(data["responseStatus"])
            except (TypeError, ValueError):
                status = 0

        response_data = data.get("responseData")
        translated = None
        if isinstance(response_data, dict):
            translated = response_data.get("translatedText")

        if status == 403 or (isinstance(translated, str) and QUOTA_MARKER in translated):
            raise QuotaExceededError("MyMemory daily quota reached")

        if status in (None, 200) and isinstance(translated, str) and translated:
            return translated

        raise TranslationError("MyMemory returned invalid response")

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None
