# SPDX-License-Identifier: Apache-2.0
"""Tests for translation backends."""

from __future__ import annotations

import os
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from sdg_explorer.translators import (
    ConfigurationError,
    MyMemoryTranslator,
    QuotaExceededError,
    RateLimitError,
    RequestTimeoutError,
    TranslationError,
    TranslatorBackend,
    TranslatorError,
)


def mock_session_for(status: int, body: Any = None) -> MagicMock:
    """Build a mocked aiohttp session whose GET returns one response."""
    mock_response = AsyncMock()
    mock_response.status = status
    mock_response.json = AsyncMock(return_value=body)

    mock_session = MagicMock()
    mock_session.get = MagicMock(return_value=AsyncMock())
    mock_session.get.return_value.__aenter__ = AsyncMock(return_value=mock_response)
    mock_session.get.return_value.__aexit__ = AsyncMock(return_value=None)
    mock_session.close = AsyncMock()
    return mock_session


def ok_body(text: str) -> dict[str, Any]:
    return {"responseStatus": 200, "responseData": {"translatedText": text}}


class TestTranslatorBackendProtocol:
    """Test TranslatorBackend protocol."""

    def test_mymemory_implements_protocol(self) -> None:
        """MyMemoryTranslator should implement TranslatorBackend protocol."""
        translator = MyMemoryTranslator()
        assert isinstance(translator, TranslatorBackend)

    def test_protocol_has_name(self) -> None:
        """MyMemoryTranslator should have name 'mymemory'."""
        assert MyMemoryTranslator().name == "mymemory"


class TestExceptions:
    """Test exception hierarchy."""

    def test_translation_error_inherits_from_translator_error(self) -> None:
        """TranslationError should inherit from TranslatorError."""
        assert issubclass(TranslationError, TranslatorError)

    def test_rate_limit_error_is_retryable(self) -> None:
        """RateLimitError is a TranslationError carrying the status."""
        assert issubclass(RateLimitError, TranslationError)
        assert RateLimitError("slow down").status == 429

    def test_quota_error_is_not_a_translation_error(self) -> None:
        """QuotaExceededError is terminal, not a retryable TranslationError."""
        assert issubclass(QuotaExceededError, TranslatorError)
        assert not issubclass(QuotaExceededError, TranslationError)

    def test_configuration_error_inherits_from_translator_error(self) -> None:
        """ConfigurationError should inherit from TranslatorError."""
        assert issubclass(ConfigurationError, TranslatorError)

    def test_request_timeout_error_carries_age(self) -> None:
        """RequestTimeoutError records how long the request waited."""
        error = RequestTimeoutError("timed out", age=301.0)
        assert isinstance(error, TranslatorError)
        assert error.age == 301.0


class TestMyMemoryTranslatorUnit:
    """Unit tests for MyMemoryTranslator (mocked)."""

    def test_default_api_url(self) -> None:
        """Default endpoint is the public MyMemory API."""
        translator = MyMemoryTranslator()
        assert translator._api_url == "https://api.mymemory.translated.net/get"

    def test_custom_api_url(self) -> None:
        """MyMemoryTranslator should accept a custom API URL."""
        translator = MyMemoryTranslator(api_url="http://localhost:8080/get")
        assert translator._api_url == "http://localhost:8080/get"

    def test_invalid_api_url(self) -> None:
        """A non-HTTP URL is a configuration error."""
        with pytest.raises(ConfigurationError):
            MyMemoryTranslator(api_url="ftp://example.com")

    def test_invalid_timeout(self) -> None:
        """A non-positive timeout is a configuration error."""
        with pytest.raises(ConfigurationError):
            MyMemoryTranslator(timeout=0)

    @pytest.mark.asyncio
    async def test_translate_empty_string(self) -> None:
        """Empty string should return as-is without a request."""
        translator = MyMemoryTranslator()
        translator._session = mock_session_for(200, ok_body("x"))

        assert await translator.translate("", "en", "fr") == ""
        assert await translator.translate("   ", "en", "fr") == "   "
        translator._session.get.assert_not_called()

    @pytest.mark.asyncio
    async def test_translate_mocked(self) -> None:
        """A 200 response yields the nested translated text."""
        translator = MyMemoryTranslator()
        translator._session = mock_session_for(200, ok_body("Bonjour"))

        result = await translator.translate("Hello", "en", "fr")

        assert result == "Bonjour"
        call = translator._session.get.call_args
        assert call.args[0] == MyMemoryTranslator.DEFAULT_API_URL
        assert call.kwargs["params"] == {"q": "Hello", "langpair": "en|fr"}

    @pytest.mark.asyncio
    async def test_body_without_response_status(self) -> None:
        """A body carrying only responseData is accepted."""
        translator = MyMemoryTranslator()
        translator._session = mock_session_for(
            200, {"responseData": {"translatedText": "Bonjour"}}
        )

        assert await translator.translate("Hello", "en", "fr") == "Bonjour"

    @pytest.mark.asyncio
    async def test_null_response_status(self) -> None:
        """A null responseStatus is treated as absent."""
        translator = MyMemoryTranslator()
        translator._session = mock_session_for(
            200, {"responseStatus": None, "responseData": {"translatedText": "Hola"}}
        )

        assert await translator.translate("Hello", "en", "es") == "Hola"

    @pytest.mark.asyncio
    async def test_string_response_status(self) -> None:
        """responseStatus given as a string is accepted."""
        translator = MyMemoryTranslator()
        translator._session = mock_session_for(
            200, {"responseStatus": "200", "responseData": {"translatedText": "Hola"}}
        )

        assert await translator.translate("Hello", "en", "es") == "Hola"

    @pytest.mark.asyncio
    async def test_rate_limit(self) -> None:
        """HTTP 429 raises RateLimitError."""
        translator = MyMemoryTranslator()
        translator._session = mock_session_for(429)

        with pytest.raises(RateLimitError):
            await translator.translate("Hello", "en", "fr")

    @pytest.mark.asyncio
    async def test_http_403_is_quota(self) -> None:
        """HTTP 403 raises QuotaExceededError."""
        translator = MyMemoryTranslator()
        translator._session = mock_session_for(403)

        with pytest.raises(QuotaExceededError):
            await translator.translate("Hello", "en", "fr")

    @pytest.mark.asyncio
    async def test_body_status_403_is_quota(self) -> None:
        """responseStatus 403 in the body raises QuotaExceededError."""
        translator = MyMemoryTranslator()
        translator._session = mock_session_for(
            200, {"responseStatus": 403, "responseData": {"translatedText": "Hello"}}
        )

        with pytest.raises(QuotaExceededError):
            await translator.translate("Hello", "en", "fr")

    @pytest.mark.asyncio
    async def test_quota_marker_in_text(self) -> None:
        """A QUOTA marker in the translated text raises QuotaExceededError."""
        translator = MyMemoryTranslator()
        translator._session = mock_session_for(
            200, ok_body("MYMEMORY WARNING: YOU USED ALL AVAILABLE FREE TRANSLATIONS. QUOTA")
        )

        with pytest.raises(QuotaExceededError):
            await translator.translate("Hello", "en", "fr")

    @pytest.mark.asyncio
    async def test_server_error(self) -> None:
        """Other non-200 statuses raise TranslationError."""
        translator = MyMemoryTranslator()
        translator._session = mock_session_for(500)

        with pytest.raises(TranslationError) as exc_info:
            await translator.translate("Hello", "en", "fr")
        assert "500" in str(exc_info.value)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            None,
            [],
            {"responseStatus": 200},
            {"responseStatus": 200, "responseData": {}},
            {"responseStatus": 200, "responseData": {"translatedText": ""}},
            {"responseStatus": 500, "responseData": {"translatedText": "x"}},
            {"responseStatus": "n/a", "responseData": {"translatedText": "x"}},
            {"responseData": {"translatedText": 42}},
        ],
    )
    async def test_malformed_body(self, body: Any) -> None:
        """Malformed bodies raise TranslationError."""
        translator = MyMemoryTranslator()
        translator._session = mock_session_for(200, body)

        with pytest.raises(TranslationError):
            await translator.translate("Hello", "en", "fr")

    @pytest.mark.asyncio
    async def test_invalid_json(self) -> None:
        """A body that is not JSON raises TranslationError."""
        translator = MyMemoryTranslator()
        session = mock_session_for(200)
        response = await session.get.return_value.__aenter__()
        response.json = AsyncMock(side_effect=ValueError("Expecting value"))
        translator._session = session

        with pytest.raises(TranslationError) as exc_info:
            await translator.translate("Hello", "en", "fr")
        assert "invalid JSON" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_client_error(self) -> None:
        """Network errors are wrapped in TranslationError."""
        translator = MyMemoryTranslator()
        session = mock_session_for(200)
        session.get.side_effect = aiohttp.ClientError("connection reset")
        translator._session = session

        with pytest.raises(TranslationError) as exc_info:
            await translator.translate("Hello", "en", "fr")
        assert "request failed" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_close(self) -> None:
        """close() closes and forgets the session."""
        translator = MyMemoryTranslator()
        session = mock_session_for(200)
        translator._session = session

        await translator.close()

        session.close.assert_awaited_once()
        assert translator._session is None


@pytest.mark.skipif(
    os.environ.get("RUN_INTEGRATION") != "1",
    reason="Integration tests disabled (set RUN_INTEGRATION=1 to run)",
)
class TestMyMemoryTranslatorIntegration:
    """Integration tests for MyMemoryTranslator (real API).

    These tests require network access and call the real MyMemory API.
    Run with: RUN_INTEGRATION=1 pytest tests/test_translators.py
    """

    @pytest.mark.asyncio
    async def test_real_translation_en_to_fr(self) -> None:
        """Test real translation from English to French."""
        async with MyMemoryTranslator() as translator:
            result = await translator.translate("Hello", "en", "fr")
        assert result != "Hello"
        assert len(result) > 0
