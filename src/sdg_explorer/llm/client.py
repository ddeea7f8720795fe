# SPDX-License-Identifier: Apache-2.0
"""LLM client using LiteLLM for unified provider access."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import ClassVar

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """The model call failed or returned no text."""

    pass


@dataclass
class LLMConfig:
    """Configuration for LLM integration via LiteLLM.

    Attributes:
        provider: LLM provider ("gemini", "openai", "anthropic", etc.).
        model: Model name within provider. If None, uses PROVIDER_DEFAULTS.
        api_key: API key (optional, can use environment variables).
        temperature: Sampling temperature.
        top_k: Top-k sampling cutoff.
        top_p: Nucleus sampling cutoff.
        max_tokens: Maximum number of generated tokens.
    """

    provider: str = "gemini"
    model: str | None = None  # None = use PROVIDER_DEFAULTS[provider]
    api_key: str | None = None
    temperature: float = 0.7
    top_k: int = 40
    top_p: float = 0.95
    max_tokens: int = 1024

    # Supported providers and their default models
    PROVIDER_DEFAULTS: ClassVar[dict[str, str]] = {
        "gemini": "gemini-2.0-flash",
        "openai": "gpt-4o-mini",
        "anthropic": "claude-sonnet-4-5",
    }

    # Environment variable names for API keys
    API_KEY_ENV_VARS: ClassVar[dict[str, str]] = {
        "gemini": "GEMINI_API_KEY",
        "openai": "OPENAI_API_KEY",
        "anthropic": "ANTHROPIC_API_KEY",
    }

    @property
    def effective_model(self) -> str:
        """Get effective model name (resolves None to provider default)."""
        if self.model is not None:
            return self.model
        return self.PROVIDER_DEFAULTS.get(self.provider, "gemini-2.0-flash")

    @property
    def litellm_model(self) -> str:
        """Get LiteLLM model string (provider/model format)."""
        return f"{self.provider}/{self.effective_model}"

    def get_api_key_env_var(self) -> str:
        """Get environment variable name for API key."""
        return self.API_KEY_ENV_VARS.get(
            self.provider, f"{self.provider.upper()}_API_KEY"
        )


class LLMClient:
    """Unified LLM client using LiteLLM.

    Sends one prompt with the configured generation parameters and returns
    the generated text.
    """

    def __init__(self, config: LLMConfig | None = None) -> None:
        """Initialize LLMClient.

        Args:
            config: LLM configuration.
        """
        self._config = config or LLMConfig()
        self._setup_api_key()

    @property
    def config(self) -> LLMConfig:
        return self._config

    def _setup_api_key(self) -> None:
        """Set up API key in environment if provided."""
        if self._config.api_key:
            env_var = self._config.get_api_key_env_var()
            os.environ[env_var] = self._config.api_key

    async def generate(
        self,
        prompt: str,
        system: str | None = None,
    ) -> str:
        """Generate text from prompt using LiteLLM.

        Args:
            prompt: User prompt.
            system: Optional system prompt.

        Returns:
            Generated text.

        Raises:
            GenerationError: On LLM API errors or an empty response.
        """
        from litellm import acompletion

        messages: list[dict[str, str]] = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        try:
            response = await acompletion(
                model=self._config.litellm_model,
                messages=messages,
                temperature=self._config.temperature,
                top_p=self._config.top_p,
                top_k=self._config.top_k,
                max_tokens=self._config.max_tokens,
            )
        except Exception as e:
            logger.error("LLM request to %s failed: %s", self._config.litellm_model, e)
            raise GenerationError(f"LLM request failed: {e}") from e

        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError, KeyError, TypeError) as e:
            raise GenerationError("LLM response has no generated text") from e

        if not content:
            raise GenerationError("LLM response has no generated text")
        return str(content)
