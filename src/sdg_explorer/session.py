# SPDX-License-Identifier: Apache-2.0
"""Explorer session: page language and prompt answering."""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from sdg_explorer.goals import GOALS
from sdg_explorer.llm.client import GenerationError
from sdg_explorer.page import PageTranslator, TranslatableElement, build_goal_elements
from sdg_explorer.translation.service import TranslationService

logger = logging.getLogger(__name__)

GENERATING_MESSAGE = "Generating response..."
ERROR_MESSAGE = "Error generating response. Please try again."


@runtime_checkable
class TextGenerator(Protocol):
    """Anything that answers a prompt with generated text."""

    async def generate(self, prompt: str, system: str | None = None) -> str: ...


class ExplorerSession:
    """State of one explorer session.

    Holds the page elements, the current language and the last AI response.
    The response is kept in the default language and re-translated from
    that original whenever the language changes.
    """

    def __init__(
        self,
        translation: TranslationService,
        generator: TextGenerator | None = None,
        elements: list[TranslatableElement] | None = None,
        language: str | None = None,
    ) -> None:
        self._translation = translation
        self._generator = generator
        self._page = PageTranslator(translation)
        self.elements = elements if elements is not None else build_goal_elements(GOALS)
        self.language = language or translation.default_language
        self.response: str | None = None
        self._response_original: str | None = None

    def element(self, key: str) -> TranslatableElement:
        """Return the page element with the given key.

        Raises:
            KeyError: If no element has this key.
        """
        for element in self.elements:
            if element.key == key:
                return element
        raise KeyError(key)

    async def change_language(self, language: str) -> None:
        """Switch the page and the last response to ``language``."""
        self.language = language
        await self._page.translate_page(self.elements, language)

        if self._response_original is not None:
            self.response = await self._translation.translate(
                self._response_original, language
            )

    async def ask(self, prompt: str) -> str:
        """Answer ``prompt`` and return the response in the session language.

        Raises:
            GenerationError: If no generator is configured or the model call fails.
        """
        if self._generator is None:
            raise GenerationError("No text generator configured")

        logger.info("Generating response for prompt: %s", prompt)
        original = await self._generator.generate(prompt)
        self._response_original = original
        self.response = await self._translation.translate(original, self.language)
        return self.response

    async def status(self, message: str) -> str:
        """Translate a UI status message into the session language."""
        return await self._translation.translate(message, self.language)
