# SPDX-License-Identifier: Apache-2.0
"""Translatable page text and language switching."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from sdg_explorer.goals import Goal
from sdg_explorer.translation.service import TranslationService

logger = logging.getLogger(__name__)


@dataclass
class TranslatableElement:
    """A piece of displayed text that follows the page language.

    Attributes:
        key: Stable identifier of the element.
        text: Text currently displayed.
        original_text: Default-language text, recorded the first time the
            element is translated.
    """

    key: str
    text: str
    original_text: str | None = None

    def remember_original(self) -> str:
        """Record the current text as the original unless already recorded."""
        if self.original_text is None:
            self.original_text = self.text.strip()
        return self.original_text


def build_goal_elements(goals: Iterable[Goal]) -> list[TranslatableElement]:
    """Create the translatable elements of the goals page."""
    elements: list[TranslatableElement] = []
    for goal in goals:
        elements.append(TranslatableElement(f"goal-{goal.id}-title", goal.title))
        elements.append(
            TranslatableElement(f"goal-{goal.id}-description", goal.description)
        )
        for number, prompt in enumerate(goal.prompts, start=1):
            elements.append(
                TranslatableElement(f"goal-{goal.id}-prompt-{number}", prompt)
            )
    return elements


class PageTranslator:
    """Rewrites element text into a target language.

    Translation always starts from each element's original text, so
    switching languages repeatedly never translates a translation.
    """

    def __init__(self, service: TranslationService) -> None:
        self._service = service

    async def translate_page(
        self,
        elements: list[TranslatableElement],
        target_lang: str,
    ) -> None:
        """Translate all elements into ``target_lang`` in place.

        Args:
            elements: Elements to update.
            target_lang: Target language code.
        """
        if not target_lang:
            logger.warning("No language specified for translation update")
            return

        originals = [element.remember_original() for element in elements]

        if target_lang == self._service.default_language:
            for element, original in zip(elements, originals):
                element.text = original
            return

        logger.info("Updating %d page elements to %s", len(elements), target_lang)
        translations = await self._service.translate_batch(originals, target_lang)
        for element, original, translated in zip(elements, originals, translations):
            element.text = translated or original
