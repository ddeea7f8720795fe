# SPDX-License-Identifier: Apache-2.0
"""SDG Explorer - UN Sustainable Development Goals with AI analysis and translation."""

from sdg_explorer.config import TranslationConfig
from sdg_explorer.goals import GOALS, Goal, get_goal
from sdg_explorer.session import ExplorerSession
from sdg_explorer.translation import TranslationService
from sdg_explorer.translators import MyMemoryTranslator

__version__ = "0.1.0"

__all__ = [
    "GOALS",
    "ExplorerSession",
    "Goal",
    "MyMemoryTranslator",
    "TranslationConfig",
    "TranslationService",
    "get_goal",
]
