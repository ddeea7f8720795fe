# SPDX-License-Identifier: Apache-2.0
"""LLM integration module for SDG Explorer.

Answers the per-goal analytical prompts with a generative model via LiteLLM.
"""

from sdg_explorer.llm.client import GenerationError, LLMClient, LLMConfig

__all__ = [
    "GenerationError",
    "LLMConfig",
    "LLMClient",
]
