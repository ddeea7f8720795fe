# SPDX-License-Identifier: Apache-2.0
"""
SDG Explorer - CLI Tool

Browse the 17 UN Sustainable Development Goals, ask a generative model one of
each goal's analytical prompts, and read everything in your own language.

Usage:
    sdg-explorer [options] <command> [arguments]

Examples:
    sdg-explorer goals                       # List all goals
    sdg-explorer --lang fr goals             # List goals in French
    sdg-explorer prompts 13                  # Prompts of goal 13
    sdg-explorer --lang es ask 13 2          # Ask prompt 2 of goal 13, answer in Spanish
    sdg-explorer --lang de translate "Clean water for all"
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn

from dotenv import load_dotenv

from sdg_explorer.config import TranslationConfig
from sdg_explorer.goals import GOALS, get_goal
from sdg_explorer.llm.client import GenerationError, LLMClient, LLMConfig
from sdg_explorer.page import build_goal_elements
from sdg_explorer.session import ERROR_MESSAGE, GENERATING_MESSAGE, ExplorerSession
from sdg_explorer.translation.service import TranslationService
from sdg_explorer.translators.base import ConfigurationError
from sdg_explorer.translators.mymemory import MyMemoryTranslator

logger = logging.getLogger(__name__)

# Default cache snapshot location
DEFAULT_CACHE_FILE = Path.home() / ".cache" / "sdg-explorer" / "translations.json"


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments to parse (default: sys.argv[1:]).

    Returns:
        Parsed argument Namespace.
    """
    parser = argparse.ArgumentParser(
        prog="sdg-explorer",
        description="Explore the UN Sustainable Development Goals with AI-generated analysis",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s goals                          # All goals (English)
  %(prog)s --lang fr goals                # All goals in French
  %(prog)s prompts 6                      # Prompts of goal 6
  %(prog)s --lang es ask 6 1              # Ask prompt 1 of goal 6
  %(prog)s --lang it translate "Hello"    # Translate free text

Environment Variables:
  GEMINI_API_KEY         Gemini API key (required for ask)
  SDG_DEFAULT_LANGUAGE   Source language of the goal texts (default: en)
  SDG_CACHE_FILE         Translation cache file
  SDG_MAX_RETRIES        Translation retries (default: 3)
  SDG_REQUEST_DELAY      Seconds between translation requests (default: 1.0)
""",
    )

    parser.add_argument(
        "-l",
        "--lang",
        help="Display language code (default: the source language)",
    )
    parser.add_argument(
        "--cache-file",
        type=Path,
        help=f"Translation cache file (default: {DEFAULT_CACHE_FILE})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("goals", help="List all goals")

    prompts_parser = subparsers.add_parser("prompts", help="List the prompts of a goal")
    prompts_parser.add_argument("goal", type=int, help="Goal number (1-17)")

    ask_parser = subparsers.add_parser("ask", help="Ask the model one of a goal's prompts")
    ask_parser.add_argument("goal", type=int, help="Goal number (1-17)")
    ask_parser.add_argument("prompt", type=int, help="Prompt number (1-5)")

    llm_group = ask_parser.add_argument_group("LLM options")
    llm_group.add_argument(
        "--provider",
        default="gemini",
        help="LLM provider (default: gemini)",
    )
    llm_group.add_argument(
        "--model",
        help="Model name (default: provider default)",
    )
    llm_group.add_argument(
        "--api-key",
        help="API key (or set the provider's *_API_KEY variable)",
    )
    llm_group.add_argument(
        "--temperature",
        type=float,
        default=0.7,
        help="Sampling temperature (default: 0.7)",
    )
    llm_group.add_argument(
        "--max-tokens",
        type=int,
        default=1024,
        help="Maximum response tokens (default: 1024)",
    )

    translate_parser = subparsers.add_parser("translate", help="Translate free text")
    translate_parser.add_argument("text", help="Text in the source language")

    return parser.parse_args(argv)


def create_translation_service(config: TranslationConfig) -> TranslationService:
    """Create the translation service for a CLI run."""
    backend = MyMemoryTranslator(api_url=config.api_url, timeout=config.request_timeout)
    return TranslationService(backend, config, notice=print_notice)


def create_llm_client(args: argparse.Namespace) -> LLMClient | None:
    """Create the LLM client, or None if no API key is available."""
    config = LLMConfig(
        provider=args.provider,
        model=args.model,
        api_key=args.api_key,
        temperature=args.temperature,
        max_tokens=args.max_tokens,
    )
    if not (args.api_key or os.environ.get(config.get_api_key_env_var())):
        print(
            f"Error: API key is required for provider '{config.provider}'.\n"
            f"  Set --api-key option or {config.get_api_key_env_var()} environment variable.",
            file=sys.stderr,
        )
        return None
    return LLMClient(config)


def print_notice(message: str) -> None:
    """Show a transient user notice."""
    print(f"Notice: {message}", file=sys.stderr)


async def run(args: argparse.Namespace) -> int:
    """Execute one CLI command.

    Args:
        args: Command line arguments.

    Returns:
        Exit code (0: success, 1: failure).
    """
    try:
        config = TranslationConfig.from_env(cache_path=args.cache_file)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    if config.cache_path is None:
        config.cache_path = DEFAULT_CACHE_FILE

    language = args.lang or config.default_language

    if args.command == "goals":
        goals = list(GOALS)
        elements = [
            element
            for element in build_goal_elements(goals)
            if "-prompt-" not in element.key
        ]
    elif args.command in ("prompts", "ask"):
        try:
            goal = get_goal(args.goal)
        except KeyError as e:
            print(f"Error: {e.args[0]}", file=sys.stderr)
            return 1
        goals = [goal]
        elements = build_goal_elements(goals)
    else:
        goals = []
        elements = []

    generator: LLMClient | None = None
    if args.command == "ask":
        try:
            prompt = goal.prompt(args.prompt)
        except IndexError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        generator = create_llm_client(args)
        if generator is None:
            return 1

    async with create_translation_service(config) as service:
        if args.command == "translate":
            print(await service.translate(args.text, language))
            return 0

        if args.command == "ask":
            session = ExplorerSession(service, generator, language=language)
            print(await session.status(GENERATING_MESSAGE), file=sys.stderr)
            try:
                response = await session.ask(prompt)
            except GenerationError as e:
                logger.debug("Generation failed: %s", e)
                print(await session.status(ERROR_MESSAGE), file=sys.stderr)
                return 1
            print(response)
            return 0

        session = ExplorerSession(service, elements=elements)
        await session.change_language(language)
        for g in goals:
            print(f"{g.id:>2}. {session.element(f'goal-{g.id}-title').text}")
            if args.command == "goals":
                print(f"    {session.element(f'goal-{g.id}-description').text}")
            else:
                for number in range(1, len(g.prompts) + 1):
                    print(f"    {number}. {session.element(f'goal-{g.id}-prompt-{number}').text}")
        return 0


def main() -> NoReturn:
    """Main entry point."""
    load_dotenv()
    args = parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    exit_code = asyncio.run(run(args))
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
