# SPDX-License-Identifier: Apache-2.0
"""Translation configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, ClassVar

from sdg_explorer.translators.base import ConfigurationError
from sdg_explorer.translators.mymemory import MyMemoryTranslator


@dataclass
class TranslationConfig:
    """Translation pipeline configuration.

    All durations are in seconds.

    Attributes:
        default_language: Source language of the UI; translating into it is a no-op.
        max_retries: Retries after the first failed attempt of one call.
        retry_delay: Delay before the first retry; doubles on each further retry.
        cache_duration: Maximum age of a persisted cache snapshot.
        request_delay: Pause after each queued request and between page batches.
        batch_size: Number of texts translated concurrently in batch mode.
        stale_after: Queued requests older than this are dropped (0 = never).
        persist_interval: Period of the cache snapshot task (0 = disabled).
        notice_duration: Minimum interval between two quota notices.
        request_timeout: Total timeout for one HTTP request.
        api_url: Translation endpoint.
        cache_path: Cache snapshot file. None keeps the cache in memory only.
    """

    default_language: str = "en"
    max_retries: int = 3
    retry_delay: float = 1.0
    cache_duration: float = 24 * 60 * 60.0
    request_delay: float = 1.0
    batch_size: int = 2
    stale_after: float = 5 * 60.0
    persist_interval: float = 5 * 60.0
    notice_duration: float = 5.0
    request_timeout: float = 10.0
    api_url: str = MyMemoryTranslator.DEFAULT_API_URL
    cache_path: Path | None = None

    # Environment variable names for each field
    ENV_VARS: ClassVar[dict[str, str]] = {
        "default_language": "SDG_DEFAULT_LANGUAGE",
        "max_retries": "SDG_MAX_RETRIES",
        "retry_delay": "SDG_RETRY_DELAY",
        "cache_duration": "SDG_CACHE_DURATION",
        "request_delay": "SDG_REQUEST_DELAY",
        "batch_size": "SDG_BATCH_SIZE",
        "stale_after": "SDG_STALE_AFTER",
        "persist_interval": "SDG_PERSIST_INTERVAL",
        "notice_duration": "SDG_NOTICE_DURATION",
        "request_timeout": "SDG_REQUEST_TIMEOUT",
        "api_url": "SDG_TRANSLATE_URL",
        "cache_path": "SDG_CACHE_FILE",
    }

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ConfigurationError("max_retries must be >= 0")
        if self.batch_size < 1:
            raise ConfigurationError("batch_size must be >= 1")
        for name in (
            "retry_delay",
            "cache_duration",
            "request_delay",
            "stale_after",
            "persist_interval",
            "notice_duration",
        ):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"{name} must be >= 0")
        if self.request_timeout <= 0:
            raise ConfigurationError("request_timeout must be > 0")

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> TranslationConfig:
        """Build a configuration from environment variables.

        Args:
            environ: Mapping to read from (default: os.environ).
            **overrides: Explicit values taking priority over the environment.

        Returns:
            Translation configuration.

        Raises:
            ConfigurationError: If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}

        for f in fields(cls):
            var = cls.ENV_VARS.get(f.name)
            raw = env.get(var) if var else None
            if raw is None or raw.strip() == "":
                continue
            values[f.name] = _convert(f.name, raw.strip(), getattr(cls, f.name))

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


def _convert(name: str, raw: str, default: Any) -> Any:
    """Convert a raw environment string to the type of the field default."""
    if name == "cache_path":
        return Path(raw).expanduser()
    try:
        if isinstance(default, int):
            return int(raw)
        if isinstance(default, float):
            return float(raw)
    except ValueError:
        raise ConfigurationError(f"Invalid value for {name}: {raw!r}") from None
    return raw
