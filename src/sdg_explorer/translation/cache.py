# SPDX-License-Identifier: Apache-2.0
"""Time-bounded translation cache with snapshot persistence."""

from __future__ import annotations

import json
import logging
import os
import tempfile
import time
from collections.abc import Callable
from pathlib import Path
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

SNAPSHOT_KEY = "translationCache"


@runtime_checkable
class KeyValueStorage(Protocol):
    """String key/value store holding the persisted cache snapshot."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...


class MemoryStorage:
    """In-process storage; nothing survives a restart."""

    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value


class JsonFileStorage:
    """Storage backed by a single JSON object file on disk.

    Every value is a string. Writes replace the file atomically so a crash
    mid-write never leaves a truncated file behind.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        with self._path.open(encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Storage file is not a JSON object: {self._path}")
        return data

    def get_item(self, key: str) -> str | None:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        try:
            items = self._read_all()
        except ValueError:
            logger.warning("Overwriting unreadable storage file %s", self._path)
            items = {}
        items[key] = value

        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(items, f, ensure_ascii=False)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise


class TranslationCache:
    """Translation cache keyed by (text, target language).

    The whole cache is persisted as one snapshot carrying a single timestamp.
    A snapshot older than ``cache_duration`` is discarded as a whole on load.
    """

    def __init__(
        self,
        storage: KeyValueStorage | None = None,
        cache_duration: float = 24 * 60 * 60.0,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize TranslationCache.

        Args:
            storage: Snapshot storage (default: in-memory).
            cache_duration: Maximum snapshot age in seconds.
            clock: Wall-clock source returning epoch seconds.
        """
        self._storage = storage if storage is not None else MemoryStorage()
        self._cache_duration = cache_duration
        self._clock = clock
        self._entries: dict[str, str] = {}

    @staticmethod
    def make_key(text: str, target_lang: str) -> str:
        """Build the composite cache key used in snapshots."""
        return f"{text}_{target_lang}"

    def get(self, text: str, target_lang: str) -> str | None:
        return self._entries.get(self.make_key(text, target_lang))

    def put(self, text: str, target_lang: str, translation: str) -> None:
        self._entries[self.make_key(text, target_lang)] = translation

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, tuple) and len(key) == 2:
            return self.make_key(*key) in self._entries
        return key in self._entries

    def load_snapshot(self) -> None:
        """Merge the persisted snapshot into memory if it has not expired.

        Failures are logged and ignored.
        """
        try:
            raw = self._storage.get_item(SNAPSHOT_KEY)
            if raw is None:
                return

            snapshot = json.loads(raw)
            translations = snapshot["translations"]
            timestamp = float(snapshot["timestamp"])
            if not isinstance(translations, dict):
                raise ValueError("translations is not an object")
        except Exception as e:
            logger.warning("Failed to load translation cache: %s", e)
            return

        age = self._now_ms() - timestamp
        if age >= self._cache_duration * 1000:
            logger.debug("Discarding expired translation cache (age %.0f ms)", age)
            return

        loaded = {str(k): v for k, v in translations.items() if isinstance(v, str)}
        self._entries.update(loaded)
        logger.debug("Loaded %d translations from cache", len(loaded))

    def save_snapshot(self) -> None:
        """Persist all entries with the current time as the snapshot timestamp.

        Failures are logged and ignored.
        """
        snapshot = {
            "translations": dict(self._entries),
            "timestamp": self._now_ms(),
        }
        try:
            self._storage.set_item(SNAPSHOT_KEY, json.dumps(snapshot, ensure_ascii=False))
        except Exception as e:
            logger.warning("Failed to save translation cache: %s", e)

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)
