"""
In-memory translation cache.

Bounded by entry count and per-entry TTL. Expired entries are dropped when a
read observes them; there is no background sweep. When full, the entry that
was inserted first is evicted (insertion order, not least-recently-read).
"""

from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from typing import Any, Callable

from knowindia.storage.base import CacheEntry, TranslationCacheStore

logger = logging.getLogger(__name__)


class InMemoryTranslationCache(TranslationCacheStore):
    """Process-local cache, cleared on restart."""

    def __init__(
        self,
        max_size: int = 1000,
        ttl: float = 24 * 60 * 60,
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_size < 1:
            raise ValueError("max_size must be at least 1")
        self.max_size = max_size
        self.ttl = ttl
        self._clock = clock
        self._entries: OrderedDict[str, CacheEntry] = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None

            if self._clock() - entry.inserted_at >= self.ttl:
                del self._entries[key]
                logger.debug(f"Cache entry expired: {key}")
                return None

            return entry.translated_text

    def put(self, key: str, translated_text: str) -> None:
        with self._lock:
            if key in self._entries:
                # Overwrite counts as a fresh insertion
                del self._entries[key]
            elif len(self._entries) >= self.max_size:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug(f"Cache full, evicted {evicted}")

            self._entries[key] = CacheEntry(
                translated_text=translated_text,
                inserted_at=self._clock(),
            )

    def stats(self) -> dict[str, Any]:
        with self._lock:
            size = len(self._entries)
        return {
            "size": size,
            "maxSize": self.max_size,
            "ttlHours": self.ttl / (60 * 60),
        }

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
        logger.info("Translation cache cleared")

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None
