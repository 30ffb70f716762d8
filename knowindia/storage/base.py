"""
Storage abstraction for translation results.

All cache access goes through this interface so the in-memory store can be
swapped for a shared one (Redis, etc.) without touching the gateway.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CacheEntry:
    """A cached translation. Replaced, never mutated."""

    translated_text: str
    inserted_at: float


class TranslationCacheStore(ABC):
    """
    Key-value store for translated text.

    Operations are synchronous: implementations must be in-memory or
    otherwise non-blocking, and safe under concurrent requests.
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Get a translation, or None if absent or expired."""
        pass

    @abstractmethod
    def put(self, key: str, translated_text: str) -> None:
        """Store a translation, evicting if necessary."""
        pass

    @abstractmethod
    def stats(self) -> dict[str, Any]:
        """Size information for monitoring."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every entry."""
        pass

    def __len__(self) -> int:
        return int(self.stats()["size"])
