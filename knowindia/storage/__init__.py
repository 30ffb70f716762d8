"""
Storage layer for translation results.

Currently in-memory only; the interface allows a shared cache later.
"""

from knowindia.storage.base import CacheEntry, TranslationCacheStore
from knowindia.storage.memory import InMemoryTranslationCache

__all__ = [
    "CacheEntry",
    "TranslationCacheStore",
    "InMemoryTranslationCache",
]
