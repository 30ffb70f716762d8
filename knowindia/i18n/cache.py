"""Cache keys for translations."""

from __future__ import annotations

import hashlib


def make_cache_key(text: str, source: str, target: str) -> str:
    """Create cache key from the language pair and a content hash."""
    digest = hashlib.sha256(text.encode("utf-8")).hexdigest()[:16]
    return f"{source}:{target}:{digest}"
