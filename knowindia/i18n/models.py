"""Result models returned by the translation gateway."""

from __future__ import annotations

from pydantic import BaseModel


class TranslationResult(BaseModel):
    """Result of a single translation."""
    translated_text: str
    cached: bool = False
    source_lang: str
    target_lang: str
    fallback: bool = False  # True when translated_text is the original input
    error: str | None = None


class BatchTranslationResult(BaseModel):
    """Result of a batch translation, in input order."""
    translations: list[str]
    cached_count: int = 0
    failed_count: int = 0
    source_lang: str
    target_lang: str
