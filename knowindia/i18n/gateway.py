"""
Translation gateway.

The single entry point for translation: validates requests, serves from
the cache when it can, and otherwise routes to the upstream model through
the executor, writing results back to the cache.
"""

from __future__ import annotations

import logging
from typing import Any

from knowindia.config import Settings, get_settings
from knowindia.i18n.batch import BatchCoordinator, ItemResult
from knowindia.i18n.cache import make_cache_key
from knowindia.i18n.errors import (
    BatchTooLarge,
    InputTooLarge,
    Misconfigured,
    TranslationError,
    UnsupportedLanguage,
)
from knowindia.i18n.executor import TranslationExecutor
from knowindia.i18n.languages import (
    LanguageRegistry,
    get_language_registry,
    normalize_language_code,
)
from knowindia.i18n.models import BatchTranslationResult, TranslationResult
from knowindia.i18n.routing import ModelRouter
from knowindia.storage import InMemoryTranslationCache, TranslationCacheStore

logger = logging.getLogger(__name__)


class TranslationGateway:
    """
    Main translation service.

    Usage:
        gateway = TranslationGateway()

        # Single translation
        result = await gateway.translate("India is beautiful", target="hi")
        result.translated_text, result.cached

        # Batch (failed items keep their original text)
        batch = await gateway.translate_batch(["Delhi", "Agra"], target="ta")
    """

    def __init__(
        self,
        settings: Settings | None = None,
        registry: LanguageRegistry | None = None,
        cache: TranslationCacheStore | None = None,
        router: ModelRouter | None = None,
        executor: TranslationExecutor | None = None,
    ):
        self.settings = settings or get_settings()
        self.registry = registry or get_language_registry()
        self.cache = cache or InMemoryTranslationCache(
            max_size=self.settings.translation_cache_max_size,
            ttl=self.settings.translation_cache_ttl_seconds,
        )
        self.router = router or ModelRouter(
            api_base=self.settings.hf_api_base,
            default_model=self.settings.hf_default_model,
            registry=self.registry,
        )
        self.executor = executor or TranslationExecutor(
            self.settings, self.router, registry=self.registry,
        )
        self.batch = BatchCoordinator(
            self._translate_item,
            concurrency=self.settings.translation_batch_concurrency,
        )

    # =========================================================================
    # Validation
    # =========================================================================

    def _validate_languages(self, source: str, target: str) -> None:
        if not self.registry.is_supported(target):
            raise UnsupportedLanguage(target, role="target")
        if not self.registry.is_supported(source):
            raise UnsupportedLanguage(source, role="source")
        if not self.router.can_serve(source, target):
            raise UnsupportedLanguage(target, role="target")

    def _validate_length(self, text: str, index: int | None = None) -> None:
        limit = self.settings.translation_max_text_length
        if len(text) > limit:
            raise InputTooLarge(len(text), limit, index=index)

    # =========================================================================
    # Pipeline
    # =========================================================================

    async def _translate_item(self, text: str, source: str, target: str) -> ItemResult:
        """Cache check, upstream call on miss, write-through. Errors propagate."""
        trimmed = text.strip()
        if not trimmed:
            return ItemResult(translated_text="")

        key = make_cache_key(trimmed, source, target)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug(f"Cache hit for {source} -> {target}")
            return ItemResult(translated_text=cached, cached=True)

        logger.info(f"Translating: {source} -> {target}")
        translated = await self.executor.execute(trimmed, source, target)
        self.cache.put(key, translated)
        return ItemResult(translated_text=translated)

    # =========================================================================
    # Public API
    # =========================================================================

    async def translate(
        self,
        text: str,
        target: str,
        source: str = "en",
    ) -> TranslationResult:
        """
        Translate text to target language.

        Args:
            text: Text to translate
            target: Target language code
            source: Source language code

        Returns:
            TranslationResult; on upstream failure the original text with
            ``fallback=True``

        Raises:
            ValidationError: unsupported language or oversized input
            Misconfigured: no usable upstream credentials
        """
        source = normalize_language_code(source)
        target = normalize_language_code(target)
        trimmed = (text or "").strip()

        if not trimmed:
            return TranslationResult(
                translated_text="", source_lang=source, target_lang=target,
            )

        # Same language? Return as-is
        if source == target:
            return TranslationResult(
                translated_text=trimmed, source_lang=source, target_lang=target,
            )

        self._validate_languages(source, target)
        self._validate_length(trimmed)

        try:
            item = await self._translate_item(trimmed, source, target)
        except Misconfigured:
            raise
        except TranslationError as e:
            logger.warning(f"Translation failed, returning original text: {e}")
            return TranslationResult(
                translated_text=trimmed,
                source_lang=source,
                target_lang=target,
                fallback=True,
                error=e.code,
            )

        return TranslationResult(
            translated_text=item.translated_text,
            cached=item.cached,
            source_lang=source,
            target_lang=target,
        )

    async def translate_batch(
        self,
        texts: list[str],
        target: str,
        source: str = "en",
        deadline: float | None = None,
    ) -> BatchTranslationResult:
        """
        Translate multiple texts.

        Output has the same length and order as ``texts``. Items that fail
        upstream, or are still unfinished when ``deadline`` seconds pass
        (defaults to the configured batch deadline), keep their original text.
        """
        source = normalize_language_code(source)
        target = normalize_language_code(target)

        if not texts:
            return BatchTranslationResult(
                translations=[], source_lang=source, target_lang=target,
            )

        limit = self.settings.translation_max_batch_size
        if len(texts) > limit:
            raise BatchTooLarge(len(texts), limit)

        items = [text or "" for text in texts]

        if source == target:
            return BatchTranslationResult(
                translations=items, source_lang=source, target_lang=target,
            )

        self._validate_languages(source, target)
        for index, text in enumerate(items):
            self._validate_length(text.strip(), index=index)

        if deadline is None:
            deadline = self.settings.translation_batch_deadline

        outcome = await self.batch.execute_batch(items, source, target, deadline=deadline)

        return BatchTranslationResult(
            translations=outcome.translations,
            cached_count=outcome.cached_count,
            failed_count=outcome.failed_count,
            source_lang=source,
            target_lang=target,
        )

    def supported_languages(self) -> list[dict[str, Any]]:
        return self.registry.all_languages()

    def cache_stats(self) -> dict[str, Any]:
        return self.cache.stats()

    def clear_cache(self) -> None:
        self.cache.clear()

    async def aclose(self) -> None:
        """Release the upstream HTTP client."""
        await self.executor.aclose()


# =============================================================================
# Module-level instance
# =============================================================================


_gateway: TranslationGateway | None = None


def get_gateway() -> TranslationGateway:
    """Get or create the global gateway instance."""
    global _gateway
    if _gateway is None:
        _gateway = TranslationGateway()
    return _gateway


def reset_gateway() -> None:
    """Drop the global gateway (tests, settings reload)."""
    global _gateway
    _gateway = None
