# =============================================================================
# Translation API Routes
# =============================================================================
#
# Endpoints:
#   POST /api/translate             - Translate single text
#   POST /api/translate/batch       - Translate multiple texts
#   GET  /api/translate/languages   - List supported languages
#   GET  /api/translate/stats       - Cache statistics
#   POST /api/translate/clear-cache - Empty the cache (admin)
#
# =============================================================================

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from knowindia.i18n import TranslationGateway, get_gateway

router = APIRouter(prefix="/api/translate", tags=["translate"])


def get_translation_gateway() -> TranslationGateway:
    return get_gateway()


# =============================================================================
# Request Models
# =============================================================================


class TranslateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str
    target_lang: str = Field(alias="targetLang")
    source_lang: str = Field(default="en", alias="sourceLang")


class TranslateBatchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    texts: list[str]
    target_lang: str = Field(alias="targetLang")
    source_lang: str = Field(default="en", alias="sourceLang")


# =============================================================================
# Routes
# =============================================================================


@router.post("")
async def translate(
    request: TranslateRequest,
    gateway: TranslationGateway = Depends(get_translation_gateway),
) -> dict[str, Any]:
    """Translate single text to target language."""
    result = await gateway.translate(
        request.text,
        target=request.target_lang,
        source=request.source_lang,
    )

    response: dict[str, Any] = {
        "translatedText": result.translated_text,
        "cached": result.cached,
        "sourceLang": result.source_lang,
        "targetLang": result.target_lang,
    }
    if result.fallback:
        # Original text, so the frontend can still render something
        response["fallback"] = True
        response["error"] = result.error
    return response


@router.post("/batch")
async def translate_batch(
    request: TranslateBatchRequest,
    gateway: TranslationGateway = Depends(get_translation_gateway),
) -> dict[str, Any]:
    """Translate multiple texts in batch."""
    result = await gateway.translate_batch(
        request.texts,
        target=request.target_lang,
        source=request.source_lang,
    )

    return {
        "translations": result.translations,
        "cachedCount": result.cached_count,
        "failedCount": result.failed_count,
        "sourceLang": result.source_lang,
        "targetLang": result.target_lang,
    }


@router.get("/languages")
async def list_languages(
    gateway: TranslationGateway = Depends(get_translation_gateway),
) -> dict[str, Any]:
    """List all supported languages for translation."""
    languages = gateway.supported_languages()
    return {"languages": languages, "count": len(languages)}


@router.get("/stats")
async def cache_stats(
    gateway: TranslationGateway = Depends(get_translation_gateway),
) -> dict[str, Any]:
    """Translation cache statistics (for monitoring)."""
    return {"cache": gateway.cache_stats()}


@router.post("/clear-cache")
async def clear_cache(
    gateway: TranslationGateway = Depends(get_translation_gateway),
) -> dict[str, str]:
    """Clear translation cache."""
    gateway.clear_cache()
    return {"message": "Cache cleared successfully"}
