"""
Internationalization - translation gateway in front of the Hugging Face
Inference API.

Design:
1. Validate the language pair and input size up front
2. Cache translations by content hash (bounded, time-expiring)
3. Route each target language to a dedicated or multilingual model
4. Wait out model cold starts using the server's own estimate
5. Fall back to the original text instead of failing the request

Usage:
    from knowindia.i18n import get_gateway

    gateway = get_gateway()
    result = await gateway.translate("India is beautiful", target="hi")
    batch = await gateway.translate_batch(["Taj Mahal", "Red Fort"], target="ta")
"""

from knowindia.i18n.errors import (
    GatewayError,
    ValidationError,
    UnsupportedLanguage,
    InputTooLarge,
    BatchTooLarge,
    TranslationError,
    Misconfigured,
    ModelUnavailable,
    UpstreamError,
    UnexpectedResponseShape,
)
from knowindia.i18n.gateway import (
    TranslationGateway,
    get_gateway,
    reset_gateway,
)
from knowindia.i18n.languages import (
    Language,
    LanguageRegistry,
    get_language_registry,
    get_language_name,
    is_supported,
)
from knowindia.i18n.models import BatchTranslationResult, TranslationResult
from knowindia.i18n.warmup import load_warmup_texts, warm_translation_cache

__all__ = [
    # Gateway
    "TranslationGateway",
    "get_gateway",
    "reset_gateway",
    "TranslationResult",
    "BatchTranslationResult",
    # Cache warming
    "warm_translation_cache",
    "load_warmup_texts",
    # Language utilities
    "Language",
    "LanguageRegistry",
    "get_language_registry",
    "get_language_name",
    "is_supported",
    # Errors
    "GatewayError",
    "ValidationError",
    "UnsupportedLanguage",
    "InputTooLarge",
    "BatchTooLarge",
    "TranslationError",
    "Misconfigured",
    "ModelUnavailable",
    "UpstreamError",
    "UnexpectedResponseShape",
]
