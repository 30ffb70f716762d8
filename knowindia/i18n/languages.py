"""
Supported languages and utilities.

Covers English plus the Indian languages served by the translation models.
Each language carries its IndicTrans2 code and, where the multilingual
mBART-50 model knows it, its mBART code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Language:
    """A supported language and its model-specific codes."""

    code: str
    name: str
    native_name: str
    indic_code: str
    mbart_code: str | None = None


LANGUAGES: tuple[Language, ...] = (
    Language("en", "English", "English", "eng_Latn", "en_XX"),
    Language("hi", "Hindi", "हिन्दी", "hin_Deva", "hi_IN"),
    Language("ta", "Tamil", "தமிழ்", "tam_Taml", "ta_IN"),
    Language("te", "Telugu", "తెలుగు", "tel_Telu", "te_IN"),
    Language("bn", "Bengali", "বাংলা", "ben_Beng", "bn_IN"),
    Language("mr", "Marathi", "मराठी", "mar_Deva", "mr_IN"),
    Language("gu", "Gujarati", "ગુજરાતી", "guj_Gujr", "gu_IN"),
    Language("kn", "Kannada", "ಕನ್ನಡ", "kan_Knda", "kn_IN"),
    Language("ml", "Malayalam", "മലയാളം", "mal_Mlym", "ml_IN"),
    Language("pa", "Punjabi", "ਪੰਜਾਬੀ", "pan_Guru", "pa_IN"),
    Language("or", "Odia", "ଓଡ଼ିଆ", "ory_Orya", "or_IN"),
    Language("as", "Assamese", "অসমীয়া", "asm_Beng"),
    Language("ur", "Urdu", "اردو", "urd_Arab", "ur_PK"),
    Language("ne", "Nepali", "नेपाली", "nep_Deva", "ne_NP"),
    Language("sa", "Sanskrit", "संस्कृतम्", "san_Deva"),
)


# Model families with their own language code scheme
INDICTRANS2 = "indictrans2"
MBART = "mbart"


def normalize_language_code(code: str | None) -> str:
    """Normalize language code to standard form."""
    if not code or not isinstance(code, str):
        return ""
    return code.strip().lower()


class LanguageRegistry:
    """
    Read-only lookup over the language table.

    Every method is total: unknown codes get a safe default, never an error.
    """

    def __init__(self, languages: tuple[Language, ...] = LANGUAGES):
        self._languages: dict[str, Language] = {lang.code: lang for lang in languages}

    def get(self, code: str | None) -> Language | None:
        return self._languages.get(normalize_language_code(code))

    def is_supported(self, code: str | None) -> bool:
        return self.get(code) is not None

    def display_name(self, code: str | None) -> str:
        """Human-readable name, or the raw code if unknown."""
        lang = self.get(code)
        return lang.name if lang else (code or "")

    def native_name(self, code: str | None) -> str:
        lang = self.get(code)
        return lang.native_name if lang else (code or "")

    def model_code(self, code: str | None, family: str) -> str | None:
        """Language code as a given model family spells it."""
        lang = self.get(code)
        if lang is None:
            return None
        if family == INDICTRANS2:
            return lang.indic_code
        if family == MBART:
            return lang.mbart_code
        return None

    @property
    def codes(self) -> list[str]:
        return list(self._languages)

    def all_languages(self) -> list[dict[str, Any]]:
        """All languages in API shape."""
        return [
            {
                "code": lang.code,
                "name": lang.name,
                "nativeName": lang.native_name,
                "indicCode": lang.indic_code,
            }
            for lang in self._languages.values()
        ]


# =============================================================================
# Module-level registry
# =============================================================================


_registry = LanguageRegistry()


def get_language_registry() -> LanguageRegistry:
    """Get the process-wide language registry."""
    return _registry


def is_supported(code: str | None) -> bool:
    return _registry.is_supported(code)


def get_language_name(code: str | None) -> str:
    """Get human-readable language name."""
    return _registry.display_name(code)
