"""
Cache warming for translations.

Pre-translates static site content (navigation, section titles, common
labels) to priority languages so first visitors don't pay for model cold
starts.

Run on application startup when TRANSLATION_WARMUP_FILE is set. The cache
is in-process, so warming only helps the process that does it.

Usage:
    texts = load_warmup_texts("config/warmup.yaml")
    stats = await warm_translation_cache(gateway, texts, ["hi", "ta"])
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from knowindia.i18n.errors import Misconfigured, ValidationError
from knowindia.i18n.gateway import TranslationGateway

logger = logging.getLogger(__name__)


# Common UI strings that should be pre-translated
UI_STRINGS = [
    # Navigation
    "Home",
    "Explore",
    "Places",
    "Festivals",
    "Itinerary",
    "Saved Places",
    "About Us",
    # Actions
    "Search",
    "Bookmark",
    "Share",
    "Read more",
    "Plan your trip",
    # Status
    "Loading...",
    "Something went wrong",
    "Please try again",
    "You are offline",
]


def load_warmup_texts(path: str | Path) -> list[str]:
    """
    Load texts to pre-translate from YAML.

    Accepts either a plain list of strings or a mapping with a ``texts`` list.
    """
    path = Path(path)
    with open(path) as f:
        data = yaml.safe_load(f)

    if isinstance(data, dict):
        data = data.get("texts", [])
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of texts")

    return [str(t) for t in data if t is not None and str(t).strip()]


async def warm_translation_cache(
    gateway: TranslationGateway,
    texts: list[str] | None = None,
    languages: list[str] | None = None,
    source: str = "en",
) -> dict[str, Any]:
    """
    Pre-warm translation cache for priority languages.

    Args:
        gateway: Gateway whose cache gets populated
        texts: Texts to translate (defaults to UI_STRINGS)
        languages: Target language codes
        source: Language the texts are written in

    Returns:
        Stats dict with counts
    """
    if texts is None:
        texts = UI_STRINGS
    if languages is None:
        languages = gateway.settings.warmup_languages_list

    # Deduplicate, keep order
    unique = list(dict.fromkeys(t.strip() for t in texts if t and t.strip()))

    stats = {
        "languages": 0,
        "texts": len(unique),
        "translations": 0,
        "cached": 0,
        "failed": 0,
    }
    batch_size = gateway.settings.translation_max_batch_size

    logger.info(f"Warming translation cache: {len(unique)} texts x {len(languages)} languages")

    for lang in languages:
        try:
            for i in range(0, len(unique), batch_size):
                result = await gateway.translate_batch(
                    unique[i:i + batch_size], target=lang, source=source,
                )
                stats["cached"] += result.cached_count
                stats["failed"] += result.failed_count
                stats["translations"] += (
                    len(result.translations) - result.cached_count - result.failed_count
                )
        except ValidationError as e:
            logger.warning(f"Skipping warm-up for {lang}: {e}")
            continue
        except Misconfigured as e:
            logger.error(f"Translation cache warm-up aborted: {e}")
            break

        stats["languages"] += 1
        logger.info(f"Warmed {gateway.registry.display_name(lang)} ({lang})")

    logger.info(
        f"Warm-up complete: {stats['translations']} new, "
        f"{stats['cached']} already cached, {stats['failed']} failed"
    )
    return stats
