"""
Batch translation with per-item failure isolation.

A failed item keeps its original text; the batch as a whole only fails
when the gateway itself is misconfigured.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable

from knowindia.i18n.errors import Misconfigured, TranslationError

logger = logging.getLogger(__name__)


@dataclass
class ItemResult:
    """Outcome of translating one batch item."""

    translated_text: str
    cached: bool = False


@dataclass
class BatchOutcome:
    translations: list[str]
    cached_count: int = 0
    failed_count: int = 0


# (text, source, target) -> ItemResult
TranslateOne = Callable[[str, str, str], Awaitable[ItemResult]]


class BatchCoordinator:
    """
    Runs the single-item pipeline over a list of texts.

    Items are dispatched with bounded concurrency (sequential by default, to
    stay under upstream rate limits). Results are always assembled back in
    input order.
    """

    def __init__(self, translate_one: TranslateOne, concurrency: int = 1):
        self._translate_one = translate_one
        self.concurrency = max(1, concurrency)

    async def execute_batch(
        self,
        texts: list[str],
        source: str,
        target: str,
        deadline: float | None = None,
    ) -> BatchOutcome:
        """
        Translate every text, substituting the original on failure.

        Args:
            texts: Texts to translate
            source: Source language code
            target: Target language code
            deadline: Seconds after which unfinished items are abandoned

        Returns:
            BatchOutcome with translations in input order
        """
        if not texts:
            return BatchOutcome(translations=[])

        semaphore = asyncio.Semaphore(self.concurrency)

        async def run(text: str) -> ItemResult:
            async with semaphore:
                return await self._translate_one(text, source, target)

        tasks = [asyncio.ensure_future(run(text)) for text in texts]
        try:
            done, pending = await asyncio.wait(tasks, timeout=deadline)
        except asyncio.CancelledError:
            # asyncio.wait leaves its tasks running
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        for task in pending:
            task.cancel()
        if pending:
            logger.warning(
                f"Batch deadline of {deadline}s reached, "
                f"{len(pending)}/{len(texts)} items left untranslated"
            )
            await asyncio.gather(*pending, return_exceptions=True)

        errors = {task: task.exception() for task in done}
        for exc in errors.values():
            if isinstance(exc, Misconfigured):
                raise exc

        outcome = BatchOutcome(translations=[])
        for index, (text, task) in enumerate(zip(texts, tasks)):
            if task in pending:
                outcome.translations.append(text)
                outcome.failed_count += 1
                continue

            exc = errors[task]
            if isinstance(exc, TranslationError):
                logger.error(f"Batch translation error at index {index}: {exc}")
                outcome.translations.append(text)
                outcome.failed_count += 1
                continue
            if exc is not None:
                raise exc

            result = task.result()
            outcome.translations.append(result.translated_text)
            if result.cached:
                outcome.cached_count += 1

        return outcome
