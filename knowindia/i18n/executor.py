"""
Calls the Hugging Face Inference API for a single translation.

Models behind the API load on demand, so the first call after idle often
answers 503 with an ``estimated_time``. We wait for exactly that estimate
before trying again (one sleep per retry) instead of a fixed schedule.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable

import httpx
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    RetryError,
    retry_if_exception_type,
    stop_after_attempt,
)

from knowindia.config import Settings
from knowindia.i18n.errors import (
    Misconfigured,
    ModelLoading,
    ModelUnavailable,
    UnexpectedResponseShape,
    UpstreamError,
)
from knowindia.i18n.languages import MBART, LanguageRegistry, get_language_registry
from knowindia.i18n.routing import ModelRoute, ModelRouter

logger = logging.getLogger(__name__)


# =============================================================================
# Response shapes
# =============================================================================
#
# Tried in order; the first matcher that returns a string wins.


def _match_string(data: Any) -> str | None:
    return data if isinstance(data, str) else None


def _match_list_field(field: str) -> Callable[[Any], str | None]:
    def matcher(data: Any) -> str | None:
        if isinstance(data, list) and data and isinstance(data[0], dict):
            value = data[0].get(field)
            if isinstance(value, str):
                return value
        return None
    return matcher


def _match_object_field(field: str) -> Callable[[Any], str | None]:
    def matcher(data: Any) -> str | None:
        if isinstance(data, dict):
            value = data.get(field)
            if isinstance(value, str):
                return value
        return None
    return matcher


RESPONSE_SHAPES: tuple[Callable[[Any], str | None], ...] = (
    _match_string,
    _match_list_field("translation_text"),
    _match_list_field("generated_text"),
    _match_object_field("translation_text"),
    _match_object_field("generated_text"),
)


def extract_translation(data: Any) -> str:
    """Pull the translated text out of any known response shape."""
    for matcher in RESPONSE_SHAPES:
        text = matcher(data)
        if text is not None:
            return text
    raise UnexpectedResponseShape(
        f"Unexpected response format from translation API: {str(data)[:200]}"
    )


def _json_or_empty(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return {}


# =============================================================================
# Executor
# =============================================================================


class TranslationExecutor:
    """
    Performs the upstream call with cold-start retries.

    Usage:
        executor = TranslationExecutor(settings, router)
        text = await executor.execute("India is beautiful", "en", "hi")
    """

    def __init__(
        self,
        settings: Settings,
        router: ModelRouter,
        registry: LanguageRegistry | None = None,
        client: httpx.AsyncClient | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.settings = settings
        self.router = router
        self.registry = registry or get_language_registry()
        self._client = client
        self._sleep = sleep

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.settings.translation_request_timeout,
            )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def check_configuration(self) -> None:
        """Raise Misconfigured unless we can talk to the upstream API."""
        if not self.settings.has_hf_credentials:
            raise Misconfigured("HF_API_KEY environment variable is not configured")
        if not self.settings.hf_api_base.startswith(("http://", "https://")):
            raise Misconfigured(f"Invalid HF_API_BASE: {self.settings.hf_api_base!r}")
        if not self.settings.hf_default_model.strip():
            raise Misconfigured("HF_DEFAULT_MODEL is empty")

    def build_payload(self, text: str, source: str, target: str, route: ModelRoute) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "inputs": text,
            "options": {"wait_for_model": True},
        }
        if route.needs_language_params:
            payload["parameters"] = {
                "src_lang": self.registry.model_code(source, MBART) or "en_XX",
                "tgt_lang": self.registry.model_code(target, MBART),
            }
        return payload

    async def execute(
        self,
        text: str,
        source: str,
        target: str,
        max_retries: int | None = None,
    ) -> str:
        """
        Translate text via the routed model.

        Args:
            text: Text to translate (already trimmed and validated)
            source: Source language code
            target: Target language code
            max_retries: Retries allowed while the model loads

        Returns:
            Translated text, whitespace-trimmed

        Raises:
            Misconfigured, ModelUnavailable, UpstreamError, UnexpectedResponseShape
        """
        self.check_configuration()

        if max_retries is None:
            max_retries = self.settings.translation_max_retries

        route = self.router.route_for(target)
        if not route.model_id.strip():
            raise Misconfigured(f"No model configured for target language {target!r}")
        payload = self.build_payload(text, source, target, route)

        retrying = AsyncRetrying(
            retry=retry_if_exception_type(ModelLoading),
            stop=stop_after_attempt(max_retries + 1),
            wait=self._wait_for_model,
            sleep=self._sleep,
            before_sleep=self._log_retry,
        )

        translated = ""
        try:
            async for attempt in retrying:
                with attempt:
                    logger.info(
                        f"Calling HF API: {route.url} "
                        f"(attempt {attempt.retry_state.attempt_number}/{max_retries + 1})"
                    )
                    translated = await self._call(route, payload)
        except RetryError as e:
            raise ModelUnavailable(route.model_id, e.last_attempt.attempt_number) from e

        return translated.strip()

    async def _call(self, route: ModelRoute, payload: dict[str, Any]) -> str:
        """One POST to the model endpoint."""
        try:
            response = await self.client.post(
                route.url,
                json=payload,
                headers={
                    "Authorization": f"Bearer {self.settings.hf_api_key}",
                    "Content-Type": "application/json",
                },
            )
        except httpx.TimeoutException as e:
            raise UpstreamError(None, f"Request to {route.model_id} timed out") from e
        except httpx.HTTPError as e:
            raise UpstreamError(None, f"Translation API request failed: {e}") from e

        if response.status_code == 503:
            data = _json_or_empty(response)
            estimated = data.get("estimated_time") if isinstance(data, dict) else None
            if not isinstance(estimated, (int, float)) or estimated < 0:
                estimated = self.settings.translation_default_wait
            raise ModelLoading(float(estimated))

        if not response.is_success:
            data = _json_or_empty(response)
            message = data.get("error", "") if isinstance(data, dict) else ""
            raise UpstreamError(response.status_code, str(message) or "Unknown error")

        try:
            data = response.json()
        except ValueError as e:
            raise UnexpectedResponseShape("Translation API returned non-JSON body") from e

        try:
            return extract_translation(data)
        except UnexpectedResponseShape:
            logger.error(f"Unexpected response format: {str(data)[:200]}")
            raise

    def _wait_for_model(self, retry_state: RetryCallState) -> float:
        """Wait as long as the upstream says the model needs, within limits."""
        exc = retry_state.outcome.exception() if retry_state.outcome else None
        if isinstance(exc, ModelLoading):
            wait = exc.estimated_time
        else:
            wait = self.settings.translation_default_wait
        return min(wait, self.settings.translation_max_wait)

    def _log_retry(self, retry_state: RetryCallState) -> None:
        wait = retry_state.next_action.sleep if retry_state.next_action else 0
        logger.info(f"Model loading, waiting {wait:.1f}s before retrying")
