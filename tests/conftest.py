"""
Shared fixtures for translation gateway tests.

The upstream API is replaced by httpx.MockTransport; time and sleeping are
injected so TTL and retry waits are tested without waiting.
"""

from __future__ import annotations

import json
from typing import Callable

import httpx
import pytest

from knowindia.config import Settings
from knowindia.i18n.executor import TranslationExecutor
from knowindia.i18n.gateway import TranslationGateway
from knowindia.i18n.routing import ModelRouter
from knowindia.storage import InMemoryTranslationCache


# =============================================================================
# Fakes
# =============================================================================


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingSleep:
    """Async sleep replacement that records requested waits."""

    def __init__(self):
        self.waits: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.waits.append(seconds)


def translated(text: str) -> str:
    """What the fake upstream turns ``text`` into."""
    return f"[hi] {text}"


class FakeUpstream:
    """
    Stands in for the Hugging Face Inference API.

    By default answers every request with a ``translation_text`` list.
    Pass ``responses`` to script replies in order (the last one repeats).
    """

    def __init__(self, responses: list[httpx.Response | Callable] | None = None):
        self.requests: list[httpx.Request] = []
        self._responses = list(responses or [])

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._responses:
            reply = self._responses.pop(0) if len(self._responses) > 1 else self._responses[0]
            return reply(request) if callable(reply) else reply
        return httpx.Response(200, json=[{"translation_text": translated(self.body(request)["inputs"])}])

    @staticmethod
    def body(request: httpx.Request) -> dict:
        return json.loads(request.content)

    @property
    def calls(self) -> int:
        return len(self.requests)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def settings():
    """Settings with credentials and small limits."""
    return Settings(
        _env_file=None,
        hf_api_key="hf_test_key",
        hf_api_base="https://hf.test/models",
        translation_max_retries=3,
        translation_default_wait=20.0,
        translation_max_wait=60.0,
        translation_cache_max_size=100,
        translation_cache_ttl_hours=24.0,
        translation_max_text_length=50,
        translation_max_batch_size=5,
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sleep():
    return RecordingSleep()


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def router(settings):
    return ModelRouter(api_base=settings.hf_api_base, default_model=settings.hf_default_model)


@pytest.fixture
def make_gateway(settings, clock, sleep, router):
    """Build a gateway around a given fake upstream."""

    def factory(upstream: FakeUpstream, **overrides) -> TranslationGateway:
        gw_settings = settings.model_copy(update=overrides) if overrides else settings
        executor = TranslationExecutor(
            gw_settings, router, client=upstream.client(), sleep=sleep,
        )
        cache = InMemoryTranslationCache(
            max_size=gw_settings.translation_cache_max_size,
            ttl=gw_settings.translation_cache_ttl_seconds,
            clock=clock,
        )
        return TranslationGateway(
            settings=gw_settings, cache=cache, router=router, executor=executor,
        )

    return factory


@pytest.fixture
def gateway(make_gateway, upstream):
    return make_gateway(upstream)
