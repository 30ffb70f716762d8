"""
Tests for the translation cache.

Capacity is enforced on insert (oldest-inserted entry goes first) and
expiry is lazy (stale entries vanish when read).
"""

import threading

import pytest

from conftest import FakeClock
from knowindia.i18n.cache import make_cache_key
from knowindia.storage import InMemoryTranslationCache


TTL = 60.0


@pytest.fixture
def cache(clock):
    return InMemoryTranslationCache(max_size=3, ttl=TTL, clock=clock)


# =============================================================================
# Cache keys
# =============================================================================


class TestCacheKey:
    def test_deterministic(self):
        assert make_cache_key("Namaste", "en", "hi") == make_cache_key("Namaste", "en", "hi")

    def test_depends_on_every_part(self):
        base = make_cache_key("Namaste", "en", "hi")

        assert make_cache_key("Namaste!", "en", "hi") != base
        assert make_cache_key("Namaste", "ta", "hi") != base
        assert make_cache_key("Namaste", "en", "ta") != base

    def test_language_pair_is_readable(self):
        assert make_cache_key("Goa", "en", "mr").startswith("en:mr:")


# =============================================================================
# Basic operations
# =============================================================================


class TestGetPut:
    def test_miss(self, cache):
        assert cache.get("k") is None

    def test_put_then_get(self, cache):
        cache.put("k", "value")
        assert cache.get("k") == "value"

    def test_overwrite_replaces_value(self, cache):
        cache.put("k", "old")
        cache.put("k", "new")

        assert cache.get("k") == "new"
        assert len(cache) == 1

    def test_empty_translation_is_a_hit(self, cache):
        cache.put("k", "")
        assert cache.get("k") == ""

    def test_stats_and_clear(self, cache):
        cache.put("a", "1")
        cache.put("b", "2")

        assert cache.stats() == {"size": 2, "maxSize": 3, "ttlHours": TTL / 3600}

        cache.clear()
        assert cache.stats()["size"] == 0
        assert cache.get("a") is None

    def test_rejects_zero_capacity(self):
        with pytest.raises(ValueError):
            InMemoryTranslationCache(max_size=0)


# =============================================================================
# Capacity
# =============================================================================


class TestEviction:
    def test_size_never_exceeds_capacity(self, cache):
        for i in range(10):
            cache.put(f"k{i}", str(i))
            assert len(cache) <= 3

    def test_oldest_inserted_is_evicted(self, cache):
        cache.put("first", "1")
        cache.put("second", "2")
        cache.put("third", "3")
        cache.put("fourth", "4")

        assert len(cache) == 3
        assert cache.get("first") is None
        assert cache.get("second") == "2"
        assert cache.get("fourth") == "4"

    def test_reads_do_not_protect_from_eviction(self, cache):
        cache.put("first", "1")
        cache.put("second", "2")
        cache.put("third", "3")

        # Recently read, still the oldest insertion
        assert cache.get("first") == "1"
        cache.put("fourth", "4")

        assert cache.get("first") is None
        assert cache.get("second") == "2"

    def test_overwrite_at_capacity_does_not_evict(self, cache):
        cache.put("a", "1")
        cache.put("b", "2")
        cache.put("c", "3")
        cache.put("a", "1b")

        assert len(cache) == 3
        assert cache.get("b") == "2"
        assert cache.get("a") == "1b"

    def test_overwrite_counts_as_new_insertion(self, cache):
        cache.put("a", "1")
        cache.put("b", "2")
        cache.put("c", "3")
        cache.put("a", "1b")
        cache.put("d", "4")

        assert cache.get("b") is None
        assert cache.get("a") == "1b"

    def test_concurrent_puts_respect_capacity(self):
        cache = InMemoryTranslationCache(max_size=50, ttl=TTL)

        def writer(prefix: str):
            for i in range(200):
                cache.put(f"{prefix}-{i}", "x")

        threads = [threading.Thread(target=writer, args=(str(n),)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(cache) == 50


# =============================================================================
# Expiry
# =============================================================================


class TestExpiry:
    def test_hit_before_ttl(self, cache, clock: FakeClock):
        cache.put("k", "value")
        clock.advance(TTL - 0.001)

        assert cache.get("k") == "value"

    def test_miss_at_ttl(self, cache, clock: FakeClock):
        cache.put("k", "value")
        clock.advance(TTL)

        assert cache.get("k") is None

    def test_stale_entry_is_purged_on_read(self, cache, clock: FakeClock):
        cache.put("k", "value")
        clock.advance(TTL + 1)

        assert len(cache) == 1  # no background sweep
        cache.get("k")
        assert len(cache) == 0

    def test_overwrite_resets_age(self, cache, clock: FakeClock):
        cache.put("k", "old")
        clock.advance(TTL - 1)
        cache.put("k", "new")
        clock.advance(TTL - 1)

        assert cache.get("k") == "new"
