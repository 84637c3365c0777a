"""Tests for fact caches."""

import pytest

from bitewise.domain.nutrition import NutritionFact
from bitewise.services.cache import InMemoryFactCache, LruFactCache


def _fact(key: str) -> NutritionFact:
    return NutritionFact(
        food_key=key,
        description=key.title(),
        protein=1,
        fat=2,
        carbs=3,
        calories=4,
    )


def test_in_memory_cache_normalizes_keys() -> None:
    cache = InMemoryFactCache()
    fact = _fact("oats")

    cache.put(" Oats ", fact)

    assert cache.get("oats") is fact
    assert cache.get("OATS") is fact
    assert cache.get("dal") is None
    assert len(cache) == 1


def test_in_memory_cache_last_write_wins() -> None:
    cache = InMemoryFactCache()
    first = _fact("egg")
    second = _fact("egg")

    cache.put("egg", first)
    cache.put("egg", second)

    assert cache.get("egg") is second
    assert len(cache) == 1


def test_lru_cache_evicts_least_recently_used() -> None:
    cache = LruFactCache(max_entries=2)
    cache.put("oats", _fact("oats"))
    cache.put("dal", _fact("dal"))

    assert cache.get("oats") is not None
    cache.put("egg", _fact("egg"))

    assert cache.get("dal") is None
    assert cache.get("oats") is not None
    assert cache.get("egg") is not None
    assert len(cache) == 2


def test_lru_cache_rejects_non_positive_capacity() -> None:
    with pytest.raises(ValueError):
        LruFactCache(max_entries=0)
