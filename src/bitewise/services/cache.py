"""Fact cache abstractions."""

from collections import OrderedDict
from dataclasses import dataclass
from typing import Protocol

from bitewise.domain.nutrition import NutritionFact, normalize_food_key


class FactCache(Protocol):
    """Cache interface keyed by normalized food name."""

    def get(self, key: str) -> NutritionFact | None:
        """Return the cached fact for a food, if any."""

    def put(self, key: str, fact: NutritionFact) -> None:
        """Store a fact for a food."""


@dataclass
class InMemoryFactCache(FactCache):
    """Process-lifetime cache with no eviction.

    Single dict operations are atomic under the event loop, so concurrent
    fetches of different foods interleave safely. Two fetches of the same
    uncached food may both write; the last write wins.
    """

    _entries: dict[str, NutritionFact]

    def __init__(self) -> None:
        self._entries = {}

    def get(self, key: str) -> NutritionFact | None:
        """Return a cached fact."""
        return self._entries.get(normalize_food_key(key))

    def put(self, key: str, fact: NutritionFact) -> None:
        """Store a fact."""
        self._entries[normalize_food_key(key)] = fact

    def __len__(self) -> int:
        return len(self._entries)


@dataclass
class LruFactCache(FactCache):
    """Bounded cache evicting the least recently used food."""

    max_entries: int
    _entries: "OrderedDict[str, NutritionFact]"

    def __init__(self, max_entries: int) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be positive")
        self.max_entries = max_entries
        self._entries = OrderedDict()

    def get(self, key: str) -> NutritionFact | None:
        """Return a cached fact and mark it as recently used."""
        normalized = normalize_food_key(key)
        fact = self._entries.get(normalized)
        if fact is not None:
            self._entries.move_to_end(normalized)
        return fact

    def put(self, key: str, fact: NutritionFact) -> None:
        """Store a fact, evicting the oldest entry when full."""
        normalized = normalize_food_key(key)
        self._entries[normalized] = fact
        self._entries.move_to_end(normalized)
        while len(self._entries) > self.max_entries:
            self._entries.popitem(last=False)

    def __len__(self) -> int:
        return len(self._entries)
