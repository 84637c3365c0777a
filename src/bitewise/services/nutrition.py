"""Nutrition fact lookups against USDA FDC."""

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass

from bitewise.adapters.fdc_client import FdcClient
from bitewise.domain.nutrition import (
    UNKNOWN,
    Measure,
    NutritionFact,
    normalize_food_key,
)
from bitewise.services.cache import FactCache

_NUTRIENT_NAMES = {
    "protein": "Protein",
    "calories": "Energy",
    "fat": "Total lipid (fat)",
    "carbs": "Carbohydrate, by difference",
}

_logger = logging.getLogger(__name__)


@dataclass
class FactFetcher:
    """Resolve one food to a nutrition fact, memoized in the fact cache.

    Concurrent fetches of the same uncached food are not coalesced: each one
    calls FDC and writes an equivalent fact to the cache.
    """

    fdc_client: FdcClient
    cache: FactCache
    page_size: int = 25
    debug: bool = False

    async def fetch_fact(self, food: str) -> NutritionFact | None:
        """Return the fact for a food, or None when FDC has no match."""
        key = normalize_food_key(food)
        if not key:
            return None
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        try:
            payload = await self.fdc_client.search_foods(key, page_size=self.page_size)
            fact = _fact_from_search(key, payload)
        except Exception as exc:
            _logger.warning(
                "FDC search failed for %r (status=%s): %s",
                key,
                _status_code_from_exception(exc),
                exc,
            )
            return None

        if fact is None:
            if self.debug:
                _logger.info("FDC search: no description match for %r", key)
            return None
        self.cache.put(key, fact)
        if self.debug:
            _logger.info("FDC search: %r matched %r", key, fact.description)
        return fact


@dataclass
class FactAggregator:
    """Fan out fact fetches for a batch of foods."""

    fetcher: FactFetcher

    async def aggregate(self, foods: Iterable[str]) -> list[NutritionFact]:
        """Fetch unique foods concurrently and keep the resolved facts.

        Foods are deduplicated on first occurrence of their normalized name.
        Every fetch settles before results are collected; failures and
        misses are dropped.
        """
        unique_foods = list(dict.fromkeys(normalize_food_key(food) for food in foods))
        results = await asyncio.gather(
            *(self.fetcher.fetch_fact(food) for food in unique_foods),
            return_exceptions=True,
        )
        facts: list[NutritionFact] = []
        for food, result in zip(unique_foods, results, strict=True):
            if isinstance(result, BaseException):
                _logger.warning("Fact fetch failed for %r: %s", food, result)
                continue
            if result is not None:
                facts.append(result)
        return facts


def _fact_from_search(key: str, payload: dict[str, object]) -> NutritionFact | None:
    """Build a fact from the first candidate whose description names the food."""
    foods = payload.get("foods") or []
    if not isinstance(foods, list):
        raise ValueError("FDC search payload has no food list")
    for candidate in foods:
        if not isinstance(candidate, dict):
            continue
        description = candidate.get("description")
        if not isinstance(description, str) or key not in description.lower():
            continue
        nutrients = candidate.get("foodNutrients") or []
        return NutritionFact(
            food_key=key,
            description=description,
            protein=_nutrient_value(nutrients, _NUTRIENT_NAMES["protein"]),
            fat=_nutrient_value(nutrients, _NUTRIENT_NAMES["fat"]),
            carbs=_nutrient_value(nutrients, _NUTRIENT_NAMES["carbs"]),
            calories=_nutrient_value(nutrients, _NUTRIENT_NAMES["calories"]),
        )
    return None


def _nutrient_value(nutrients: list[dict[str, object]], name: str) -> Measure:
    """Return the value of a named nutrient, or UNKNOWN when absent."""
    for nutrient in nutrients:
        if not isinstance(nutrient, dict) or nutrient.get("nutrientName") != name:
            continue
        value = nutrient.get("value")
        if isinstance(value, int | float) and not isinstance(value, bool):
            return value
        return UNKNOWN
    return UNKNOWN


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
