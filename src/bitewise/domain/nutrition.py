"""Nutrition domain models."""

from dataclasses import dataclass
from typing import Final

UNKNOWN: Final = "unknown"

Measure = float | int | str

STAPLE_FOODS: tuple[str, ...] = (
    "oats",
    "dal",
    "roti",
    "brown rice",
    "chana",
    "paneer",
    "egg",
    "vegetable curry",
    "chicken curry",
    "idli",
    "sambar",
    "poha",
    "upma",
    "aloo gobi",
    "khichdi",
    "tofu",
    "rajma",
    "palak paneer",
    "besan cheela",
    "missi roti",
)


def normalize_food_key(food: str) -> str:
    """Return the cache identity for a food name."""
    return food.strip().lower()


@dataclass(frozen=True)
class NutritionFact:
    """Macronutrients for one food per 100g reference serving.

    A measure is either the provider's numeric value or ``UNKNOWN`` when the
    nutrient is missing from the matched candidate.
    """

    food_key: str
    description: str
    protein: Measure
    fat: Measure
    carbs: Measure
    calories: Measure


def is_known(value: Measure) -> bool:
    """Return true when a measure carries a provider value."""
    return value != UNKNOWN
