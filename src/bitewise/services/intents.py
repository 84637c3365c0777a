"""Keyword-based question intent detection."""

import re

from bitewise.domain.answers import Intent

_DIET_PLAN_PATTERN = re.compile(
    r"(diet plan|meal plan|weekly diet|week diet|what should i eat"
    r"|plan my meals|plan my diet)",
    re.IGNORECASE,
)
_FOOD_FACT_PATTERN = re.compile(
    r"(how much|what is|amount of|content of|contains|grams of|protein|carb|fat"
    r"|calorie|energy|fiber|sugar|vitamin|mineral|nutrition)",
    re.IGNORECASE,
)
_FOOD_NAME_PATTERN = re.compile(r"\bin\s+(?:(?:a|an|the)\s+)?([a-z ]+)", re.IGNORECASE)


def classify(question: str) -> Intent:
    """Return the intent of a question; diet plans win over food facts."""
    if _DIET_PLAN_PATTERN.search(question):
        return Intent.DIET_PLAN
    if _FOOD_FACT_PATTERN.search(question):
        return Intent.FOOD_FACT
    return Intent.GENERIC


def extract_food_name(question: str) -> str:
    """Return the words after "in [a|an|the]", or the whole question.

    The fallback often makes a poor FDC query; such lookups simply miss.
    """
    match = _FOOD_NAME_PATTERN.search(question)
    if match:
        food = match.group(1).strip()
        if food:
            return food
    return question
