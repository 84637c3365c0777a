"""Question intent and answer models."""

from dataclasses import dataclass
from enum import StrEnum


class Intent(StrEnum):
    """Enrichment path selected for a question."""

    DIET_PLAN = "diet_plan"
    FOOD_FACT = "food_fact"
    GENERIC = "generic"


@dataclass(frozen=True)
class ComposedPrompt:
    """Prompt text plus whether nutrition facts were woven in."""

    text: str
    used_enrichment: bool


@dataclass(frozen=True)
class AnswerResult:
    """Answer returned to the caller."""

    answer: str
    used_enrichment: bool
