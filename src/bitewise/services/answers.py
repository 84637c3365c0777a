"""Answer service routing questions through enrichment to the language model."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from bitewise.domain.answers import AnswerResult, Intent
from bitewise.domain.nutrition import STAPLE_FOODS
from bitewise.services.intents import classify, extract_food_name
from bitewise.services.nutrition import FactAggregator
from bitewise.services.prompts import compose

NO_ANSWER = "No answer."

_logger = logging.getLogger(__name__)


class LanguageModelClient(Protocol):
    """Interface for single-turn text generation."""

    async def generate(self, prompt: str) -> str | None:
        """Return generated text, or None when the response has none."""


@dataclass
class AnswerService:
    """Classify, enrich, compose and ask the language model."""

    aggregator: FactAggregator
    llm_client: LanguageModelClient
    staple_foods: Sequence[str] = STAPLE_FOODS

    async def answer(self, question: str) -> AnswerResult:
        """Answer a nutrition question."""
        intent = classify(question)
        if intent is Intent.DIET_PLAN:
            facts = await self.aggregator.aggregate(self.staple_foods)
        elif intent is Intent.FOOD_FACT:
            facts = await self.aggregator.aggregate([extract_food_name(question)])
        else:
            facts = []
        prompt = compose(intent, question, facts)
        _logger.info(
            "Answering question: intent=%s facts=%s enriched=%s",
            intent,
            len(facts),
            prompt.used_enrichment,
        )

        try:
            text = await self.llm_client.generate(prompt.text)
        except Exception:
            _logger.exception("Language model request failed")
            text = None
        return AnswerResult(
            answer=text or NO_ANSWER, used_enrichment=prompt.used_enrichment
        )
