"""Prompt composition for the language model."""

from collections.abc import Sequence

from bitewise.domain.answers import ComposedPrompt, Intent
from bitewise.domain.nutrition import NutritionFact, is_known

_DIET_PLAN_TEMPLATE = (
    "You are a nutritionist. Using the following USDA nutritional facts for "
    "common Indian foods, create a systematic, healthy 7-day Indian diet plan "
    "for the user. Each meal should be balanced and include a variety of these "
    "foods. Present the plan in a clear, conversational manner, weaving in "
    "nutrition values where relevant, but do not mention USDA or the database. "
    "Here are the facts: {facts}. User's request: {question}"
)
_FOOD_FACT_TEMPLATE = (
    "You are a nutrition expert. Here are food facts: {facts}. Answer the "
    "user's question in a concise, direct way based on these facts, as if you "
    "know them. User's question: {question}"
)


def compose(
    intent: Intent, question: str, facts: Sequence[NutritionFact]
) -> ComposedPrompt:
    """Build the prompt for an intent and report whether facts were used."""
    if intent is Intent.DIET_PLAN:
        facts_text = "; ".join(_diet_plan_line(fact) for fact in facts)
        return ComposedPrompt(
            text=_DIET_PLAN_TEMPLATE.format(facts=facts_text, question=question),
            used_enrichment=True,
        )
    if intent is Intent.FOOD_FACT and facts:
        return ComposedPrompt(
            text=_FOOD_FACT_TEMPLATE.format(
                facts=_food_fact_clause(facts[0]), question=question
            ),
            used_enrichment=True,
        )
    return ComposedPrompt(text=question, used_enrichment=False)


def _diet_plan_line(fact: NutritionFact) -> str:
    return (
        f"{fact.food_key} ({fact.description}): {fact.protein}g protein, "
        f"{fact.fat}g fat, {fact.carbs}g carbs, {fact.calories} kcal per 100g"
    )


def _food_fact_clause(fact: NutritionFact) -> str:
    """Render known measures only, e.g. "13g protein, 155 kcal in Egg (per 100g)"."""
    measures = [
        f"{fact.protein}g protein" if is_known(fact.protein) else None,
        f"{fact.fat}g fat" if is_known(fact.fat) else None,
        f"{fact.carbs}g carbs" if is_known(fact.carbs) else None,
        f"{fact.calories} kcal" if is_known(fact.calories) else None,
    ]
    known = ", ".join(measure for measure in measures if measure)
    return f"{known} in {fact.description} (per 100g)".lstrip()
