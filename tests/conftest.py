"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from bitewise.adapters.fdc_client import FdcClient
from bitewise.config import Settings
from bitewise.containers import AppContainer
from bitewise.services.answers import AnswerService, LanguageModelClient
from bitewise.services.cache import InMemoryFactCache
from bitewise.services.nutrition import FactAggregator, FactFetcher


def fdc_food(
    description: str,
    protein: float | None = None,
    fat: float | None = None,
    carbs: float | None = None,
    calories: float | None = None,
) -> dict[str, object]:
    """Build an FDC search candidate with named nutrients."""
    nutrients = []
    for name, value in (
        ("Protein", protein),
        ("Total lipid (fat)", fat),
        ("Carbohydrate, by difference", carbs),
        ("Energy", calories),
    ):
        if value is not None:
            nutrients.append({"nutrientName": name, "value": value})
    return {"description": description, "foodNutrients": nutrients}


@dataclass
class FakeFdcClient(FdcClient):
    """Fake FDC client answering searches from an in-memory catalog."""

    catalog: dict[str, list[dict[str, object]]] = field(
        default_factory=lambda: {
            "egg": [fdc_food("Egg, whole, raw, fresh", 12.6, 9.51, 0.72, 143)],
            "oats": [fdc_food("Oats, raw", 16.9, 6.9, 66.3, 389)],
            "dal": [
                fdc_food("Lentils, raw", 24.6, 1.06, 63.4, 352),
                fdc_food("Dal, yellow, cooked", 9.0, 0.4, 20.1, 116),
            ],
        }
    )
    failing: set[str] = field(default_factory=set)
    queries: list[str] = field(default_factory=list)

    async def search_foods(self, query: str, page_size: int = 25) -> dict[str, object]:
        self.queries.append(query)
        if query in self.failing:
            raise RuntimeError(f"FDC unavailable for {query}")
        return {"foods": self.catalog.get(query, [])}


@dataclass
class FakeLanguageModelClient(LanguageModelClient):
    """Fake language model recording prompts."""

    reply: str | None = "Eggs are a great source of protein."
    error: Exception | None = None
    prompts: list[str] = field(default_factory=list)

    async def generate(self, prompt: str) -> str | None:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def settings() -> Settings:
    return Settings(
        fdc_api_key="fdc-key",
        gemini_api_key="gemini-key",
    )


@pytest.fixture
def fdc_client() -> FakeFdcClient:
    return FakeFdcClient()


@pytest.fixture
def llm_client() -> FakeLanguageModelClient:
    return FakeLanguageModelClient()


@pytest.fixture
def container(
    settings: Settings,
    fdc_client: FakeFdcClient,
    llm_client: FakeLanguageModelClient,
) -> AppContainer:
    fact_cache = InMemoryFactCache()
    fact_fetcher = FactFetcher(fdc_client=fdc_client, cache=fact_cache)
    fact_aggregator = FactAggregator(fact_fetcher)
    answer_service = AnswerService(aggregator=fact_aggregator, llm_client=llm_client)

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        fact_cache=fact_cache,
        fact_fetcher=fact_fetcher,
        fact_aggregator=fact_aggregator,
        answer_service=answer_service,
        close_resources=close_resources,
    )
