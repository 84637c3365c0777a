"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from bitewise.adapters.fdc_client import HttpxFdcClient
from bitewise.adapters.gemini_client import HttpxGeminiClient
from bitewise.adapters.openai_text_client import OpenAITextClient
from bitewise.config import Settings
from bitewise.services.answers import AnswerService
from bitewise.services.cache import FactCache, InMemoryFactCache, LruFactCache
from bitewise.services.nutrition import FactAggregator, FactFetcher


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    fact_cache: FactCache
    fact_fetcher: FactFetcher
    fact_aggregator: FactAggregator
    answer_service: AnswerService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    fact_cache = _build_fact_cache(resolved_settings)
    fdc_client = HttpxFdcClient.create(
        api_key=resolved_settings.fdc_api_key,
        base_url=resolved_settings.fdc_base_url,
    )
    llm_client = _build_llm_client(resolved_settings)
    fact_fetcher = FactFetcher(
        fdc_client=fdc_client,
        cache=fact_cache,
        page_size=resolved_settings.fdc_page_size,
        debug=resolved_settings.debug,
    )
    fact_aggregator = FactAggregator(fact_fetcher)
    answer_service = AnswerService(aggregator=fact_aggregator, llm_client=llm_client)

    async def close_resources() -> None:
        await fdc_client.close()
        await llm_client.close()

    return AppContainer(
        settings=resolved_settings,
        fact_cache=fact_cache,
        fact_fetcher=fact_fetcher,
        fact_aggregator=fact_aggregator,
        answer_service=answer_service,
        close_resources=close_resources,
    )


def _build_fact_cache(settings: Settings) -> FactCache:
    if settings.fact_cache_max_entries is None:
        return InMemoryFactCache()
    return LruFactCache(settings.fact_cache_max_entries)


def _build_llm_client(settings: Settings) -> HttpxGeminiClient | OpenAITextClient:
    """Create the language model client for the configured provider."""
    provider = settings.llm_provider.strip().lower()
    if provider == "gemini":
        if not settings.gemini_api_key:
            raise ValueError("GEMINI_API_KEY is required when LLM_PROVIDER=gemini")
        return HttpxGeminiClient.create(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            base_url=settings.gemini_base_url,
        )
    if provider == "openai":
        if not settings.openai_api_key:
            raise ValueError("OPENAI_API_KEY is required when LLM_PROVIDER=openai")
        return OpenAITextClient.create(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            store=settings.openai_store,
        )
    raise ValueError(f"Unsupported LLM_PROVIDER: {settings.llm_provider}")
