"""Tests for container wiring."""

import asyncio

import pytest

from bitewise.adapters.gemini_client import HttpxGeminiClient
from bitewise.adapters.openai_text_client import OpenAITextClient
from bitewise.containers import build_container
from bitewise.services.cache import InMemoryFactCache, LruFactCache


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert isinstance(container.fact_cache, InMemoryFactCache)
    assert container.fact_fetcher.cache is container.fact_cache
    assert container.fact_aggregator.fetcher is container.fact_fetcher
    assert container.answer_service.aggregator is container.fact_aggregator
    assert isinstance(container.answer_service.llm_client, HttpxGeminiClient)
    asyncio.run(container.close_resources())


def test_build_container_uses_bounded_cache(settings) -> None:
    settings.fact_cache_max_entries = 50
    container = build_container(settings)

    assert isinstance(container.fact_cache, LruFactCache)
    assert container.fact_cache.max_entries == 50
    asyncio.run(container.close_resources())


def test_build_container_selects_openai(settings) -> None:
    settings.llm_provider = "openai"
    settings.openai_api_key = "openai-key"
    container = build_container(settings)

    assert isinstance(container.answer_service.llm_client, OpenAITextClient)
    asyncio.run(container.close_resources())


def test_build_container_requires_provider_key(settings) -> None:
    settings.gemini_api_key = None

    with pytest.raises(ValueError, match="GEMINI_API_KEY"):
        build_container(settings)


def test_build_container_rejects_unknown_provider(settings) -> None:
    settings.llm_provider = "mystery"

    with pytest.raises(ValueError, match="Unsupported LLM_PROVIDER"):
        build_container(settings)
