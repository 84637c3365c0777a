"""Gemini generateContent API client."""

from dataclasses import dataclass

import httpx

from bitewise.services.answers import LanguageModelClient


@dataclass
class HttpxGeminiClient(LanguageModelClient):
    """Language model client backed by the Gemini REST API."""

    api_key: str
    model: str
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, api_key: str, model: str, base_url: str) -> "HttpxGeminiClient":
        """Create a Gemini client with a managed httpx session."""
        return cls(
            api_key=api_key,
            model=model,
            base_url=base_url,
            http_client=httpx.AsyncClient(),
        )

    async def generate(self, prompt: str) -> str | None:
        """Send a single-turn prompt and return the first text part."""
        url = f"{self.base_url}/models/{self.model}:generateContent"
        response = await self.http_client.post(
            url,
            params={"key": self.api_key},
            json={"contents": [{"parts": [{"text": prompt}]}]},
            timeout=60,
        )
        response.raise_for_status()
        return first_candidate_text(response.json())

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def first_candidate_text(payload: object) -> str | None:
    """Return the first text part of the first candidate, if present."""
    if not isinstance(payload, dict):
        return None
    candidates = payload.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return None
    content = candidates[0].get("content") if isinstance(candidates[0], dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
        return None
    text = parts[0].get("text")
    return text if isinstance(text, str) else None
