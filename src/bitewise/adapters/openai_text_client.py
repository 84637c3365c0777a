"""OpenAI Responses API client for text answers."""

from dataclasses import dataclass

from openai import AsyncOpenAI

from bitewise.services.answers import LanguageModelClient


@dataclass
class OpenAITextClient(LanguageModelClient):
    """Language model client backed by OpenAI Responses API."""

    client: AsyncOpenAI
    model: str
    store: bool = False

    @classmethod
    def create(cls, api_key: str, model: str, store: bool) -> "OpenAITextClient":
        """Create an OpenAI text client."""
        return cls(client=AsyncOpenAI(api_key=api_key), model=model, store=store)

    async def generate(self, prompt: str) -> str | None:
        """Send a single-turn prompt and return the output text."""
        response = await self.client.responses.create(
            model=self.model,
            input=[
                {
                    "role": "user",
                    "content": [{"type": "input_text", "text": prompt}],
                }
            ],
            store=self.store,
        )
        return response.output_text or None

    async def close(self) -> None:
        """Close the underlying OpenAI client."""
        await self.client.close()
