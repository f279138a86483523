"""OpenAI chat completions client for meal suggestions."""

import json
from dataclasses import dataclass

from openai import AsyncOpenAI

from macro_tracker.services.ai_meals import SYSTEM_PROMPT, MealSuggestionClient


@dataclass
class OpenAIMealClient(MealSuggestionClient):
    """Meal suggestion client backed by OpenAI JSON mode."""

    client: AsyncOpenAI
    model: str

    @classmethod
    def create(cls, api_key: str, model: str) -> "OpenAIMealClient":
        """Create an OpenAI meal client."""
        return cls(client=AsyncOpenAI(api_key=api_key), model=model)

    async def generate(self, prompt: str) -> dict[str, object]:
        """Ask the model for a meal and parse its JSON reply."""
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            response_format={"type": "json_object"},
        )
        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise RuntimeError("OpenAI returned an empty response")
        return json.loads(content)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
