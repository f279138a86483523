"""Google Gemini REST client for meal suggestions."""

import json
import re
from dataclasses import dataclass

import httpx

from macro_tracker.services.ai_meals import SYSTEM_PROMPT, MealSuggestionClient

_JSON_OBJECT = re.compile(r"\{.*\}", re.DOTALL)


@dataclass
class HttpxGeminiClient(MealSuggestionClient):
    """HTTPX-backed client for the Gemini generateContent endpoint."""

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

    async def generate(self, prompt: str) -> dict[str, object]:
        """Ask Gemini for a meal and extract the JSON object from its text."""
        url = f"{self.base_url}/models/{self.model}:generateContent"
        response = await self.http_client.post(
            url,
            params={"key": self.api_key},
            json={
                "system_instruction": {"parts": [{"text": SYSTEM_PROMPT}]},
                "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            },
            timeout=30,
        )
        response.raise_for_status()
        return extract_json_object(_response_text(response.json()))

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def extract_json_object(text: str) -> dict[str, object]:
    """Parse the outermost JSON object in text that may carry markdown."""
    match = _JSON_OBJECT.search(text)
    if match is None:
        raise ValueError("No JSON object found in Gemini response")
    payload = json.loads(match.group(0))
    if not isinstance(payload, dict):
        raise ValueError("Gemini response JSON is not an object")
    return payload


def _response_text(payload: dict[str, object]) -> str:
    candidates = payload.get("candidates") or []
    if not candidates:
        raise RuntimeError("Gemini returned no candidates")
    content = candidates[0].get("content") or {}
    parts = content.get("parts") or []
    text = "".join(str(part.get("text", "")) for part in parts)
    if not text:
        raise RuntimeError("Gemini returned an empty response")
    return text
