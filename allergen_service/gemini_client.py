"""Gemini REST client — one explicitly constructed instance per app."""

from typing import Optional

import httpx

from allergen_service import config
from allergen_service.exceptions import ProviderError
from allergen_service.images import InlineImage


class GeminiClient:
    def __init__(
        self,
        api_key: str = config.GOOGLE_API_KEY,
        model: str = config.GEMINI_MODEL,
        base_url: str = config.GEMINI_API_URL,
        timeout: float = config.LLM_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def generate(self, prompt: str, image: Optional[InlineImage] = None) -> str:
        """Send one prompt (and optionally one image) and return the reply text."""
        parts = [{"text": prompt}]
        if image is not None:
            parts.append({"inline_data": {"mime_type": image.mime_type, "data": image.data}})

        response = await self._client.post(
            f"{self.base_url}/models/{self.model}:generateContent",
            headers={
                "x-goog-api-key": self.api_key,
                "Content-Type": "application/json",
            },
            json={"contents": [{"role": "user", "parts": parts}]},
        )
        response.raise_for_status()
        return extract_text(response.json())

    async def aclose(self):
        await self._client.aclose()


def extract_text(result: dict) -> str:
    """Concatenate the text parts of the first candidate."""
    candidates = result.get("candidates") or []
    if not candidates:
        reason = result.get("promptFeedback", {}).get("blockReason", "no candidates returned")
        raise ProviderError("Empty response from Gemini", error=f"Gemini returned no text: {reason}")

    parts = candidates[0].get("content", {}).get("parts", [])
    text = "".join(part.get("text", "") for part in parts)
    if not text:
        reason = candidates[0].get("finishReason", "empty content")
        raise ProviderError("Empty response from Gemini", error=f"Gemini returned no text: {reason}")
    return text
