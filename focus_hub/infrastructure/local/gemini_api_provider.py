"""
Gemini API provider.

Uses the Gemini API with an API key (no GCP project required).
"""

from google import genai
from google.genai.types import GenerateContentConfig, ThinkingConfig

from focus_hub.core.exceptions import LLMError
from focus_hub.interfaces.llm_provider import ILLMProvider


class GeminiAPIProvider(ILLMProvider):
    """Gemini API provider using API Key."""

    def __init__(self, api_key: str, model_name: str, client: genai.Client | None = None):
        """
        Initialize Gemini API provider.

        Args:
            api_key: Google AI Studio API key
            model_name: Gemini model name (e.g., "gemini-2.5-flash")
        """
        if not api_key and client is None:
            raise ValueError(
                "GOOGLE_API_KEY is required for Gemini API provider. "
                "Get your API key from https://aistudio.google.com/apikey"
            )
        self._model_name = model_name
        self._client = client or genai.Client(api_key=api_key)

    async def generate_text(self, prompt: str) -> str:
        # Thinking disabled: quiz prompts are short and latency matters more.
        config = GenerateContentConfig(thinking_config=ThinkingConfig(thinking_budget=0))
        try:
            response = await self._client.aio.models.generate_content(
                model=self._model_name,
                contents=prompt,
                config=config,
            )
        except Exception as exc:
            raise LLMError(f"Gemini request failed: {exc}") from exc

        text = (response.text or "").strip()
        if not text:
            raise LLMError("Gemini returned an empty response")
        return text

    def get_model_name(self) -> str:
        """Get human-readable model name."""
        return f"Gemini API ({self._model_name})"
