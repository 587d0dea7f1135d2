"""Gemini client built on the google-genai SDK."""

from google import genai
from google.genai import types

from newsletter_bot.logging_config import get_logger

from .base import LLMError, LLMResponse

logger = get_logger("llm.gemini")


class GeminiClient:
    """Sends a single prompt to Gemini and returns the unparsed response text."""

    def __init__(self, api_key: str, model: str):
        self.model = model
        self._client = genai.Client(api_key=api_key)

    def generate(self, prompt: str, system: str | None = None) -> LLMResponse:
        config = None
        if system:
            config = types.GenerateContentConfig(system_instruction=system)

        logger.debug(f"Calling {self.model} ({len(prompt)} char prompt)")

        try:
            response = self._client.models.generate_content(
                model=self.model,
                contents=prompt,
                config=config,
            )
        except Exception as exc:
            raise LLMError(f"Gemini request failed: {exc}") from exc

        usage = response.usage_metadata
        input_tokens = (usage.prompt_token_count or 0) if usage else 0
        output_tokens = (usage.candidates_token_count or 0) if usage else 0

        logger.debug(f"Gemini usage: {input_tokens} in / {output_tokens} out")

        return LLMResponse(
            raw_text=response.text or "",
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )
