"""LLM provider factory and shared exports."""

from typing import Literal

from .base import LLMClient, LLMError, LLMResponse

Provider = Literal["gemini"]

PROVIDER_DEFAULTS: dict[Provider, str] = {
    "gemini": "gemini-2.5-flash",
}


def create_client(provider: Provider, api_key: str, model: str | None = None) -> LLMClient:
    """Create an LLM client for the given provider."""
    match provider:
        case "gemini":
            from .gemini import GeminiClient

            return GeminiClient(api_key=api_key, model=model or PROVIDER_DEFAULTS["gemini"])
        case _:
            raise LLMError(f"Unknown LLM provider: {provider}")


__all__ = [
    "LLMClient",
    "LLMError",
    "LLMResponse",
    "PROVIDER_DEFAULTS",
    "Provider",
    "create_client",
]
