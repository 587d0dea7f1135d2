"""Provider-neutral LLM client interface."""

from dataclasses import dataclass
from typing import Protocol

from newsletter_bot.errors import NewsletterBotError


class LLMError(NewsletterBotError):
    """The generation call to the provider failed."""


@dataclass(frozen=True)
class LLMResponse:
    """Raw text returned by a provider plus token accounting."""

    raw_text: str
    input_tokens: int = 0
    output_tokens: int = 0


class LLMClient(Protocol):
    """Anything that turns one instruction string into raw text."""

    model: str

    def generate(self, prompt: str, system: str | None = None) -> LLMResponse:
        ...
