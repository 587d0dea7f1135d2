"""Generates a digest from the model and turns its raw reply into a Digest."""

import json
import re
from typing import Any

import pydantic

from newsletter_bot.errors import GenerationError, ValidationError
from newsletter_bot.llm import LLMClient
from newsletter_bot.logging_config import get_logger
from newsletter_bot.models import Digest

from .prompts import DIGEST_PROMPT

logger = get_logger("generator")

# First "{" through the last "}"; greedy on purpose, not a balanced scan.
_JSON_OBJECT = re.compile(r"\{.*\}", re.DOTALL)


def parse_model_output(raw: str) -> Any:
    """
    Parse the model's reply as JSON.

    Tries the trimmed text as-is, then falls back to the span between the
    first opening brace and the last closing brace.

    Raises:
        GenerationError: if neither attempt yields valid JSON
    """
    text = raw.strip()

    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass

    match = _JSON_OBJECT.search(text)
    if match is None:
        raise GenerationError("model did not return JSON")

    logger.debug("Direct JSON parse failed, recovering embedded object")

    try:
        return json.loads(match.group(0))
    except json.JSONDecodeError as exc:
        raise GenerationError("model did not return JSON") from exc


def validate_digest(data: Any) -> Digest:
    """
    Check that parsed JSON has the digest structure.

    Raises:
        ValidationError: listing every missing or mistyped field
    """
    try:
        return Digest.model_validate(data)
    except pydantic.ValidationError as exc:
        problems = [
            f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}"
            for error in exc.errors()
        ]
        raise ValidationError(problems) from exc


def parse_digest(raw: str) -> Digest:
    """Parse and validate a raw model reply."""
    return validate_digest(parse_model_output(raw))


class DigestGenerator:
    """Asks the model for a digest and validates what comes back."""

    def __init__(self, client: LLMClient, prompt: str = DIGEST_PROMPT):
        self.client = client
        self.prompt = prompt

    def generate(self) -> Digest:
        """Generate a validated digest."""
        digest, _, _ = self.generate_with_usage()
        return digest

    def generate_with_usage(self) -> tuple[Digest, int, int]:
        """Generate a digest and report (digest, input_tokens, output_tokens)."""
        logger.info(f"Generating digest with {self.client.model}")

        response = self.client.generate(self.prompt)
        digest = parse_digest(response.raw_text)

        for warning in digest.soft_limit_warnings():
            logger.warning(f"Digest outside requested limits: {warning}")

        logger.info(f'Digest generated: "{digest.subject}" ({len(digest.items)} items)')

        return digest, response.input_tokens, response.output_tokens
