"""Digest generation: prompting the model and parsing its reply."""

from .generator import (
    DigestGenerator,
    parse_digest,
    parse_model_output,
    validate_digest,
)
from .prompts import DIGEST_PROMPT

__all__ = [
    "DIGEST_PROMPT",
    "DigestGenerator",
    "parse_digest",
    "parse_model_output",
    "validate_digest",
]
