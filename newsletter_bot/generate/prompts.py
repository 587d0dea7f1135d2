"""
Prompt templates for digest generation.

The model is asked for bare JSON; the parser in generator.py copes with
responses that ignore this and wrap the object in prose or code fences.
"""

from newsletter_bot.models import (
    BULLET_COUNT,
    BULLET_MAX_WORDS,
    INTRO_MAX_WORDS,
    ITEM_COUNT,
    SUBJECT_MAX_CHARS,
    TLDR_MAX_WORDS,
)

DIGEST_PROMPT = f"""Create a simple demo news abstract email.

Return ONLY valid JSON (no markdown) with this schema:
{{
  "subject": string,
  "intro": string,
  "items": [
    {{"title": string, "tldr": string, "bullets": string[], "link"?: string}}
  ],
  "outro": string
}}

Rules:
- subject <= {SUBJECT_MAX_CHARS} characters
- intro <= {INTRO_MAX_WORDS} words
- {ITEM_COUNT} items
- each tldr <= {TLDR_MAX_WORDS} words
- bullets: exactly {BULLET_COUNT} bullets per item, each <= {BULLET_MAX_WORDS} words
- links can be placeholder like "https://example.com/x"
"""
