"""
Data models for the generated digest.

Length and count limits are requested from the model but never enforced
here: only the structure is validated.
"""

from pydantic import BaseModel, ConfigDict, Field, StrictStr

SUBJECT_MAX_CHARS = 60
INTRO_MAX_WORDS = 40
ITEM_COUNT = 5
TLDR_MAX_WORDS = 25
BULLET_COUNT = 3
BULLET_MAX_WORDS = 12


def _word_count(text: str) -> int:
    return len(text.split())


class DigestItem(BaseModel):
    """One story in the digest."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: StrictStr
    tldr: StrictStr
    bullets: list[StrictStr]
    link: StrictStr | None = Field(default=None, description="Absolute URL or placeholder")


class Digest(BaseModel):
    """The complete digest as returned by the model."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    subject: StrictStr
    intro: StrictStr
    items: list[DigestItem]
    outro: StrictStr

    def soft_limit_warnings(self) -> list[str]:
        """Describe every requested length or count limit the model ignored."""
        warnings: list[str] = []

        if len(self.subject) > SUBJECT_MAX_CHARS:
            warnings.append(f"subject is {len(self.subject)} chars (limit {SUBJECT_MAX_CHARS})")
        if _word_count(self.intro) > INTRO_MAX_WORDS:
            warnings.append(
                f"intro is {_word_count(self.intro)} words (limit {INTRO_MAX_WORDS})"
            )
        if len(self.items) != ITEM_COUNT:
            warnings.append(f"got {len(self.items)} items (expected {ITEM_COUNT})")

        for index, item in enumerate(self.items, start=1):
            if _word_count(item.tldr) > TLDR_MAX_WORDS:
                warnings.append(
                    f"item {index} tldr is {_word_count(item.tldr)} words "
                    f"(limit {TLDR_MAX_WORDS})"
                )
            if len(item.bullets) != BULLET_COUNT:
                warnings.append(
                    f"item {index} has {len(item.bullets)} bullets (expected {BULLET_COUNT})"
                )
            for bullet in item.bullets:
                if _word_count(bullet) > BULLET_MAX_WORDS:
                    warnings.append(
                        f"item {index} bullet is {_word_count(bullet)} words "
                        f"(limit {BULLET_MAX_WORDS})"
                    )

        return warnings
