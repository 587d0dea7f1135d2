"""Shared fixtures."""

import pytest

from newsletter_bot.config import Settings
from newsletter_bot.models import Digest, DigestItem


@pytest.fixture
def sample_digest() -> Digest:
    """A digest with two linked items and one without a link."""
    return Digest(
        subject="Weekly Tech Digest #42",
        intro="Here are the top tech stories from this week.",
        items=[
            DigestItem(
                title="AI Breakthrough in Quantum Computing",
                tldr="Scientists achieved quantum supremacy milestone.",
                bullets=[
                    "New algorithm reduces computation time by 1000x",
                    "Published in Nature journal",
                    "Open source code released",
                ],
                link="https://example.com/quantum-ai",
            ),
            DigestItem(
                title="Web3 Adoption Grows",
                tldr="Major corporations embrace blockchain technology.",
                bullets=[
                    "Walmart integrates crypto payments",
                    "Microsoft launches NFT marketplace",
                    "Decentralized identity gains traction",
                ],
                link="https://example.com/web3-adoption",
            ),
            DigestItem(
                title="Sustainable Tech Innovation",
                tldr="Green technology reduces carbon footprint.",
                bullets=[
                    "Solar panels achieve 40% efficiency",
                    "Electric vehicles hit new sales record",
                    "Recycling tech processes e-waste",
                ],
            ),
        ],
        outro="Thanks for reading! Stay tuned for next week.",
    )


@pytest.fixture
def settings() -> Settings:
    """Settings built from explicit values, ignoring any local .env file."""
    return Settings(
        _env_file=None,
        gemini_api_key="gemini-test-key",
        resend_api_key="resend-test-key",
        from_email="Bot <bot@example.com>",
        to_emails="alice@example.com, bob@example.com",
    )
