"""Tests for the end-to-end pipeline."""

import json
from unittest.mock import Mock, patch

import pytest

from newsletter_bot.config import Settings
from newsletter_bot.deliver import SendResult
from newsletter_bot.errors import DeliveryError, GenerationError
from newsletter_bot.llm.base import LLMResponse
from newsletter_bot.pipeline import run_pipeline

PAYLOAD = {
    "subject": "Weekly Tech Digest #42",
    "intro": "Here are the top tech stories from this week.",
    "items": [
        {
            "title": "AI Breakthrough",
            "tldr": "Scientists achieved X.",
            "bullets": ["A", "B", "C"],
            "link": "https://example.com/x",
        }
    ],
    "outro": "Thanks for reading!",
}


@pytest.fixture
def client() -> Mock:
    client = Mock()
    client.model = "gemini-test"
    client.generate.return_value = LLMResponse(
        raw_text=f"```json\n{json.dumps(PAYLOAD)}\n```",
        input_tokens=100,
        output_tokens=300,
    )
    return client


@pytest.fixture
def sender() -> Mock:
    sender = Mock()
    sender.send.return_value = SendResult(email_id="email-42", recipients=[])
    return sender


class TestRunPipeline:
    def test_sends_rendered_digest(self, settings: Settings, client: Mock, sender: Mock):
        result = run_pipeline(settings, client=client, sender=sender)

        sender.send.assert_called_once_with(
            recipients=["alice@example.com", "bob@example.com"],
            subject="Weekly Tech Digest #42",
            html=result.html,
            text=result.text,
        )
        assert result.email_id == "email-42"
        assert '<a href="https://example.com/x">Read more</a>' in result.html
        assert "Link: https://example.com/x" in result.text

    def test_reports_token_usage(self, settings: Settings, client: Mock, sender: Mock):
        result = run_pipeline(settings, client=client, sender=sender)

        assert result.input_tokens == 100
        assert result.output_tokens == 300
        assert result.tokens_used == 400
        assert result.duration_seconds >= 0

    def test_dry_run_skips_delivery(self, settings: Settings, client: Mock, sender: Mock):
        result = run_pipeline(settings, client=client, sender=sender, dry_run=True)

        sender.send.assert_not_called()
        assert result.email_id is None
        assert result.text.startswith("Here are the top tech stories")

    def test_generation_failure_stops_before_delivery(
        self, settings: Settings, client: Mock, sender: Mock
    ):
        client.generate.return_value = LLMResponse(raw_text="I cannot help with that.")

        with pytest.raises(GenerationError):
            run_pipeline(settings, client=client, sender=sender)

        sender.send.assert_not_called()

    def test_delivery_error_propagates(self, settings: Settings, client: Mock, sender: Mock):
        sender.send.side_effect = DeliveryError("invalid from address")

        with pytest.raises(DeliveryError, match="invalid from address"):
            run_pipeline(settings, client=client, sender=sender)

    def test_builds_default_collaborators_from_settings(self, settings: Settings, client: Mock):
        with (
            patch("newsletter_bot.pipeline.create_client", return_value=client) as create,
            patch("newsletter_bot.pipeline.EmailSender") as sender_cls,
        ):
            sender_cls.return_value.send.return_value = SendResult(
                email_id="email-7", recipients=settings.recipients
            )

            result = run_pipeline(settings)

        create.assert_called_once_with(
            provider="gemini",
            api_key="gemini-test-key",
            model=None,
        )
        sender_cls.assert_called_once_with(
            api_key="resend-test-key",
            from_address="Bot <bot@example.com>",
        )
        assert result.email_id == "email-7"
