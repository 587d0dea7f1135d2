"""Runs one digest end to end: generate, render, send."""

import time
from typing import NamedTuple

from newsletter_bot.config import Settings
from newsletter_bot.deliver import EmailRenderer, EmailSender
from newsletter_bot.generate import DigestGenerator
from newsletter_bot.llm import LLMClient, create_client
from newsletter_bot.logging_config import get_logger
from newsletter_bot.models import Digest

logger = get_logger("pipeline")

__all__ = ["run_pipeline", "PipelineResult"]


class PipelineResult(NamedTuple):
    """Result of a pipeline run."""

    digest: Digest
    html: str
    text: str
    email_id: str | None
    input_tokens: int
    output_tokens: int
    duration_seconds: float

    @property
    def tokens_used(self) -> int:
        return self.input_tokens + self.output_tokens


def run_pipeline(
    settings: Settings,
    client: LLMClient | None = None,
    sender: EmailSender | None = None,
    renderer: EmailRenderer | None = None,
    dry_run: bool = False,
) -> PipelineResult:
    """
    Run the full digest pipeline.

    1. Ask the model for a digest and validate it
    2. Render HTML and plain text bodies
    3. Send to the configured recipients (skipped on dry run)

    Errors from any stage propagate unchanged.
    """
    start_time = time.time()

    if client is None:
        client = create_client(
            provider=settings.llm_provider,
            api_key=settings.llm_api_key,
            model=settings.llm_model,
        )

    digest, input_tokens, output_tokens = DigestGenerator(client=client).generate_with_usage()

    logger.info("Rendering email...")
    html, text = (renderer or EmailRenderer()).render(digest)

    email_id = None
    if dry_run:
        logger.info("Dry run: skipping delivery")
    else:
        if sender is None:
            sender = EmailSender(
                api_key=settings.resend_api_key,
                from_address=settings.from_email,
            )
        result = sender.send(
            recipients=settings.recipients,
            subject=digest.subject,
            html=html,
            text=text,
        )
        email_id = result.email_id

    duration = time.time() - start_time
    logger.info(f"Done: {input_tokens + output_tokens} tokens, {duration:.1f}s")

    return PipelineResult(
        digest=digest,
        html=html,
        text=text,
        email_id=email_id,
        input_tokens=input_tokens,
        output_tokens=output_tokens,
        duration_seconds=duration,
    )
