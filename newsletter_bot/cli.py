"""Command-line interface for the newsletter bot."""

import sys
from typing import Optional

import click
import pydantic

from newsletter_bot import __version__
from newsletter_bot.config import Settings, get_settings
from newsletter_bot.errors import NewsletterBotError
from newsletter_bot.logging_config import get_logger, setup_logging

logger = get_logger("cli")


def _load_settings() -> Settings:
    """Load settings, exiting with status 1 when the environment is invalid."""
    try:
        settings = get_settings()
    except pydantic.ValidationError as exc:
        fields = ", ".join(
            ".".join(str(part) for part in error["loc"]).upper() for error in exc.errors()
        )
        logger.error(f"Invalid environment variables: {fields}")
        sys.exit(1)

    ctx = click.get_current_context()
    if not ctx.obj.get("log_level_override"):
        setup_logging(settings.log_level)

    return settings


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Override LOG_LEVEL",
)
@click.pass_context
def cli(ctx: click.Context, log_level: Optional[str]):
    """Newsletter Bot - generate a digest with Gemini and send it with Resend."""
    ctx.ensure_object(dict)
    ctx.obj["log_level_override"] = log_level is not None
    setup_logging(log_level.upper() if log_level else "INFO")


@cli.command()
@click.option("--dry-run", is_flag=True, help="Render the digest without sending it")
def run(dry_run: bool):
    """Generate, render and send one digest."""
    from newsletter_bot.pipeline import run_pipeline

    settings = _load_settings()

    try:
        result = run_pipeline(settings, dry_run=dry_run)
    except NewsletterBotError as exc:
        logger.error(str(exc))
        sys.exit(1)

    if dry_run:
        click.echo(result.text)
    else:
        click.echo(f"Sent \"{result.digest.subject}\" ({result.email_id})")


@cli.command()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "html"]),
    default="text",
    help="Which rendering to print",
)
def preview(output_format: str):
    """Generate a digest and print it without sending."""
    from newsletter_bot.pipeline import run_pipeline

    settings = _load_settings()

    try:
        result = run_pipeline(settings, dry_run=True)
    except NewsletterBotError as exc:
        logger.error(str(exc))
        sys.exit(1)

    click.echo(result.html if output_format == "html" else result.text)


@cli.command("test-email")
def test_email():
    """Send a connectivity-check email to the configured recipients."""
    from newsletter_bot.deliver import EmailSender

    settings = _load_settings()
    sender = EmailSender(api_key=settings.resend_api_key, from_address=settings.from_email)

    try:
        result = sender.send_test_email(settings.recipients)
    except NewsletterBotError as exc:
        logger.error(str(exc))
        sys.exit(1)

    click.echo(f"Test email sent to {', '.join(result.recipients)} ({result.email_id})")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
