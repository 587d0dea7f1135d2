"""
Email delivery via Resend.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

import resend

from newsletter_bot.errors import DeliveryError
from newsletter_bot.logging_config import get_logger

from .escaping import escape_html

logger = get_logger("email")


@dataclass
class SendResult:
    """Result of a successful send."""

    email_id: str | None
    recipients: list[str]


class EmailSender:
    """Handles email delivery via Resend."""

    def __init__(self, api_key: str, from_address: str):
        resend.api_key = api_key
        self.from_address = from_address

    def send(
        self,
        recipients: Sequence[str],
        subject: str,
        html: str,
        text: str,
    ) -> SendResult:
        """
        Send one email to all recipients.

        Args:
            recipients: Non-empty list of addresses
            subject: Email subject line
            html: HTML body
            text: Plain text body

        Returns:
            SendResult with the provider's message id

        Raises:
            DeliveryError: if there are no recipients or Resend fails
        """
        to = list(recipients)
        if not to:
            raise DeliveryError("no recipients configured")

        logger.info(f"Sending to: {', '.join(to)}")

        try:
            response = resend.Emails.send({
                "from": self.from_address,
                "to": to,
                "subject": subject,
                "html": html,
                "text": text,
            })
        except Exception as e:
            logger.error(f"Email send error: {e}")
            raise DeliveryError(str(e)) from e

        email_id = response.get("id") if isinstance(response, dict) else str(response)

        logger.info(f"Email sent successfully: {email_id}")

        return SendResult(email_id=email_id, recipients=to)

    def send_test_email(self, recipients: Sequence[str]) -> SendResult:
        """
        Send a connectivity-check email to verify the Resend configuration.

        Args:
            recipients: Addresses to send to

        Returns:
            SendResult with the provider's message id
        """
        to = list(recipients)
        sent_at = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        subject = f"Newsletter Bot Test - {datetime.now().isoformat(timespec='seconds')}"

        html = f"""
            <div style="font-family: Arial, sans-serif; padding: 20px;">
                <h1>Test Email from Newsletter Bot</h1>
                <p>This is a test email sent to verify delivery.</p>
                <p>Recipients: {escape_html(", ".join(to))}</p>
                <p>Timestamp: {sent_at}</p>
                <p>If you received this, the Resend integration is working correctly!</p>
            </div>
        """
        text = (
            "Test Email from Newsletter Bot\n\n"
            "This is a test email sent to verify delivery.\n\n"
            f"Recipients: {', '.join(to)}\n\n"
            f"Timestamp: {sent_at}\n\n"
            "If you received this, the Resend integration is working correctly!"
        )

        return self.send(to, subject, html, text)
