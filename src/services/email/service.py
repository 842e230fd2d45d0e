"""Outbound email transport backed by Resend."""

import asyncio

import resend

from src.utils.logger import get_logger
from src.utils.settings.email import EmailSettings


class EmailService:
    """Send HTML emails through the Resend API.

    A returned message id only means Resend accepted the email, not that it
    was delivered. Without an API key nothing is sent and ``None`` is
    returned; callers that depend on delivery must treat that as a failure.
    Transport errors are not caught here.
    """

    def __init__(self, settings: EmailSettings | None = None):
        self.settings = settings or EmailSettings()
        self.logger = get_logger(self.__class__.__name__)

    async def send_email(
        self,
        to_address: str,
        subject: str,
        html: str,
        category: str = "invitation",
    ) -> str | None:
        if not self.settings.RESEND_API_KEY:
            self.logger.warning(
                f"RESEND_API_KEY not configured, skipping email to {to_address}",
                subject=subject,
            )
            return None

        resend.api_key = self.settings.RESEND_API_KEY

        # The Resend SDK is synchronous
        response = await asyncio.to_thread(
            resend.Emails.send,
            {
                "from": self.settings.from_address,
                "to": to_address,
                "subject": subject,
                "html": html,
                "tags": [{"name": "category", "value": category}],
            },
        )

        self.logger.info(
            "Email sent successfully",
            email_id=response["id"],
            to=to_address,
            category=category,
        )
        return response["id"]
