"""Resend email provider implementation.

Uses the Resend Python SDK, which is synchronous, from a worker thread.
"""

import asyncio

import resend
from pydantic import BaseModel, ConfigDict

from stationops.core.logging import get_logger
from stationops.infrastructure.services.email.email_provider import EmailProvider

logger = get_logger(__name__)


class ResendSettings(BaseModel):
    """Configuration settings for the Resend provider."""

    model_config = ConfigDict(from_attributes=True)

    api_key: str
    from_email: str
    from_name: str = "Sweet FM"
    reply_to: str | None = None


class ResendProvider(EmailProvider):
    """Sends email through the Resend API."""

    name = "resend"

    def __init__(self, settings: ResendSettings) -> None:
        self.settings = settings
        resend.api_key = settings.api_key

    def _build_params(
        self,
        to: str,
        subject: str,
        html_body: str,
        text_body: str,
        from_email: str,
        from_name: str,
        reply_to: str | None,
    ) -> dict:
        params = {
            "from": f"{from_name or self.settings.from_name} "
            f"<{from_email or self.settings.from_email}>",
            "to": [to],
            "subject": subject,
            "html": html_body,
            "text": text_body,
        }
        reply_addr = reply_to or self.settings.reply_to
        if reply_addr:
            params["reply_to"] = reply_addr
        return params

    async def send_email(
        self,
        to: str,
        subject: str,
        html_body: str,
        text_body: str,
        from_email: str,
        from_name: str,
        reply_to: str | None = None,
    ) -> bool:
        """Send an email via Resend.

        Raises:
            Exception: Whatever the SDK raises, after logging it.
        """
        params = self._build_params(
            to, subject, html_body, text_body, from_email, from_name, reply_to
        )

        try:
            response = await asyncio.to_thread(resend.Emails.send, params)
        except Exception as e:
            error_message = str(e)
            if "Invalid API key" in error_message or "Unauthorized" in error_message:
                logger.error("Resend authentication failed", error=error_message, to=to)
            elif "rate limit" in error_message.lower():
                logger.error("Resend rate limit exceeded", error=error_message, to=to)
            else:
                logger.error("Resend API error", error=error_message, to=to)
            raise

        email_id = response.get("id") if isinstance(response, dict) else None
        logger.info("Email sent via Resend", email_id=email_id, to=to)
        return True

    async def test_connection(self) -> tuple[bool, str | None]:
        """Validate the API key by listing sending domains."""
        try:
            await asyncio.to_thread(resend.Domains.list)
        except Exception as e:
            logger.error("Resend connection test failed", error=str(e))
            return False, f"Resend connection failed: {e}"
        return True, "Resend connection successful."
