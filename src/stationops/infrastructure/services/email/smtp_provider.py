"""SMTP email provider implementation using aiosmtplib."""

from email.message import EmailMessage

import aiosmtplib
from pydantic import BaseModel, ConfigDict

from stationops.core.logging import get_logger
from stationops.infrastructure.services.email.email_provider import EmailProvider

logger = get_logger(__name__)


class SMTPSettings(BaseModel):
    """Configuration settings for the SMTP provider."""

    model_config = ConfigDict(from_attributes=True)

    host: str
    port: int = 587
    username: str | None = None
    password: str | None = None
    use_tls: bool = True
    use_ssl: bool = False
    from_email: str
    from_name: str = "Sweet FM"
    reply_to: str | None = None
    timeout: int = 10


class SMTPProvider(EmailProvider):
    """Sends email over SMTP.

    ``use_ssl`` opens an implicit TLS connection; otherwise ``use_tls``
    upgrades a plain connection with STARTTLS.
    """

    name = "smtp"

    def __init__(self, settings: SMTPSettings) -> None:
        self.settings = settings

    def _client(self) -> aiosmtplib.SMTP:
        return aiosmtplib.SMTP(
            hostname=self.settings.host,
            port=self.settings.port,
            use_tls=self.settings.use_ssl,
            start_tls=self.settings.use_tls and not self.settings.use_ssl,
            timeout=self.settings.timeout,
        )

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
        message = EmailMessage()
        message["Subject"] = subject
        message["From"] = (
            f"{from_name or self.settings.from_name} "
            f"<{from_email or self.settings.from_email}>"
        )
        message["To"] = to
        reply_addr = reply_to or self.settings.reply_to
        if reply_addr:
            message["Reply-To"] = reply_addr
        message.set_content(text_body)
        message.add_alternative(html_body, subtype="html")

        try:
            async with self._client() as smtp:
                if self.settings.username:
                    await smtp.login(self.settings.username, self.settings.password or "")
                await smtp.send_message(message)
        except Exception as e:
            logger.error("Failed to send email via SMTP", host=self.settings.host, error=str(e))
            raise

        logger.info("Email sent via SMTP", host=self.settings.host, to=to)
        return True

    async def test_connection(self) -> tuple[bool, str | None]:
        try:
            async with self._client() as smtp:
                if self.settings.username:
                    await smtp.login(self.settings.username, self.settings.password or "")
        except Exception as e:
            logger.error("SMTP connection test failed", host=self.settings.host, error=str(e))
            return False, f"SMTP connection failed: {e}"
        return True, None
