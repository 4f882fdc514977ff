"""Email provider that writes messages to the log instead of sending them."""

from stationops.core.logging import get_logger
from stationops.infrastructure.services.email.email_provider import EmailProvider

logger = get_logger(__name__)


class ConsoleProvider(EmailProvider):
    """Development transport. Every message is logged and reported as sent."""

    name = "console"

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
        logger.info(
            "Email (console delivery)",
            to=to,
            sender=f"{from_name} <{from_email}>",
            reply_to=reply_to,
            subject=subject,
            body=text_body,
        )
        return True

    async def test_connection(self) -> tuple[bool, str | None]:
        return True, "Console provider logs emails instead of sending them."
