"""Abstract base class for email providers."""

from abc import ABC, abstractmethod


class EmailProvider(ABC):
    """Interface every outbound email transport implements."""

    name: str = "abstract"

    @abstractmethod
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
        """Send an email.

        Args:
            to: Recipient email address.
            subject: Email subject line.
            html_body: HTML email body.
            text_body: Plain text email body.
            from_email: Sender email address.
            from_name: Sender display name.
            reply_to: Optional reply-to email address.

        Returns:
            True if the provider accepted the message.

        Raises:
            Exception: Transport errors propagate to the caller.
        """

    @abstractmethod
    async def test_connection(self) -> tuple[bool, str | None]:
        """Check the provider's credentials and reachability.

        Returns:
            Tuple of (success, message).
        """
