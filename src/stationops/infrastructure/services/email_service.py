"""Outbound email for StationOps.

Builds the configured provider and renders the built-in templates.
"""

from stationops.core.config import Settings, get_settings
from stationops.core.logging import get_logger
from stationops.infrastructure.services.email import (
    ConsoleProvider,
    EmailProvider,
    ResendProvider,
    ResendSettings,
    SMTPProvider,
    SMTPSettings,
    TemplateRenderer,
    get_template_renderer,
)
from stationops.infrastructure.services.email.templates import INVITATION

logger = get_logger(__name__)


class EmailConfigurationError(Exception):
    """Raised when the selected email provider is missing settings."""


def build_email_provider(settings: Settings) -> EmailProvider:
    """Instantiate the provider named by ``settings.email_provider``.

    Raises:
        EmailConfigurationError: If the provider's credentials are missing.
    """
    if settings.email_provider == "resend":
        if not settings.resend_api_key:
            raise EmailConfigurationError("STATIONOPS_RESEND_API_KEY is not set")
        return ResendProvider(
            ResendSettings(
                api_key=settings.resend_api_key,
                from_email=settings.email_from_address,
                from_name=settings.email_from_name,
                reply_to=settings.email_reply_to,
            )
        )
    if settings.email_provider == "smtp":
        if not settings.smtp_host:
            raise EmailConfigurationError("STATIONOPS_SMTP_HOST is not set")
        return SMTPProvider(
            SMTPSettings(
                host=settings.smtp_host,
                port=settings.smtp_port,
                username=settings.smtp_username,
                password=settings.smtp_password,
                use_tls=settings.smtp_use_tls,
                use_ssl=settings.smtp_use_ssl,
                from_email=settings.email_from_address,
                from_name=settings.email_from_name,
                reply_to=settings.email_reply_to,
                timeout=settings.smtp_timeout,
            )
        )
    return ConsoleProvider()


class EmailService:
    """Renders and sends application emails."""

    def __init__(
        self,
        provider: EmailProvider,
        settings: Settings | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.provider = provider
        self.settings = settings or get_settings()
        self.renderer = renderer or get_template_renderer()

    async def send_invitation_email(
        self,
        to: str,
        invite_url: str,
        role: str,
        inviter_name: str | None = None,
    ) -> bool:
        """Send the invitation email containing the redemption link.

        Args:
            to: Invitee email address.
            invite_url: Full redemption link.
            role: Role the invitee will receive.
            inviter_name: Display name of the inviter, if known.

        Returns:
            True if the provider accepted the message.

        Raises:
            Exception: Provider errors propagate; the caller decides whether
                they are fatal.
        """
        variables = {
            "station_name": self.settings.email_from_name,
            "invite_url": invite_url,
            "role_label": role.replace("_", " ").title(),
            "inviter_name": inviter_name,
            "expiry_days": self.settings.invitation_expiry_days,
        }
        return await self.provider.send_email(
            to=to,
            subject=self.renderer.render(INVITATION.subject, variables),
            html_body=self.renderer.render(INVITATION.html_body, variables),
            text_body=self.renderer.render(INVITATION.text_body, variables),
            from_email=self.settings.email_from_address,
            from_name=self.settings.email_from_name,
            reply_to=self.settings.email_reply_to,
        )


def get_email_service() -> EmailService:
    """Build an EmailService for the current settings."""
    settings = get_settings()
    return EmailService(build_email_provider(settings), settings)
