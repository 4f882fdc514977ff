"""Email transports and template rendering."""

from stationops.infrastructure.services.email.console_provider import ConsoleProvider
from stationops.infrastructure.services.email.email_provider import EmailProvider
from stationops.infrastructure.services.email.resend_provider import (
    ResendProvider,
    ResendSettings,
)
from stationops.infrastructure.services.email.smtp_provider import SMTPProvider, SMTPSettings
from stationops.infrastructure.services.email.template_renderer import (
    TemplateRenderer,
    get_template_renderer,
)

__all__ = [
    "ConsoleProvider",
    "EmailProvider",
    "ResendProvider",
    "ResendSettings",
    "SMTPProvider",
    "SMTPSettings",
    "TemplateRenderer",
    "get_template_renderer",
]
