"""Built-in email templates (Jinja2 source)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EmailTemplate:
    subject: str
    html_body: str
    text_body: str


INVITATION = EmailTemplate(
    subject="You've been invited to join {{ station_name }}",
    html_body="""
<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <title>You've been invited</title>
</head>
<body style="margin: 0; padding: 0; font-family: Arial, sans-serif; background-color: #f4f7fa;">
    <table role="presentation" width="100%" cellpadding="0" cellspacing="0" style="padding: 40px 20px;">
        <tr>
            <td align="center">
                <table role="presentation" width="600" cellpadding="0" cellspacing="0" style="background-color: #ffffff; border-radius: 8px; padding: 40px;">
                    <tr>
                        <td>
                            <h1 style="margin: 0 0 20px 0; color: #2c3e50;">Welcome to {{ station_name }}</h1>
                            <p style="color: #4a5568; line-height: 1.6;">Hello,</p>
                            <p style="color: #4a5568; line-height: 1.6;">
                                {% if inviter_name %}<strong>{{ inviter_name }}</strong> has invited you{% else %}You have been invited{% endif %}
                                to join {{ station_name }} as <strong>{{ role_label }}</strong>.
                            </p>
                            <p style="color: #4a5568; line-height: 1.6;">Click the button below to set up your account:</p>
                        </td>
                    </tr>
                    <tr>
                        <td style="text-align: center; padding: 30px 0;">
                            <a href="{{ invite_url }}" style="display: inline-block; background-color: #e53e3e; color: #ffffff; text-decoration: none; padding: 14px 40px; border-radius: 6px; font-weight: 600;">Accept Invitation</a>
                        </td>
                    </tr>
                    <tr>
                        <td>
                            <p style="color: #718096; font-size: 14px;">Or copy and paste this link into your browser:</p>
                            <p style="word-break: break-all; color: #e53e3e; font-size: 14px;">{{ invite_url }}</p>
                            <p style="color: #718096; font-size: 14px;">This invitation will expire in {{ expiry_days }} days.</p>
                            <p style="color: #a0aec0; font-size: 13px;">If you were not expecting this invitation, you can safely ignore this email.</p>
                        </td>
                    </tr>
                </table>
            </td>
        </tr>
    </table>
</body>
</html>
""".strip(),
    text_body="""
Welcome to {{ station_name }}

Hello,

{% if inviter_name %}{{ inviter_name }} has invited you{% else %}You have been invited{% endif %} to join {{ station_name }} as {{ role_label }}.

Set up your account here:

{{ invite_url }}

This invitation will expire in {{ expiry_days }} days.

If you were not expecting this invitation, you can safely ignore this email.
""".strip(),
)
