import asyncio
import logging
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from html import escape
from typing import Any
from urllib.parse import urlencode

from keyforge_auth.application.ports import PasswordResetNotifier
from keyforge_config.settings import Settings

logger = logging.getLogger(__name__)

PASSWORD_RESET_SUBJECT = "Password Reset Request"

PASSWORD_RESET_TEXT = """Hello {name},

You requested a password reset for your account.

Click the link below to choose a new password:
{reset_link}

If the link does not work, use this reset token together with your email:
{reset_token}

If you didn't request this, you can safely ignore this email.
"""

PASSWORD_RESET_HTML = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
</head>
<body style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; background-color: #f9fafb; margin: 0; padding: 20px;">
    <div style="max-width: 600px; margin: 0 auto; background-color: #ffffff; border-radius: 8px; padding: 40px;">
        <h2 style="color: #111827; margin-top: 0;">Password Reset Request</h2>
        <p style="color: #374151; line-height: 1.6;">Hello {name},</p>
        <p style="color: #374151; line-height: 1.6;">You requested a password reset for your account.</p>
        <p style="margin: 30px 0; text-align: center;">
            <a href="{reset_link}" style="display: inline-block; padding: 14px 28px; background-color: #2563eb; color: #ffffff !important; text-decoration: none; border-radius: 6px; font-weight: 600;">Reset Password</a>
        </p>
        <p style="color: #6b7280; font-size: 14px;">Or use this reset token together with your email:</p>
        <p style="word-break: break-all; font-family: monospace; font-size: 14px;">{reset_token}</p>
        <p style="color: #9ca3af; font-size: 13px; margin-top: 40px;">If you didn't request this, you can safely ignore this email.</p>
    </div>
</body>
</html>
"""  # noqa: E501

DEFAULT_GREETING_NAME = "there"


class EmailNotConfiguredError(RuntimeError):
    """Raised when SMTP delivery is enabled but not configured."""


class EmailService(PasswordResetNotifier):
    def __init__(self, settings: Settings):
        self._settings = settings

    def _create_message(
        self,
        to_email: str,
        subject: str,
        text_body: str,
        html_body: str | None = None,
    ) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = f"{self._settings.smtp_from_name} <{self._settings.smtp_from_email}>"
        msg["To"] = to_email

        msg.attach(MIMEText(text_body, "plain"))
        if html_body:
            msg.attach(MIMEText(html_body, "html"))

        return msg

    def _send_email(self, to_email: str, message: MIMEMultipart) -> None:
        if not self._settings.smtp_host:
            msg = "SMTP host not configured"
            raise EmailNotConfiguredError(msg)

        smtp_password = (
            self._settings.smtp_password.get_secret_value()
            if self._settings.smtp_password
            else ""
        )
        timeout = self._settings.smtp_timeout_seconds

        try:
            if self._settings.smtp_use_tls and not self._settings.smtp_starttls:
                # Implicit TLS (port 465)
                context = ssl.create_default_context()
                with smtplib.SMTP_SSL(
                    self._settings.smtp_host,
                    self._settings.smtp_port,
                    context=context,
                    timeout=timeout,
                ) as server:
                    if self._settings.smtp_user:
                        server.login(self._settings.smtp_user, smtp_password)
                    server.send_message(message)
            else:
                # STARTTLS (port 587) or plain
                with smtplib.SMTP(
                    self._settings.smtp_host,
                    self._settings.smtp_port,
                    timeout=timeout,
                ) as server:
                    if self._settings.smtp_starttls:
                        context = ssl.create_default_context()
                        server.starttls(context=context)
                    if self._settings.smtp_user:
                        server.login(self._settings.smtp_user, smtp_password)
                    server.send_message(message)

            logger.info("Email sent to %s", to_email)

        except Exception as e:
            logger.error("Failed to send email to %s: %s", to_email, e)
            raise

    def build_reset_link(self, email: str, reset_token: str) -> str:
        query = urlencode({"email": email, "token": reset_token})
        return f"{self._settings.frontend_base_url.rstrip('/')}/reset-password?{query}"

    def render_password_reset_message(
        self,
        recipient: str,
        reset_token: str,
        claims: dict[str, Any],
    ) -> MIMEMultipart:
        name = str(claims.get("name") or DEFAULT_GREETING_NAME)
        reset_link = self.build_reset_link(recipient, reset_token)

        text_body = PASSWORD_RESET_TEXT.format(
            name=name,
            reset_link=reset_link,
            reset_token=reset_token,
        )
        html_body = PASSWORD_RESET_HTML.format(
            name=escape(name),
            reset_link=escape(reset_link),
            reset_token=escape(reset_token),
        )

        return self._create_message(
            to_email=recipient,
            subject=PASSWORD_RESET_SUBJECT,
            text_body=text_body,
            html_body=html_body,
        )

    async def send_password_reset_message(
        self,
        recipient: str,
        reset_token: str,
        claims: dict[str, Any],
    ) -> None:
        if not self._settings.smtp_enabled:
            logger.warning("SMTP disabled, skipping password reset email to %s", recipient)
            return

        message = self.render_password_reset_message(recipient, reset_token, claims)
        await asyncio.to_thread(self._send_email, recipient, message)
