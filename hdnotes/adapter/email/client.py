"""SMTP email notifier.

Sends passcode and welcome emails. Without SMTP credentials the message is
logged instead of sent so local signups keep working.
"""

import asyncio
import smtplib
from email.message import EmailMessage

import logfire

from hdnotes.adapter.email.templates import (
    RenderedEmail,
    render_otp_email,
    render_welcome_email,
)
from hdnotes.adapter.error import NotificationError
from hdnotes.config import EmailSettings
from hdnotes.domain.service.notification_service import Notifier
from hdnotes.domain.value import Email, OTPCode


class EmailNotifier(Notifier):
    """Base class for email notifiers.

    Provides type distinction for dependency injection.
    """

    pass


class SMTPEmailNotifier(EmailNotifier):
    """Notifier delivering over SMTP with STARTTLS."""

    def __init__(
        self,
        settings: EmailSettings,
        frontend_url: str,
        otp_expiry_minutes: int,
        allow_unconfigured: bool = True,
    ) -> None:
        """Initialize SMTP notifier.

        Args:
            settings: SMTP connection and sender settings
            frontend_url: Link target in the welcome email
            otp_expiry_minutes: Validity window quoted in passcode emails
            allow_unconfigured: Log instead of failing when SMTP has no
                credentials (never enabled in production)
        """
        self.settings = settings
        self.frontend_url = frontend_url
        self.otp_expiry_minutes = otp_expiry_minutes
        self.allow_unconfigured = allow_unconfigured

    @property
    def is_configured(self) -> bool:
        return bool(self.settings.smtp_user and self.settings.smtp_password)

    async def send_otp(self, email: Email, code: OTPCode, name: str) -> None:
        """Send a one-time passcode."""
        rendered = render_otp_email(name, code.root, self.otp_expiry_minutes)
        await self._send(email, rendered, debug_info=f"OTP: {code.root}")

    async def send_welcome(self, email: Email, name: str) -> None:
        """Send the welcome email."""
        rendered = render_welcome_email(name, self.frontend_url)
        await self._send(email, rendered)

    async def _send(
        self, email: Email, rendered: RenderedEmail, debug_info: str | None = None
    ) -> None:
        """Deliver a rendered email.

        Raises:
            NotificationError: If the SMTP exchange fails
        """
        if not self.is_configured:
            if not self.allow_unconfigured:
                raise NotificationError("SMTP credentials are not configured")
            logfire.warn(
                "SMTP not configured - email not sent",
                to=email.root,
                subject=rendered.subject,
                debug_info=debug_info,
            )
            return

        message = self._build_message(email, rendered)

        with logfire.span("smtp.send", to=email.root, subject=rendered.subject):
            try:
                await asyncio.to_thread(self._deliver, message)
            except (smtplib.SMTPException, OSError) as e:
                logfire.error(
                    "Email delivery failed",
                    to=email.root,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise NotificationError(f"Failed to send email: {e}") from e

            logfire.info("Email sent", to=email.root, subject=rendered.subject)

    def _build_message(self, email: Email, rendered: RenderedEmail) -> EmailMessage:
        sender = self.settings.from_email or self.settings.smtp_user

        message = EmailMessage()
        message["Subject"] = rendered.subject
        message["From"] = f"{self.settings.from_name} <{sender}>"
        message["To"] = email.root
        message.set_content(rendered.text)
        message.add_alternative(rendered.html, subtype="html")
        return message

    def _deliver(self, message: EmailMessage) -> None:
        with smtplib.SMTP(
            self.settings.smtp_host,
            self.settings.smtp_port,
            timeout=self.settings.timeout,
        ) as server:
            server.starttls()
            server.login(self.settings.smtp_user, self.settings.smtp_password)
            server.send_message(message)


class MockEmailNotifier(EmailNotifier):
    """Notifier that records messages instead of sending them.

    Set ``fail`` to make every send raise NotificationError.
    """

    def __init__(self) -> None:
        self.sent_otps: list[tuple[Email, OTPCode, str]] = []
        self.sent_welcomes: list[tuple[Email, str]] = []
        self.fail = False

    async def send_otp(self, email: Email, code: OTPCode, name: str) -> None:
        """Record a passcode email."""
        if self.fail:
            raise NotificationError("Mock delivery failure")
        self.sent_otps.append((email, code, name))

    async def send_welcome(self, email: Email, name: str) -> None:
        """Record a welcome email."""
        if self.fail:
            raise NotificationError("Mock delivery failure")
        self.sent_welcomes.append((email, name))

    def last_otp_for(self, email: Email) -> OTPCode | None:
        """Return the most recent code sent to an address."""
        for sent_to, code, _ in reversed(self.sent_otps):
            if sent_to == email:
                return code
        return None
