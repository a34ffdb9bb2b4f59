"""Unit tests for SMTPEmailNotifier."""

import smtplib
from unittest.mock import MagicMock, patch

import pytest

from hdnotes.adapter.email import SMTPEmailNotifier
from hdnotes.adapter.error import NotificationError
from hdnotes.config import EmailSettings
from hdnotes.domain.value import Email, OTPCode


def _configured() -> EmailSettings:
    return EmailSettings(
        smtp_host="smtp.example.com",
        smtp_port=587,
        smtp_user="mailer@example.com",
        smtp_password="secret",
        from_email="noreply@example.com",
    )


class TestSMTPEmailNotifier:
    """Tests for SMTPEmailNotifier."""

    @pytest.mark.asyncio
    async def test_unconfigured_logs_instead_of_sending(self):
        """Development mode never opens an SMTP connection."""
        notifier = SMTPEmailNotifier(
            EmailSettings(), frontend_url="http://localhost:3000", otp_expiry_minutes=10
        )

        with patch("hdnotes.adapter.email.client.smtplib.SMTP") as smtp:
            await notifier.send_otp(Email("ada@example.com"), OTPCode("123456"), "Ada")

        smtp.assert_not_called()

    @pytest.mark.asyncio
    async def test_unconfigured_fails_when_not_allowed(self):
        """Production refuses to drop emails silently."""
        notifier = SMTPEmailNotifier(
            EmailSettings(),
            frontend_url="https://hdnotes.example",
            otp_expiry_minutes=10,
            allow_unconfigured=False,
        )

        with pytest.raises(NotificationError):
            await notifier.send_welcome(Email("ada@example.com"), "Ada")

    @pytest.mark.asyncio
    async def test_sends_multipart_message(self):
        """Configured notifier logs in over STARTTLS and sends HTML plus text."""
        notifier = SMTPEmailNotifier(
            _configured(), frontend_url="http://localhost:3000", otp_expiry_minutes=10
        )
        server = MagicMock()

        with patch("hdnotes.adapter.email.client.smtplib.SMTP") as smtp:
            smtp.return_value.__enter__.return_value = server
            await notifier.send_otp(Email("ada@example.com"), OTPCode("482913"), "Ada")

        smtp.assert_called_once_with("smtp.example.com", 587, timeout=10.0)
        server.starttls.assert_called_once()
        server.login.assert_called_once_with("mailer@example.com", "secret")

        message = server.send_message.call_args.args[0]
        assert message["To"] == "ada@example.com"
        assert message["From"] == "HD Notes <noreply@example.com>"
        assert message.is_multipart()
        assert "482913" in message.get_body(("plain",)).get_content()

    @pytest.mark.asyncio
    async def test_smtp_failure_raises_notification_error(self):
        """Transport errors become NotificationError."""
        notifier = SMTPEmailNotifier(
            _configured(), frontend_url="http://localhost:3000", otp_expiry_minutes=10
        )

        with patch("hdnotes.adapter.email.client.smtplib.SMTP") as smtp:
            smtp.return_value.__enter__.return_value.login.side_effect = (
                smtplib.SMTPAuthenticationError(535, b"bad credentials")
            )
            with pytest.raises(NotificationError):
                await notifier.send_otp(
                    Email("ada@example.com"), OTPCode("482913"), "Ada"
                )
