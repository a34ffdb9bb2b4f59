"""Email infrastructure providers."""

from dishka import Scope, provide

from hdnotes.adapter.email import SMTPEmailNotifier
from hdnotes.config import Settings
from hdnotes.domain.service import Notifier
from hdnotes.util.di.base import ProviderBase


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider delivering over SMTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_notifier(self, settings: Settings) -> Notifier:
        """Provide SMTP notifier.

        Outside production, missing SMTP credentials fall back to logging
        messages instead of sending them.
        """
        return SMTPEmailNotifier(
            settings=settings.email,
            frontend_url=settings.api.frontend_url,
            otp_expiry_minutes=settings.otp.expiry_minutes,
            allow_unconfigured=settings.environment != "production",
        )
