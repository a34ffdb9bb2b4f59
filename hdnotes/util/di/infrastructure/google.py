"""Google infrastructure providers."""

from dishka import Scope, provide

from hdnotes.adapter.google import RealGoogleOAuthClient
from hdnotes.config import Settings
from hdnotes.domain.service import OAuthClient
from hdnotes.util.di.base import ProviderBase


class GoogleProvider(ProviderBase):
    """Google component base."""

    __mock_component__ = "google"


class ProdGoogleProvider(GoogleProvider):
    """Production Google provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_google_oauth_client(self, settings: Settings) -> OAuthClient:
        """Provide Google OAuth client.

        Returns:
            Google OAuth 2.0 client
        """
        return RealGoogleOAuthClient(
            client_id=settings.auth.google.client_id,
            client_secret=settings.auth.google.client_secret,
            redirect_uri=settings.auth.google_callback_url,
            state_ttl_seconds=settings.auth.google.state_ttl_seconds,
        )
