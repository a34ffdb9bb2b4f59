"""Google OAuth 2.0 client implementation.

Implements the authorization code flow for "Sign in with Google".
"""

import time
from urllib.parse import urlencode

import httpx
import logfire

from hdnotes.adapter.error import ProviderError
from hdnotes.domain.service.auth_service import OAuthClient
from hdnotes.domain.value import AuthProvider, Email, FederatedProfile


class GoogleOAuthError(ProviderError):
    """Google OAuth error."""

    pass


class GoogleOAuthClient(OAuthClient):
    """Base class for Google OAuth clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealGoogleOAuthClient(GoogleOAuthClient):
    """Google OAuth 2.0 client requesting the ``openid email profile`` scopes."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        state_ttl_seconds: float = 600,
    ) -> None:
        """Initialize Google OAuth client.

        Args:
            client_id: Google OAuth client ID
            client_secret: Google OAuth client secret
            redirect_uri: Callback URL registered with Google
            state_ttl_seconds: How long an issued state stays redeemable
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.state_ttl_seconds = state_ttl_seconds

        self.authorize_url = "https://accounts.google.com/o/oauth2/v2/auth"
        self.token_url = "https://oauth2.googleapis.com/token"
        self.user_info_url = "https://openidconnect.googleapis.com/v1/userinfo"

        # Outstanding state -> monotonic issue time (in-memory, single process)
        self._pending_states: dict[str, float] = {}

    def _evict_expired_states(self, now: float) -> None:
        expired = [
            state
            for state, issued_at in self._pending_states.items()
            if now - issued_at >= self.state_ttl_seconds
        ]
        for state in expired:
            del self._pending_states[state]
        if expired:
            logfire.debug("Evicted expired Google OAuth states", count=len(expired))

    async def initiate_authorization(self, state: str) -> str:
        """Initiate Google OAuth authorization flow.

        Args:
            state: State parameter for CSRF protection

        Returns:
            Authorization URL to redirect user to
        """
        now = time.monotonic()
        self._evict_expired_states(now)
        self._pending_states[state] = now

        params = {
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "scope": "openid email profile",
            "state": state,
            "prompt": "select_account",
        }

        logfire.info(
            "Google OAuth authorization initiated", redirect_uri=self.redirect_uri
        )

        return f"{self.authorize_url}?{urlencode(params)}"

    async def complete_authorization(self, code: str, state: str) -> FederatedProfile:
        """Complete Google OAuth authorization flow.

        Args:
            code: Authorization code from Google callback
            state: State parameter for verification

        Returns:
            User information from Google

        Raises:
            GoogleOAuthError: If the state is unknown, expired or the exchange
                fails
        """
        self._evict_expired_states(time.monotonic())
        if self._pending_states.pop(state, None) is None:
            logfire.error("Google OAuth state not found")
            raise GoogleOAuthError("Invalid or expired state parameter")

        access_token = await self._exchange_code_for_token(code)
        user_info = await self._get_user_info(access_token)

        if not user_info.get("email") or not user_info.get("email_verified", False):
            raise GoogleOAuthError("Google account has no verified email")

        logfire.info("Google OAuth completed", provider_user_id=user_info["sub"])

        return FederatedProfile(
            provider=AuthProvider.GOOGLE,
            provider_user_id=user_info["sub"],
            email=Email(user_info["email"]),
            name=user_info.get("name"),
            avatar_url=user_info.get("picture"),
        )

    async def _exchange_code_for_token(self, code: str) -> str:
        """Exchange authorization code for access token.

        Raises:
            GoogleOAuthError: If token exchange fails
        """
        data = {
            "code": code,
            "grant_type": "authorization_code",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri,
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(self.token_url, data=data, timeout=30.0)

                if response.status_code != 200:
                    logfire.error(
                        "Google token exchange failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise GoogleOAuthError(
                        f"Token exchange failed: {response.status_code}"
                    )

                return response.json()["access_token"]

        except httpx.HTTPError as e:
            logfire.error("Google token exchange HTTP error", error=str(e))
            raise GoogleOAuthError(f"HTTP error during token exchange: {e}")

    async def _get_user_info(self, access_token: str) -> dict:
        """Get the OpenID Connect userinfo document.

        Raises:
            GoogleOAuthError: If API request fails
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self.user_info_url,
                    headers={"Authorization": f"Bearer {access_token}"},
                    timeout=30.0,
                )

                if response.status_code != 200:
                    logfire.error(
                        "Google user info request failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise GoogleOAuthError(
                        f"User info request failed: {response.status_code}"
                    )

                return response.json()

        except httpx.HTTPError as e:
            logfire.error("Google user info HTTP error", error=str(e))
            raise GoogleOAuthError(f"HTTP error fetching user info: {e}")


class MockGoogleOAuthClient(GoogleOAuthClient):
    """Mock Google OAuth client for testing.

    Any code completes the flow as the same Google account.
    """

    provider_user_id = "google-oauth2|mock123"
    email = "user@gmail.com"

    async def initiate_authorization(self, state: str) -> str:
        """Return a mock authorization URL."""
        return f"https://accounts.google.com/mock?{urlencode({'state': state, 'mock': 'true'})}"

    async def complete_authorization(self, code: str, state: str) -> FederatedProfile:
        """Return a fixed mock profile."""
        if code == "invalid":
            raise GoogleOAuthError("Mock authorization failed")
        return FederatedProfile(
            provider=AuthProvider.GOOGLE,
            provider_user_id=self.provider_user_id,
            email=Email(self.email),
            name="Mock User",
            avatar_url="https://example.com/avatar.png",
        )
