"""Federated authentication domain service."""

from hdnotes.domain.value import FederatedProfile

from .base import Service


class OAuthClient:
    """Generic OAuth client interface for federated providers."""

    async def initiate_authorization(self, state: str) -> str:
        """Initiate OAuth authorization flow.

        Args:
            state: State parameter for CSRF protection

        Returns:
            Authorization URL to redirect user to
        """
        raise NotImplementedError

    async def complete_authorization(self, code: str, state: str) -> FederatedProfile:
        """Complete OAuth authorization flow.

        Args:
            code: Authorization code from OAuth callback
            state: State parameter for verification

        Returns:
            Provider user information
        """
        raise NotImplementedError


class AuthService(Service):
    """Domain service for the Google redirect login."""

    def __init__(self, oauth_client: OAuthClient) -> None:
        """Initialize auth service.

        Args:
            oauth_client: Google OAuth client
        """
        self.oauth_client = oauth_client

    async def initiate_login(self, state: str) -> str:
        """Build the provider consent URL.

        Args:
            state: State parameter for CSRF protection

        Returns:
            Authorization URL to redirect user to
        """
        return await self.oauth_client.initiate_authorization(state)

    async def complete_login(self, code: str, state: str) -> FederatedProfile:
        """Exchange the callback code for the user's profile.

        Args:
            code: Authorization code from OAuth callback
            state: State parameter for verification

        Returns:
            User authentication information from provider
        """
        return await self.oauth_client.complete_authorization(code, state)
