"""Domain layer DI providers."""

from dishka import Scope, provide

from hdnotes.config import AuthSettings, OTPSettings
from hdnotes.domain.repository import UserRepository
from hdnotes.domain.service import (
    AuthService,
    JWTService,
    OAuthClient,
    OTPService,
    UserService,
)
from hdnotes.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(self, oauth_client: OAuthClient) -> AuthService:
        """Provide Google authentication domain service."""
        return AuthService(oauth_client=oauth_client)

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_otp_service(self, otp_settings: OTPSettings) -> OTPService:
        """Provide one-time passcode domain service."""
        return OTPService(otp_settings=otp_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)
