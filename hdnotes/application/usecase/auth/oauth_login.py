"""Google redirect login use case."""

from pydantic import BaseModel

from hdnotes.application.usecase.auth.common import AuthResponse
from hdnotes.application.usecase.auth.federated_login import (
    FederatedLoginRequest,
    FederatedLoginUseCase,
)
from hdnotes.application.usecase.base import BaseUseCase
from hdnotes.domain.service import AuthService


class OAuthLoginRequest(BaseModel):
    """Parameters of the OAuth callback."""

    code: str  # OAuth authorization code
    state: str  # State parameter for session verification


class OAuthLoginUseCase(BaseUseCase):
    """Use case for completing the Google consent redirect."""

    def __init__(
        self,
        auth_service: AuthService,
        federated_login_use_case: FederatedLoginUseCase,
    ) -> None:
        """Initialize OAuth login use case.

        Args:
            auth_service: Authentication domain service
            federated_login_use_case: Login/link/register step
        """
        self.auth_service = auth_service
        self.federated_login_use_case = federated_login_use_case

    async def execute(self, request: OAuthLoginRequest) -> AuthResponse:
        """Exchange the code for a profile, then run the federated login.

        Args:
            request: OAuth callback parameters

        Returns:
            Session token and public profile
        """
        profile = await self.auth_service.complete_login(request.code, request.state)
        return await self.federated_login_use_case.execute(
            FederatedLoginRequest.from_profile(profile)
        )
