"""Get current user use case."""

from uuid import UUID

from pydantic import BaseModel

from hdnotes.application.usecase.auth.common import PublicProfile
from hdnotes.application.usecase.base import BaseUseCase
from hdnotes.domain.service import JWTService, UserService
from hdnotes.domain.value import UserId
from hdnotes.util.jwt import JWTError


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for resolving the session token to a user."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> PublicProfile:
        """Verify the token and load its user.

        Args:
            request: Request with JWT token

        Returns:
            Public profile of the token's user

        Raises:
            JWTError: If token is invalid or expired
            NotFoundError: If user not found
        """
        payload = self.jwt_service.verify_token(request.token)
        try:
            user_id = UserId(UUID(payload.user_id))
        except ValueError:
            raise JWTError("Token subject is not a user id")

        user = await self.user_service.get_by_id(user_id)
        return PublicProfile.from_user(user)
