"""Models shared by the authentication use cases."""

from datetime import date

from hdnotes.application.usecase.base import CamelModel
from hdnotes.domain.model import User
from hdnotes.domain.value import AuthProvider, Email


class PublicProfile(CamelModel):
    """Fields of a user that are safe to return to a client."""

    id: str
    name: str
    email: Email
    date_of_birth: date | None = None
    avatar: str | None = None
    auth_provider: AuthProvider

    @classmethod
    def from_user(cls, user: User) -> "PublicProfile":
        """Project a user, leaving out the challenge and federated id."""
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            date_of_birth=user.date_of_birth,
            avatar=user.avatar_url,
            auth_provider=user.auth_provider,
        )


class OTPSentResponse(CamelModel):
    """Response after a passcode was emailed."""

    message: str
    email: Email


class AuthResponse(CamelModel):
    """Response carrying a session token."""

    message: str
    token: str
    user: PublicProfile
