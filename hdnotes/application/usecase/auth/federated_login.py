"""Federated (Google) login use case."""

from typing import Any
from uuid import uuid4

import logfire
from pydantic import AliasChoices, Field, model_validator

from hdnotes.application.usecase.auth.common import AuthResponse, PublicProfile
from hdnotes.application.usecase.base import BaseUseCase, CamelModel
from hdnotes.domain.model import User
from hdnotes.domain.service import JWTService, Notifier, UserService
from hdnotes.domain.value import AuthProvider, Email, FederatedProfile, UserId

DEFAULT_FEDERATED_NAME = "Google User"
PROVIDER_ID_KEYS = ("firebaseUid", "providerId", "provider_id")


class FederatedLoginRequest(CamelModel):
    """Login asserted by the frontend's Google sign-in.

    The frontend posts the Firebase UID as ``firebaseUid``; ``providerId``
    is accepted as well.
    """

    provider_id: str = Field(
        min_length=1,
        validation_alias=AliasChoices(*PROVIDER_ID_KEYS),
    )
    email: Email
    name: str | None = None
    avatar: str | None = None

    @model_validator(mode="before")
    @classmethod
    def require_identity(cls, data: Any) -> Any:
        """Reject a body missing the provider id or email with one message."""
        if isinstance(data, dict):
            has_id = any(data.get(key) for key in PROVIDER_ID_KEYS)
            if not has_id or not data.get("email"):
                raise ValueError("Firebase UID and email are required")
        return data

    @classmethod
    def from_profile(cls, profile: FederatedProfile) -> "FederatedLoginRequest":
        """Build a request from a profile returned by the OAuth callback."""
        return cls(
            provider_id=profile.provider_user_id,
            email=profile.email,
            name=profile.name,
            avatar=profile.avatar_url,
        )


class FederatedLoginUseCase(BaseUseCase):
    """Use case for logging in, linking or registering a Google user."""

    def __init__(
        self,
        user_service: UserService,
        jwt_service: JWTService,
        notifier: Notifier,
    ) -> None:
        """Initialize federated login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
            notifier: Email dispatcher
        """
        self.user_service = user_service
        self.jwt_service = jwt_service
        self.notifier = notifier

    async def execute(self, request: FederatedLoginRequest) -> AuthResponse:
        """Execute federated login.

        Steps:
        1. Look the user up by Google id or email
        2. Existing user without a Google link: attach the id, switch the
           provider to Google and fill a missing avatar
        3. Unknown user: create a verified Google user and send the welcome
        4. Issue a session token

        Repeating the call with the same provider id always resolves to the
        same user.

        Args:
            request: Provider id and profile asserted by the provider

        Returns:
            Session token and public profile
        """
        with logfire.span(
            "federated_login",
            email=request.email.root,
            provider_id=request.provider_id,
        ):
            user = await self.user_service.get_by_federated_identity(
                request.email, request.provider_id
            )

            if user:
                if not user.federated_id:
                    changes = {
                        "federated_id": request.provider_id,
                        "auth_provider": AuthProvider.GOOGLE,
                    }
                    if request.avatar and not user.avatar_url:
                        changes["avatar_url"] = request.avatar
                    user = await self.user_service.save(user.with_changes(**changes))
                    logfire.info("Google account linked", user_id=str(user.id))
            else:
                user = await self.user_service.create(
                    User(
                        id=UserId(uuid4()),
                        name=request.name or DEFAULT_FEDERATED_NAME,
                        email=request.email,
                        avatar_url=request.avatar,
                        auth_provider=AuthProvider.GOOGLE,
                        federated_id=request.provider_id,
                        is_email_verified=True,
                    )
                )
                await self.notifier.send_welcome(user.email, user.name)

            token = self.jwt_service.create_token(str(user.id))

            return AuthResponse(
                message="Google authentication successful",
                token=token,
                user=PublicProfile.from_user(user),
            )
