"""User domain service."""

import logfire

from hdnotes.domain.error import NotFoundError
from hdnotes.domain.model import User
from hdnotes.domain.repository import UserRepository
from hdnotes.domain.value import Email, UserId

from .base import Service


class UserService(Service):
    """Domain service for user lookups and persistence."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_by_email(self, email: Email) -> User | None:
        """Get user by email.

        Args:
            email: Normalized email address

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_by_email", email=email.root):
            user = await self.user_repository.find_by_email(email)
            if user:
                logfire.info("User found", email=email.root, user_id=str(user.id))
            else:
                logfire.info("User not found", email=email.root)
            return user

    async def get_by_federated_identity(
        self, email: Email, federated_id: str
    ) -> User | None:
        """Get the user linked to a Google account, or owning its email.

        Args:
            email: Email asserted by the provider
            federated_id: Google account id

        Returns:
            User if found, None otherwise
        """
        with logfire.span(
            "user_service.get_by_federated_identity",
            email=email.root,
            federated_id=federated_id,
        ):
            user = await self.user_repository.find_by_email_or_federated_id(
                email, federated_id
            )
            if user:
                logfire.info(
                    "User found",
                    user_id=str(user.id),
                    linked=user.federated_id is not None,
                )
            return user

    async def create(self, user: User) -> User:
        """Create a new user.

        Args:
            user: User to insert

        Returns:
            Created user
        """
        with logfire.span(
            "user_service.create",
            user_id=str(user.id),
            auth_provider=user.auth_provider.value,
        ):
            created = await self.user_repository.create(user)
            logfire.info(
                "User created",
                user_id=str(created.id),
                auth_provider=created.auth_provider.value,
            )
            return created

    async def save(self, user: User) -> User:
        """Save user (create or update).

        Args:
            user: User to save

        Returns:
            Saved user
        """
        with logfire.span("user_service.save", user_id=str(user.id)):
            saved = await self.user_repository.save(user)
            logfire.info(
                "User saved",
                user_id=str(saved.id),
                is_email_verified=saved.is_email_verified,
                has_challenge=saved.challenge is not None,
            )
            return saved
