"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from hdnotes.domain.model.user import User
from hdnotes.domain.value import Email, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: The user's normalized email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_federated_id(self, federated_id: str) -> Optional[User]:
        """Find a user by their Google account id.

        Args:
            federated_id: The user's ID on the federated provider

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email_or_federated_id(
        self, email: Email, federated_id: str
    ) -> Optional[User]:
        """Find a user matching either key.

        A federated id match wins over an email match.

        Args:
            email: The user's normalized email address
            federated_id: The user's ID on the federated provider

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: The user to insert

        Returns:
            The created user
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update), overwriting every stored field.

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
