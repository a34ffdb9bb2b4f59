"""In-memory user repository for testing."""

from typing import Optional

from hdnotes.domain.model.user import User
from hdnotes.domain.repository.user import UserRepository
from hdnotes.domain.value import Email, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Enforces the same uniqueness as the database: one user per email and
    one per federated id.
    """

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def find_by_federated_id(self, federated_id: str) -> Optional[User]:
        """Find a user by their Google account id."""
        for user in self._users.values():
            if user.federated_id == federated_id:
                return user
        return None

    async def find_by_email_or_federated_id(
        self, email: Email, federated_id: str
    ) -> Optional[User]:
        """Find a user matching either key, preferring the federated id."""
        return await self.find_by_federated_id(federated_id) or await self.find_by_email(
            email
        )

    async def create(self, user: User) -> User:
        """Insert a new user."""
        if user.id in self._users:
            raise ValueError(f"User already exists: {user.id}")
        self._check_unique(user)
        self._users[user.id] = user
        return user

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._check_unique(user)
        self._users[user.id] = user
        return user

    def _check_unique(self, user: User) -> None:
        for other in self._users.values():
            if other.id == user.id:
                continue
            if other.email == user.email:
                raise ValueError(f"Email already taken: {user.email}")
            if user.federated_id and other.federated_id == user.federated_id:
                raise ValueError(f"Federated id already taken: {user.federated_id}")

    def count(self) -> int:
        """Number of stored users."""
        return len(self._users)
