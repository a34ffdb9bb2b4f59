"""Mock persistence providers for testing."""

from dishka import Scope, provide

from hdnotes.domain.repository import UserRepository
from hdnotes.persistence.repository.inmemory import InMemoryUserRepository
from hdnotes.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so that every request made through one container sees
    the same users. Each test builds its own container, which keeps tests
    isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()
