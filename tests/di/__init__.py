"""Mock providers for testing."""

from .email import MockEmailProvider
from .google import MockGoogleProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockEmailProvider",
    "MockGoogleProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
