"""Infrastructure providers."""

# Import bases
from .email import EmailProvider
from .google import GoogleProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .email import ProdEmailProvider  # noqa: F401
from .google import ProdGoogleProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "EmailProvider",
    "GoogleProvider",
    "PersistenceProvider",
    "ProdEmailProvider",
    "ProdGoogleProvider",
    "ProdPersistenceProvider",
]
