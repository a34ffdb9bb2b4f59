"""Dependency injection wiring.

``PROVIDERS`` lists one entry per layer or swappable component. Swappable
components (email, google, persistence) are bases with a production
subclass here and a mock subclass under ``tests.di``.
"""

from typing import Type

from hdnotes.util.di.application import ProdApplicationProvider
from hdnotes.util.di.base import Component, ProviderBase
from hdnotes.util.di.core import ProdConfigProvider
from hdnotes.util.di.domain import ProdDomainProvider
from hdnotes.util.di.infrastructure import (
    EmailProvider,
    GoogleProvider,
    PersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    EmailProvider,
    GoogleProvider,
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a ``PROVIDERS`` entry to the class to instantiate.

    Raises:
        ValueError: If a component has no implementation of the requested kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for implementation in implementations:
        if implementation.__is_mock__ == use_mock:
            return implementation

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} provider for component {base.__mock_component__!r}")


__all__ = ["Component", "PROVIDERS", "ProviderBase", "get_provider"]
