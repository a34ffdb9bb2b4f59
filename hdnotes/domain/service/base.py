"""Marker base for domain services."""


class Service:
    """Stateless domain logic shared by several use cases.

    Subclasses take their settings and collaborators in ``__init__`` and are
    provided per request by the domain DI provider.
    """
