"""Repository interfaces for HD Notes domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from hdnotes.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
]
