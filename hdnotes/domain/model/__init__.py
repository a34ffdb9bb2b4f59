"""Domain model entities for HD Notes."""

from hdnotes.domain.model.user import User

__all__ = [
    "User",
]
