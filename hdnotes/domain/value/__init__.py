"""Domain value objects for HD Notes."""

from hdnotes.domain.value.identifiers import UserId
from hdnotes.domain.value.types import (
    AuthProvider,
    Email,
    FederatedProfile,
    OTPCode,
    PendingChallenge,
)

__all__ = [
    # Identifiers
    "UserId",
    # Types
    "AuthProvider",
    "Email",
    "FederatedProfile",
    "OTPCode",
    "PendingChallenge",
]
