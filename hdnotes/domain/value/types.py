"""Domain value objects for HD Notes.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
import secrets
from datetime import datetime
from enum import Enum

from pydantic import field_validator

from hdnotes.domain.value.common import RootValueObject, ValueObject

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
OTP_PATTERN = re.compile(r"^\d{4,10}$")


class AuthProvider(str, Enum):
    """How a user proves their identity.

    EMAIL users sign in with a one-time passcode sent to their inbox.
    GOOGLE is the federated provider; those users never receive passcodes.
    """

    EMAIL = "email"
    GOOGLE = "google"


class Email(RootValueObject[str]):
    """Normalized email address (trimmed, lower-cased)."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Normalize and validate email format."""
        v = v.strip().lower()
        if len(v) > 254:
            raise ValueError("Email is too long")
        if not EMAIL_PATTERN.match(v):
            raise ValueError("Email must be a valid email")
        return v


class OTPCode(RootValueObject[str]):
    """Numeric one-time passcode."""

    @field_validator("root")
    @classmethod
    def validate_code(cls, v: str) -> str:
        """Validate the code is made of digits only."""
        v = v.strip()
        if not OTP_PATTERN.match(v):
            raise ValueError("OTP must be a numeric code")
        return v

    def matches(self, other: "OTPCode") -> bool:
        """Compare codes in constant time."""
        return secrets.compare_digest(self.root, other.root)


class PendingChallenge(ValueObject):
    """Outstanding OTP challenge.

    Code and expiry only exist together: an identity either has a pending
    challenge or it does not.
    """

    code: OTPCode
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        """A code is valid only strictly before expires_at."""
        return now >= self.expires_at


class FederatedProfile(ValueObject):
    """Identity asserted by the federated provider.

    Generic structure for user info returned after a federated login.
    """

    provider: AuthProvider = AuthProvider.GOOGLE
    provider_user_id: str
    email: Email
    name: str | None = None
    avatar_url: str | None = None
