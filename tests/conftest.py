"""Test configuration and fixtures."""

from datetime import date, datetime, timedelta, timezone
from uuid import uuid4

from hdnotes.domain.model import User
from hdnotes.domain.value import (
    AuthProvider,
    Email,
    OTPCode,
    PendingChallenge,
    UserId,
)


def make_challenge(
    code: str = "123456", issued_seconds_ago: int = 0, expiry_minutes: int = 10
) -> PendingChallenge:
    """Build a challenge as if it had been issued some seconds ago.

    Args:
        code: Passcode of the challenge
        issued_seconds_ago: Age of the challenge
        expiry_minutes: Validity window

    Returns:
        Pending challenge
    """
    issued_at = datetime.now(timezone.utc) - timedelta(seconds=issued_seconds_ago)
    return PendingChallenge(
        code=OTPCode(code),
        expires_at=issued_at + timedelta(minutes=expiry_minutes),
    )


def make_user(
    email: str = "ada@example.com",
    name: str = "Ada Lovelace",
    verified: bool = True,
    provider: AuthProvider = AuthProvider.EMAIL,
    federated_id: str | None = None,
    challenge: PendingChallenge | None = None,
    avatar_url: str | None = None,
) -> User:
    """Build a user for tests."""
    return User(
        id=UserId(uuid4()),
        name=name,
        email=Email(email),
        date_of_birth=date(1990, 12, 10),
        avatar_url=avatar_url,
        auth_provider=provider,
        federated_id=federated_id,
        is_email_verified=verified,
        challenge=challenge,
    )
