"""Mappers for converting between database rows and domain models.

The pending challenge is stored as two nullable columns and rebuilt as a
single value here; a row never yields half a challenge.
"""

from typing import Any, Dict
from uuid import UUID

from hdnotes.domain.model import User
from hdnotes.domain.value import (
    AuthProvider,
    Email,
    OTPCode,
    PendingChallenge,
    UserId,
)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    challenge = None
    if row.get("otp_code") is not None and row.get("otp_expires_at") is not None:
        challenge = PendingChallenge(
            code=OTPCode(row["otp_code"]),
            expires_at=row["otp_expires_at"],
        )

    return User(
        id=UserId(UUID(row["id"]) if isinstance(row["id"], str) else row["id"]),
        name=row["name"],
        email=Email(row["email"]),
        date_of_birth=row.get("date_of_birth"),
        avatar_url=row.get("avatar_url"),
        auth_provider=AuthProvider(row["auth_provider"]),
        federated_id=row.get("federated_id"),
        is_email_verified=row["is_email_verified"],
        challenge=challenge,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email.root,
        "date_of_birth": user.date_of_birth,
        "avatar_url": user.avatar_url,
        "auth_provider": user.auth_provider.value,
        "federated_id": user.federated_id,
        "is_email_verified": user.is_email_verified,
        "otp_code": user.challenge.code.root if user.challenge else None,
        "otp_expires_at": user.challenge.expires_at if user.challenge else None,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }
