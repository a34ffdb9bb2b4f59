"""PostgreSQL repository implementations."""

from hdnotes.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
]
