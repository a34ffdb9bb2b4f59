"""Shared base for persisted domain entities."""

from datetime import datetime, timezone
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DomainModel(BaseModel):
    """Frozen entity carrying creation and last-change timestamps.

    Entities never mutate in place; state changes go through
    ``with_changes``, which returns a new instance.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    def with_changes(self, **changes: Any) -> Self:
        """Copy with ``changes`` applied and ``updated_at`` bumped."""
        return self.model_copy(update={**changes, "updated_at": utcnow()})
