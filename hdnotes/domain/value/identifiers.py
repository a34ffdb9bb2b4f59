"""Strongly typed identifiers for HD Notes domain entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
