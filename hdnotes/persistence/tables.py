"""SQLAlchemy table definitions for HD Notes.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Date,
    Index,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(100), nullable=False),
    Column("email", String(254), nullable=False, unique=True),  # Normalized
    Column("date_of_birth", Date, nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column("auth_provider", String(20), nullable=False, server_default="email"),
    Column("federated_id", String(255), nullable=True, unique=True),  # Google id
    Column("is_email_verified", Boolean, nullable=False, server_default="false"),
    Column("otp_code", String(10), nullable=True),
    Column("otp_expires_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "(otp_code IS NULL) = (otp_expires_at IS NULL)",
        name="otp_code_and_expiry_together",
    ),
)

Index("idx_users_auth_provider", users_table.c.auth_provider)
