"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import case, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from hdnotes.domain.model import User
from hdnotes.domain.repository import UserRepository
from hdnotes.domain.value import Email, UserId
from hdnotes.persistence.mappers import row_to_user, user_to_dict
from hdnotes.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        return await self._fetch_one(stmt)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email."""
        stmt = select(users_table).where(users_table.c.email == email.root)
        return await self._fetch_one(stmt)

    async def find_by_federated_id(self, federated_id: str) -> Optional[User]:
        """Find a user by their Google account id."""
        stmt = select(users_table).where(users_table.c.federated_id == federated_id)
        return await self._fetch_one(stmt)

    async def find_by_email_or_federated_id(
        self, email: Email, federated_id: str
    ) -> Optional[User]:
        """Find a user matching either key, preferring the federated id."""
        stmt = (
            select(users_table)
            .where(
                or_(
                    users_table.c.federated_id == federated_id,
                    users_table.c.email == email.root,
                )
            )
            .order_by(
                case((users_table.c.federated_id == federated_id, 0), else_=1)
            )
            .limit(1)
        )
        return await self._fetch_one(stmt)

    async def create(self, user: User) -> User:
        """Insert a new user."""
        await self.session.execute(users_table.insert().values(**user_to_dict(user)))
        await self.session.flush()
        return user

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        existing = await self.find_by_id(user.id)

        user_dict = user_to_dict(user)

        if existing:
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
            await self.session.execute(stmt)
        else:
            await self.session.execute(users_table.insert().values(**user_dict))

        await self.session.flush()
        return user

    async def _fetch_one(self, stmt) -> Optional[User]:
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None
