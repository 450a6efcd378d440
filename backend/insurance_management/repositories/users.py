"""User repository: generic CRUD plus lookup by email."""

from __future__ import annotations

from sqlalchemy import select

from insurance_management.db.models.user import User
from insurance_management.repositories.base import SQLAlchemyRepository


class UserRepository(SQLAlchemyRepository[User]):
    model = User

    async def get_by_email(self, email: str) -> User | None:
        """Fetch a user by email address (case-insensitive)."""
        stmt = select(User).where(User.email == email.lower().strip())
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()
