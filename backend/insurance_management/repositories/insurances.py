"""Insurance policy repository."""

from __future__ import annotations

from sqlalchemy import select

from insurance_management.db.models.insurance import Insurance
from insurance_management.repositories.base import SQLAlchemyRepository


class InsuranceRepository(SQLAlchemyRepository[Insurance]):
    model = Insurance

    async def get_by_name(self, name: str) -> Insurance | None:
        """First policy with exactly this name, if any."""
        stmt = select(Insurance).where(Insurance.name == name).limit(1)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()
