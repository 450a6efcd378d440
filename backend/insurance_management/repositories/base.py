"""
Generic repository over one SQLAlchemy model.

Repository rules:
- Pure data-access logic only
- Every repository receives AsyncSession explicitly
- Methods flush, but never commit
"""

from __future__ import annotations

from typing import Any, ClassVar, Generic, Protocol, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from insurance_management.db.models.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Protocol[ModelT]):
    """Persistence gateway consumed by the entity controllers."""

    async def get_all(self) -> list[ModelT]: ...

    async def get_by_id(self, entity_id: Any, secondary_key: Any = None) -> ModelT | None: ...

    async def create(self, entity: ModelT) -> ModelT: ...

    async def update(self, entity: ModelT) -> ModelT: ...

    async def delete(self, entity_id: Any) -> bool: ...


class SQLAlchemyRepository(Generic[ModelT]):
    """Repository implementation for models keyed by a single `id` column."""

    model: ClassVar[type[Base]]

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_all(self) -> list[ModelT]:
        """Fetch every row, oldest first."""
        stmt = select(self.model)
        if hasattr(self.model, "created_at"):
            stmt = stmt.order_by(self.model.created_at)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id(self, entity_id: Any, secondary_key: Any = None) -> ModelT | None:
        """Fetch by primary key. `secondary_key` is unused for single-key models."""
        return await self.db.get(self.model, entity_id)

    async def create(self, entity: ModelT) -> ModelT:
        """Insert a new row; the primary key is assigned on flush."""
        self.db.add(entity)
        await self.db.flush()
        await self.db.refresh(entity)
        return entity

    async def update(self, entity: ModelT) -> ModelT:
        """Persist changes made to an entity loaded from this session."""
        entity = await self.db.merge(entity)
        await self.db.flush()
        await self.db.refresh(entity)
        return entity

    async def delete(self, entity_id: Any) -> bool:
        """Hard-delete a row. Returns True if a row was deleted."""
        entity = await self.db.get(self.model, entity_id)
        if entity is None:
            return False
        await self.db.delete(entity)
        await self.db.flush()
        return True
