"""
EntityController — generic CRUD orchestration shared by every entity.

A controller looks an entity up, branches on presence, maps between DTO and
entity shapes and hands persistence to its repository.  It never builds
HTTP responses: failures are raised as domain errors (NotFoundError, …)
and translated by the exception handlers in `insurance_management.main`.

Subclasses MUST implement:
    - entity_name (str)          : used in log events and error messages
    - to_dto(entity)             : outward read shape

Subclasses MAY implement:
    - from_insert(dto)           : needed for create()
    - apply_update(entity, dto)  : needed for update()
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from insurance_management.core.errors import NotFoundError
from insurance_management.core.logging import get_logger
from insurance_management.repositories.base import Repository

ModelT = TypeVar("ModelT")
DtoT = TypeVar("DtoT", bound=BaseModel)


class EntityController(ABC, Generic[ModelT, DtoT]):
    entity_name: str = "entity"

    def __init__(self, repository: Repository[ModelT]) -> None:
        self.repository = repository
        self.logger = get_logger(f"controllers.{self.entity_name}")

    @abstractmethod
    def to_dto(self, entity: ModelT) -> DtoT:
        ...

    def from_insert(self, dto: BaseModel) -> ModelT:
        raise NotImplementedError(f"{self.entity_name} does not support create")

    def apply_update(self, entity: ModelT, dto: BaseModel) -> ModelT:
        raise NotImplementedError(f"{self.entity_name} does not support update")

    # ─── Operations ───────────────────────────────

    async def get_all(self) -> list[DtoT]:
        entities = await self.repository.get_all()
        return [self.to_dto(entity) for entity in entities]

    async def get_by_id(self, entity_id: Any, secondary_key: Any = None) -> DtoT:
        entity = await self._get_or_raise(entity_id, secondary_key)
        return self.to_dto(entity)

    async def create(self, dto: BaseModel) -> DtoT:
        entity = self.from_insert(dto)
        created = await self.repository.create(entity)
        self.logger.info(f"{self.entity_name} created", entity_id=str(created.id))
        return self.to_dto(created)

    async def update(self, entity_id: Any, dto: BaseModel) -> DtoT:
        entity = await self._get_or_raise(entity_id)
        self.apply_update(entity, dto)
        updated = await self.repository.update(entity)
        self.logger.info(
            f"{self.entity_name} updated",
            entity_id=str(entity_id),
            fields=sorted(dto.model_fields_set),
        )
        return self.to_dto(updated)

    async def delete(self, entity_id: Any) -> None:
        await self._get_or_raise(entity_id)
        await self.repository.delete(entity_id)
        self.logger.info(f"{self.entity_name} deleted", entity_id=str(entity_id))

    # ─── Helpers ──────────────────────────────────

    async def _get_or_raise(self, entity_id: Any, secondary_key: Any = None) -> ModelT:
        """Fetch an entity or raise NotFoundError."""
        entity = await self.repository.get_by_id(entity_id, secondary_key)
        if entity is None:
            self.logger.info(
                f"{self.entity_name} not found",
                entity_id=str(entity_id),
                secondary_key=None if secondary_key is None else str(secondary_key),
            )
            raise NotFoundError(
                f"{self.entity_name} {entity_id} not found",
                entity=self.entity_name,
                details={"id": str(entity_id)},
            )
        return entity
