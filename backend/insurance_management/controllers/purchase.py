"""
Purchase controller.

Purchases are addressed by (insurance_id, user_id), so a user can buy a
given policy once.  Creation checks both references up front; besides
CRUD the controller serves the joined details view used by the admin
dashboard.
"""

from __future__ import annotations

from uuid import UUID

from insurance_management import mappers
from insurance_management.api.schemas.purchase import (
    InsertPurchaseDTO,
    PurchaseDetailsDTO,
    PurchaseDTO,
    PurchaseStatusResponse,
    UpdatePurchaseStatusDTO,
)
from insurance_management.controllers.base import EntityController
from insurance_management.core.constants import Messages
from insurance_management.core.errors import FieldValidationError
from insurance_management.db.models.insurance import Insurance
from insurance_management.db.models.purchase import Purchase
from insurance_management.db.models.user import User
from insurance_management.repositories.base import Repository
from insurance_management.repositories.purchases import PurchaseRepository


class PurchaseController(EntityController[Purchase, PurchaseDTO]):
    entity_name = "purchase"
    repository: PurchaseRepository

    def __init__(
        self,
        repository: PurchaseRepository,
        users: Repository[User],
        insurances: Repository[Insurance],
    ) -> None:
        super().__init__(repository)
        self.users = users
        self.insurances = insurances

    def to_dto(self, entity: Purchase) -> PurchaseDTO:
        return mappers.purchase_to_dto(entity)

    def from_insert(self, dto: InsertPurchaseDTO) -> Purchase:
        return mappers.purchase_from_insert(dto)

    async def create(self, dto: InsertPurchaseDTO) -> PurchaseDTO:
        errors: dict[str, list[str]] = {}
        if await self.users.get_by_id(dto.user_id) is None:
            errors["userId"] = [Messages.USER_NOT_FOUND]
        if await self.insurances.get_by_id(dto.insurance_id) is None:
            errors["insuranceId"] = [Messages.INSURANCE_NOT_FOUND]
        if not errors and await self.repository.get_by_id(dto.insurance_id, dto.user_id) is not None:
            errors["insuranceId"] = [Messages.PURCHASE_EXISTS]
        if errors:
            raise FieldValidationError(errors, entity=self.entity_name)
        return await super().create(dto)

    async def get_purchase_details(self) -> list[PurchaseDetailsDTO]:
        rows = await self.repository.list_details()
        return [mappers.purchase_details_to_dto(row) for row in rows]

    async def update_status(
        self,
        insurance_id: UUID,
        user_id: UUID,
        dto: UpdatePurchaseStatusDTO,
    ) -> PurchaseStatusResponse:
        purchase = await self._get_or_raise(insurance_id, user_id)
        purchase.status = dto.status
        updated = await self.repository.update(purchase)
        self.logger.info(
            "purchase status updated",
            insurance_id=str(insurance_id),
            user_id=str(user_id),
            status=dto.status,
        )
        return PurchaseStatusResponse(
            message=Messages.PURCHASE_STATUS_UPDATED,
            data=self.to_dto(updated),
        )

    async def delete_purchase(self, insurance_id: UUID, user_id: UUID) -> None:
        await self._get_or_raise(insurance_id, user_id)
        await self.repository.delete(insurance_id, user_id)
        self.logger.info("purchase deleted", insurance_id=str(insurance_id), user_id=str(user_id))
