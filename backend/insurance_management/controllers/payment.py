"""Payment controller. Only status and reason change after creation."""

from __future__ import annotations

from insurance_management import mappers
from insurance_management.api.schemas.payment import InsertPaymentDTO, PaymentDTO, UpdatePaymentDTO
from insurance_management.controllers.base import EntityController
from insurance_management.db.models.payment import Payment


class PaymentController(EntityController[Payment, PaymentDTO]):
    entity_name = "payment"

    def to_dto(self, entity: Payment) -> PaymentDTO:
        return mappers.payment_to_dto(entity)

    def from_insert(self, dto: InsertPaymentDTO) -> Payment:
        return mappers.payment_from_insert(dto)

    def apply_update(self, entity: Payment, dto: UpdatePaymentDTO) -> Payment:
        return mappers.apply_payment_update(entity, dto)
