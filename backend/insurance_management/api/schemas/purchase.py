"""Purchase request/response schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from insurance_management.api.schemas.common import CamelModel
from insurance_management.core.constants import PurchaseStatus
from insurance_management.validation.fields import NonEmptyStr


class InsertPurchaseDTO(CamelModel):
    user_id: UUID
    insurance_id: UUID
    status: NonEmptyStr | None = None


class UpdatePurchaseStatusDTO(CamelModel):
    status: NonEmptyStr = PurchaseStatus.CONFIRMED.value


class PurchaseDTO(CamelModel):
    id: UUID
    user_id: UUID
    insurance_id: UUID
    status: str
    purchase_date: datetime


class PurchaseStatusResponse(CamelModel):
    """Confirmation returned after a status change."""

    message: str
    data: PurchaseDTO


class PurchaseDetailsDTO(CamelModel):
    """Read-only purchase row joined with its user and insurance."""

    id: UUID
    user_id: UUID
    insurance_id: UUID
    email: str
    name: str
    phone: str | None
    insurance_name: str
    insurance_price: float
    status: str
    purchase_date: datetime
