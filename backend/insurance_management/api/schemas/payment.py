"""Payment request/response schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field

from insurance_management.api.schemas.common import CamelModel
from insurance_management.validation.fields import BankAccount, Email, NonEmptyStr, PhoneNumber


class InsertPaymentDTO(CamelModel):
    """Payload for opening a payment (or refund) request."""

    name: NonEmptyStr
    email: Email | None = None
    phone: PhoneNumber | None = None
    bank_account: BankAccount | None = None
    amount: float | None = Field(None, ge=0)
    reason: str | None = None


class UpdatePaymentDTO(CamelModel):
    """Only status and reason may change after creation."""

    status: NonEmptyStr | None = None
    reason: str | None = None


class PaymentDTO(CamelModel):
    id: UUID
    name: str
    email: str | None
    phone: str | None
    bank_account: str | None
    amount: float | None
    status: str
    reason: str | None
    created_at: datetime
    updated_at: datetime
