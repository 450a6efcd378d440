"""Insurance policy request/response schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field

from insurance_management.api.schemas.common import CamelModel
from insurance_management.validation.fields import NonEmptyStr


class InsertInsuranceDTO(CamelModel):
    """Payload for creating a policy. `image` is an already-hosted URL."""

    name: NonEmptyStr
    description: str | None = None
    price: float = Field(..., ge=0)
    duration_months: int | None = Field(None, ge=1)
    image: str | None = None


class UpdateInsuranceDTO(CamelModel):
    """Partial update. A new image arrives as a file, not in this DTO."""

    name: NonEmptyStr | None = None
    description: str | None = None
    price: float | None = Field(None, ge=0)
    duration_months: int | None = Field(None, ge=1)


class InsuranceDTO(CamelModel):
    id: UUID
    name: str
    description: str | None
    price: float
    duration_months: int | None
    image: str | None
    created_at: datetime
    updated_at: datetime
