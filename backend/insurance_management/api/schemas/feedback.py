"""Feedback request/response schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from insurance_management.api.schemas.common import CamelModel
from insurance_management.validation.fields import Email, NonEmptyStr, PhoneNumber


class InsertFeedbackDTO(CamelModel):
    """Payload for leaving feedback."""

    name: str | None = None
    email: Email | None = None
    phone: PhoneNumber | None = None
    content: NonEmptyStr


class FeedbackDTO(CamelModel):
    id: UUID
    name: str | None
    email: str | None
    phone: str | None
    content: str
    is_purchased: bool
    created_at: datetime
    updated_at: datetime
