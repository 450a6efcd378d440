"""User, registration and login schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field

from insurance_management.api.schemas.common import CamelModel
from insurance_management.validation.fields import Email, NonEmptyStr, Password, PhoneNumber


class InsertUserDTO(CamelModel):
    """Registration payload."""

    email: Email
    password: Password
    name: NonEmptyStr
    phone: PhoneNumber | None = None


class UpdateUserDTO(CamelModel):
    name: NonEmptyStr | None = None
    phone: PhoneNumber | None = None


class UserDTO(CamelModel):
    """Public profile. Never carries the password hash."""

    id: UUID
    email: str
    name: str
    phone: str | None
    role: str
    created_at: datetime


class LoginResponse(CamelModel):
    token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., ge=1)
    user: UserDTO


class ErrorResponse(CamelModel):
    """Structured failure body, e.g. for unknown accounts."""

    error_code: int
    error_message: str
