"""User endpoints: login, registration and account management."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from insurance_management.api.deps import get_current_user, get_user_controller
from insurance_management.api.schemas.common import MessageResponse
from insurance_management.api.schemas.user import (
    ErrorResponse,
    InsertUserDTO,
    LoginResponse,
    UpdateUserDTO,
    UserDTO,
)
from insurance_management.controllers import UserController
from insurance_management.core.constants import Messages

router = APIRouter(prefix="/user", tags=["User"])

NOT_FOUND = {404: {"description": "User not found"}}


@router.get("", response_model=LoginResponse, responses={404: {"model": ErrorResponse}})
async def get_by_email_and_password(
    email: str = Query(..., min_length=1),
    password: str = Query(..., min_length=1),
    controller: UserController = Depends(get_user_controller),
) -> LoginResponse:
    """Authenticate with email and password and receive an access token."""
    return await controller.get_by_email_and_password(email, password)


@router.post("", response_model=UserDTO)
async def register_user(
    payload: InsertUserDTO,
    controller: UserController = Depends(get_user_controller),
) -> UserDTO:
    """Create a customer account."""
    return await controller.create(payload)


@router.get("/me", response_model=UserDTO)
async def read_current_user(current_user: UserDTO = Depends(get_current_user)) -> UserDTO:
    """Return the user the bearer token belongs to."""
    return current_user


@router.get("/all", response_model=list[UserDTO])
async def list_users(
    controller: UserController = Depends(get_user_controller),
) -> list[UserDTO]:
    return await controller.get_all()


@router.get("/{user_id}", response_model=UserDTO, responses=NOT_FOUND)
async def get_user(
    user_id: UUID,
    controller: UserController = Depends(get_user_controller),
) -> UserDTO:
    return await controller.get_by_id(user_id)


@router.put("/{user_id}", response_model=UserDTO, responses=NOT_FOUND)
async def update_user(
    user_id: UUID,
    payload: UpdateUserDTO,
    controller: UserController = Depends(get_user_controller),
) -> UserDTO:
    """Change name and/or phone."""
    return await controller.update(user_id, payload)


@router.delete("/{user_id}", response_model=MessageResponse, responses=NOT_FOUND)
async def delete_user(
    user_id: UUID,
    controller: UserController = Depends(get_user_controller),
) -> MessageResponse:
    await controller.delete(user_id)
    return MessageResponse(message=Messages.DELETED)
