"""Purchase endpoints. Single purchases are addressed by insurance id + user id."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Body, Depends

from insurance_management.api.deps import get_purchase_controller
from insurance_management.api.schemas.common import MessageResponse
from insurance_management.api.schemas.purchase import (
    InsertPurchaseDTO,
    PurchaseDetailsDTO,
    PurchaseDTO,
    PurchaseStatusResponse,
    UpdatePurchaseStatusDTO,
)
from insurance_management.controllers import PurchaseController
from insurance_management.core.constants import Messages

router = APIRouter(prefix="/purchase", tags=["Purchase"])

NOT_FOUND = {404: {"description": "Purchase not found"}}


@router.get("", response_model=list[PurchaseDTO])
async def list_purchases(
    controller: PurchaseController = Depends(get_purchase_controller),
) -> list[PurchaseDTO]:
    return await controller.get_all()


@router.get("/details", response_model=list[PurchaseDetailsDTO])
async def get_purchase_details(
    controller: PurchaseController = Depends(get_purchase_controller),
) -> list[PurchaseDetailsDTO]:
    """Purchases joined with buyer and policy details, newest first."""
    return await controller.get_purchase_details()


@router.get("/{insurance_id}/{user_id}", response_model=PurchaseDTO, responses=NOT_FOUND)
async def get_purchase(
    insurance_id: UUID,
    user_id: UUID,
    controller: PurchaseController = Depends(get_purchase_controller),
) -> PurchaseDTO:
    return await controller.get_by_id(insurance_id, user_id)


@router.post("", response_model=PurchaseDTO)
async def create_purchase(
    payload: InsertPurchaseDTO,
    controller: PurchaseController = Depends(get_purchase_controller),
) -> PurchaseDTO:
    """Record a user buying a policy."""
    return await controller.create(payload)


@router.put("/{insurance_id}/{user_id}", response_model=PurchaseStatusResponse, responses=NOT_FOUND)
async def update_purchase(
    insurance_id: UUID,
    user_id: UUID,
    payload: UpdatePurchaseStatusDTO | None = Body(None),
    controller: PurchaseController = Depends(get_purchase_controller),
) -> PurchaseStatusResponse:
    """Set the purchase status (defaults to Confirmed when no body is sent)."""
    return await controller.update_status(insurance_id, user_id, payload or UpdatePurchaseStatusDTO())


@router.delete("/{insurance_id}/{user_id}", response_model=MessageResponse, responses=NOT_FOUND)
async def delete_purchase(
    insurance_id: UUID,
    user_id: UUID,
    controller: PurchaseController = Depends(get_purchase_controller),
) -> MessageResponse:
    await controller.delete_purchase(insurance_id, user_id)
    return MessageResponse(message=Messages.DELETED)
