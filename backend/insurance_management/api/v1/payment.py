"""Payment endpoints."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends

from insurance_management.api.deps import get_payment_controller
from insurance_management.api.schemas.common import MessageResponse
from insurance_management.api.schemas.payment import InsertPaymentDTO, PaymentDTO, UpdatePaymentDTO
from insurance_management.controllers import PaymentController
from insurance_management.core.constants import Messages

router = APIRouter(prefix="/payment", tags=["Payment"])

NOT_FOUND = {404: {"description": "Payment not found"}}


@router.get("", response_model=list[PaymentDTO])
async def list_payments(
    controller: PaymentController = Depends(get_payment_controller),
) -> list[PaymentDTO]:
    """List all payments."""
    return await controller.get_all()


@router.get("/{payment_id}", response_model=PaymentDTO, responses=NOT_FOUND)
async def get_payment(
    payment_id: UUID,
    controller: PaymentController = Depends(get_payment_controller),
) -> PaymentDTO:
    return await controller.get_by_id(payment_id)


@router.post("", response_model=PaymentDTO)
async def create_payment(
    payload: InsertPaymentDTO,
    controller: PaymentController = Depends(get_payment_controller),
) -> PaymentDTO:
    """Open a payment request."""
    return await controller.create(payload)


@router.put("/{payment_id}", response_model=PaymentDTO, responses=NOT_FOUND)
async def update_payment(
    payment_id: UUID,
    payload: UpdatePaymentDTO,
    controller: PaymentController = Depends(get_payment_controller),
) -> PaymentDTO:
    """Change a payment's status and/or reason."""
    return await controller.update(payment_id, payload)


@router.delete("/{payment_id}", response_model=MessageResponse, responses=NOT_FOUND)
async def delete_payment(
    payment_id: UUID,
    controller: PaymentController = Depends(get_payment_controller),
) -> MessageResponse:
    await controller.delete(payment_id)
    return MessageResponse(message=Messages.DELETED)
