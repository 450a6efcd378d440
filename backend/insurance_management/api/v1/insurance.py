"""Insurance policy endpoints. Updates are multipart so a new cover image can ride along."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, UploadFile
from pydantic import ValidationError

from insurance_management.api.deps import get_insurance_controller
from insurance_management.api.schemas.common import MessageResponse
from insurance_management.api.schemas.insurance import InsertInsuranceDTO, InsuranceDTO, UpdateInsuranceDTO
from insurance_management.controllers import InsuranceController
from insurance_management.core.constants import Messages
from insurance_management.core.errors import FieldValidationError
from insurance_management.storage.uploader import FilePayload
from insurance_management.validation.errors import collect_field_errors

router = APIRouter(prefix="/insurance", tags=["Insurance"])

NOT_FOUND = {404: {"description": "Insurance not found"}}


@router.get("", response_model=list[InsuranceDTO])
async def list_insurances(
    controller: InsuranceController = Depends(get_insurance_controller),
) -> list[InsuranceDTO]:
    """List all insurance policies."""
    return await controller.get_all()


@router.get("/{insurance_id}", response_model=InsuranceDTO, responses=NOT_FOUND)
async def get_insurance(
    insurance_id: UUID,
    controller: InsuranceController = Depends(get_insurance_controller),
) -> InsuranceDTO:
    return await controller.get_by_id(insurance_id)


@router.post("", response_model=InsuranceDTO)
async def create_insurance(
    payload: InsertInsuranceDTO,
    controller: InsuranceController = Depends(get_insurance_controller),
) -> InsuranceDTO:
    """Create a new insurance policy."""
    return await controller.create(payload)


@router.put(
    "/{insurance_id}",
    response_model=InsuranceDTO,
    responses={**NOT_FOUND, 502: {"description": "Image upload failed"}},
)
async def update_insurance(
    insurance_id: UUID,
    name: str | None = Form(None),
    description: str | None = Form(None),
    price: float | None = Form(None),
    duration_months: int | None = Form(None, alias="durationMonths"),
    duration_months_snake: int | None = Form(None, alias="duration_months"),
    image: UploadFile | None = File(None),
    controller: InsuranceController = Depends(get_insurance_controller),
) -> InsuranceDTO:
    """Partially update a policy; an `image` file replaces the cover image."""
    fields: dict[str, Any] = {
        "name": name,
        "description": description,
        "price": price,
        "duration_months": duration_months if duration_months is not None else duration_months_snake,
    }
    try:
        dto = UpdateInsuranceDTO.model_validate(
            {key: value for key, value in fields.items() if value is not None}
        )
    except ValidationError as exc:
        raise FieldValidationError(collect_field_errors(exc.errors()), entity="insurance") from None

    payload = None
    if image is not None and image.filename:
        payload = FilePayload(
            filename=image.filename,
            content=await image.read(),
            content_type=image.content_type,
        )

    return await controller.update(insurance_id, dto, image=payload)


@router.delete("/{insurance_id}", response_model=MessageResponse, responses=NOT_FOUND)
async def delete_insurance(
    insurance_id: UUID,
    controller: InsuranceController = Depends(get_insurance_controller),
) -> MessageResponse:
    await controller.delete(insurance_id)
    return MessageResponse(message=Messages.DELETED)
