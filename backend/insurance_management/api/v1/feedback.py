"""Feedback endpoints."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends

from insurance_management.api.deps import get_feedback_controller
from insurance_management.api.schemas.common import MessageResponse
from insurance_management.api.schemas.feedback import FeedbackDTO, InsertFeedbackDTO
from insurance_management.controllers import FeedbackController
from insurance_management.core.constants import Messages

router = APIRouter(prefix="/feedback", tags=["Feedback"])

NOT_FOUND = {404: {"description": "Feedback not found"}}


@router.get("", response_model=list[FeedbackDTO])
async def list_feedback(
    controller: FeedbackController = Depends(get_feedback_controller),
) -> list[FeedbackDTO]:
    """List all feedback."""
    return await controller.get_all()


@router.get("/{feedback_id}", response_model=FeedbackDTO, responses=NOT_FOUND)
async def get_feedback(
    feedback_id: UUID,
    controller: FeedbackController = Depends(get_feedback_controller),
) -> FeedbackDTO:
    return await controller.get_by_id(feedback_id)


@router.post("", response_model=FeedbackDTO)
async def create_feedback(
    payload: InsertFeedbackDTO,
    controller: FeedbackController = Depends(get_feedback_controller),
) -> FeedbackDTO:
    """Leave new feedback."""
    return await controller.create(payload)


@router.put("/{feedback_id}/purchase", response_model=FeedbackDTO, responses=NOT_FOUND)
async def update_feedback_purchase(
    feedback_id: UUID,
    controller: FeedbackController = Depends(get_feedback_controller),
) -> FeedbackDTO:
    """Mark feedback as linked to a purchase."""
    return await controller.update_purchase(feedback_id)


@router.delete("/{feedback_id}", response_model=MessageResponse, responses=NOT_FOUND)
async def delete_feedback(
    feedback_id: UUID,
    controller: FeedbackController = Depends(get_feedback_controller),
) -> MessageResponse:
    await controller.delete(feedback_id)
    return MessageResponse(message=Messages.DELETED)
