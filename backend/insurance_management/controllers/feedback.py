"""Feedback controller: generic CRUD plus marking feedback as purchased."""

from __future__ import annotations

from uuid import UUID

from insurance_management import mappers
from insurance_management.api.schemas.feedback import FeedbackDTO, InsertFeedbackDTO
from insurance_management.controllers.base import EntityController
from insurance_management.db.models.feedback import Feedback


class FeedbackController(EntityController[Feedback, FeedbackDTO]):
    entity_name = "feedback"

    def to_dto(self, entity: Feedback) -> FeedbackDTO:
        return mappers.feedback_to_dto(entity)

    def from_insert(self, dto: InsertFeedbackDTO) -> Feedback:
        return mappers.feedback_from_insert(dto)

    async def update_purchase(self, feedback_id: UUID) -> FeedbackDTO:
        """Mark the feedback as linked to a purchase. Idempotent."""
        feedback = await self._get_or_raise(feedback_id)
        feedback.is_purchased = True
        updated = await self.repository.update(feedback)
        self.logger.info("feedback marked as purchased", entity_id=str(feedback_id))
        return self.to_dto(updated)
