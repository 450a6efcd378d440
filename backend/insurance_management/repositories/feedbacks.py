"""Feedback repository."""

from insurance_management.db.models.feedback import Feedback
from insurance_management.repositories.base import SQLAlchemyRepository


class FeedbackRepository(SQLAlchemyRepository[Feedback]):
    model = Feedback
