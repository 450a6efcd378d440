"""Payment repository."""

from insurance_management.db.models.payment import Payment
from insurance_management.repositories.base import SQLAlchemyRepository


class PaymentRepository(SQLAlchemyRepository[Payment]):
    model = Payment
