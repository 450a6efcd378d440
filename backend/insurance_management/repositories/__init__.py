"""
Repositories package — data-access layer.

Each repository class handles DB operations for one domain entity.
Repositories do NOT handle HTTP concerns or business logic beyond
basic data integrity.

Convention:
    - `SQLAlchemyRepository[Model]` covers get_all / get_by_id / create /
      update / delete for any model with a single `id` primary key
    - Entities needing extra queries subclass it (purchases.py, users.py)
    - Every repository is constructed with an `AsyncSession`
    - Use `flush()` internally; the session commit/rollback is handled
      by the `get_db` dependency in the API layer
"""

from insurance_management.repositories.base import Repository, SQLAlchemyRepository
from insurance_management.repositories.feedbacks import FeedbackRepository
from insurance_management.repositories.insurances import InsuranceRepository
from insurance_management.repositories.payments import PaymentRepository
from insurance_management.repositories.purchases import PurchaseDetailsRow, PurchaseRepository
from insurance_management.repositories.users import UserRepository

__all__ = [
    "Repository",
    "SQLAlchemyRepository",
    "FeedbackRepository",
    "InsuranceRepository",
    "PaymentRepository",
    "PurchaseDetailsRow",
    "PurchaseRepository",
    "UserRepository",
]
