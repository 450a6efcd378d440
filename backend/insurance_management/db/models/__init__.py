"""
Models package — re-exports Base and all models.

Import models here so Alembic's `target_metadata = Base.metadata`
picks up every table automatically.

When adding a new model:
    1. Create `insurance_management/db/models/<table_name>.py`
    2. Import it here
"""

from insurance_management.db.models.base import Base
from insurance_management.db.models.feedback import Feedback
from insurance_management.db.models.insurance import Insurance
from insurance_management.db.models.payment import Payment
from insurance_management.db.models.purchase import Purchase
from insurance_management.db.models.user import User

__all__ = [
    "Base",
    "Feedback",
    "Insurance",
    "Payment",
    "Purchase",
    "User",
]
