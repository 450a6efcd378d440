"""Controllers package — one EntityController subclass per entity."""

from insurance_management.controllers.base import EntityController
from insurance_management.controllers.feedback import FeedbackController
from insurance_management.controllers.insurance import InsuranceController
from insurance_management.controllers.payment import PaymentController
from insurance_management.controllers.purchase import PurchaseController
from insurance_management.controllers.user import UserController

__all__ = [
    "EntityController",
    "FeedbackController",
    "InsuranceController",
    "PaymentController",
    "PurchaseController",
    "UserController",
]
