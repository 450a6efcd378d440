"""API schema package."""

from insurance_management.api.schemas.common import CamelModel, MessageResponse
from insurance_management.api.schemas.feedback import FeedbackDTO, InsertFeedbackDTO
from insurance_management.api.schemas.insurance import InsertInsuranceDTO, InsuranceDTO, UpdateInsuranceDTO
from insurance_management.api.schemas.payment import InsertPaymentDTO, PaymentDTO, UpdatePaymentDTO
from insurance_management.api.schemas.purchase import (
    InsertPurchaseDTO,
    PurchaseDetailsDTO,
    PurchaseDTO,
    PurchaseStatusResponse,
    UpdatePurchaseStatusDTO,
)
from insurance_management.api.schemas.user import (
    ErrorResponse,
    InsertUserDTO,
    LoginResponse,
    UpdateUserDTO,
    UserDTO,
)

__all__ = [
    "CamelModel",
    "MessageResponse",
    "FeedbackDTO",
    "InsertFeedbackDTO",
    "InsertInsuranceDTO",
    "InsuranceDTO",
    "UpdateInsuranceDTO",
    "InsertPaymentDTO",
    "PaymentDTO",
    "UpdatePaymentDTO",
    "InsertPurchaseDTO",
    "PurchaseDetailsDTO",
    "PurchaseDTO",
    "PurchaseStatusResponse",
    "UpdatePurchaseStatusDTO",
    "ErrorResponse",
    "InsertUserDTO",
    "LoginResponse",
    "UpdateUserDTO",
    "UserDTO",
]
