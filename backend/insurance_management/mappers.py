"""
DTO ↔ entity conversions.

One explicit function per direction and entity:
    - `<entity>_to_dto(entity)`       : outward read shape
    - `<entity>_from_insert(dto)`     : new, unsaved entity (no id)
    - `apply_<entity>_update(entity, dto)`: overwrite only the fields the
      client sent; everything else stays as stored
"""

from __future__ import annotations

from decimal import Decimal

from insurance_management.api.schemas.feedback import FeedbackDTO, InsertFeedbackDTO
from insurance_management.api.schemas.insurance import InsertInsuranceDTO, InsuranceDTO, UpdateInsuranceDTO
from insurance_management.api.schemas.payment import InsertPaymentDTO, PaymentDTO, UpdatePaymentDTO
from insurance_management.api.schemas.purchase import InsertPurchaseDTO, PurchaseDetailsDTO, PurchaseDTO
from insurance_management.api.schemas.user import InsertUserDTO, UpdateUserDTO, UserDTO
from insurance_management.core.constants import PaymentStatus, PurchaseStatus, UserRole
from insurance_management.db.models.base import utcnow
from insurance_management.db.models.feedback import Feedback
from insurance_management.db.models.insurance import Insurance
from insurance_management.db.models.payment import Payment
from insurance_management.db.models.purchase import Purchase
from insurance_management.db.models.user import User
from insurance_management.repositories.purchases import PurchaseDetailsRow


def _to_decimal(value: float | None) -> Decimal | None:
    return None if value is None else Decimal(str(value))


def _to_float(value: Decimal | float | None) -> float | None:
    return None if value is None else float(value)


def _apply(entity: object, dto, allowed: set[str]) -> None:
    """Copy every explicitly-set, non-null field of ``dto`` in ``allowed`` onto ``entity``."""
    for key, value in dto.model_dump(exclude_unset=True).items():
        if key not in allowed or value is None:
            continue
        setattr(entity, key, value)


# ─── Feedback ─────────────────────────────────
def feedback_to_dto(feedback: Feedback) -> FeedbackDTO:
    return FeedbackDTO(
        id=feedback.id,
        name=feedback.name,
        email=feedback.email,
        phone=feedback.phone,
        content=feedback.content,
        is_purchased=bool(feedback.is_purchased),
        created_at=feedback.created_at,
        updated_at=feedback.updated_at,
    )


def feedback_from_insert(dto: InsertFeedbackDTO) -> Feedback:
    return Feedback(
        name=dto.name,
        email=dto.email,
        phone=dto.phone,
        content=dto.content,
        is_purchased=False,
    )


# ─── Insurance ────────────────────────────────
def insurance_to_dto(insurance: Insurance) -> InsuranceDTO:
    return InsuranceDTO(
        id=insurance.id,
        name=insurance.name,
        description=insurance.description,
        price=_to_float(insurance.price) or 0.0,
        duration_months=insurance.duration_months,
        image=insurance.image,
        created_at=insurance.created_at,
        updated_at=insurance.updated_at,
    )


def insurance_from_insert(dto: InsertInsuranceDTO) -> Insurance:
    return Insurance(
        name=dto.name,
        description=dto.description,
        price=_to_decimal(dto.price),
        duration_months=dto.duration_months,
        image=dto.image,
    )


def apply_insurance_update(insurance: Insurance, dto: UpdateInsuranceDTO) -> Insurance:
    _apply(insurance, dto, {"name", "description", "duration_months"})
    if "price" in dto.model_fields_set and dto.price is not None:
        insurance.price = _to_decimal(dto.price)
    return insurance


# ─── Payment ──────────────────────────────────
def payment_to_dto(payment: Payment) -> PaymentDTO:
    return PaymentDTO(
        id=payment.id,
        name=payment.name,
        email=payment.email,
        phone=payment.phone,
        bank_account=payment.bank_account,
        amount=_to_float(payment.amount),
        status=payment.status,
        reason=payment.reason,
        created_at=payment.created_at,
        updated_at=payment.updated_at,
    )


def payment_from_insert(dto: InsertPaymentDTO) -> Payment:
    return Payment(
        name=dto.name,
        email=dto.email,
        phone=dto.phone,
        bank_account=dto.bank_account,
        amount=_to_decimal(dto.amount),
        status=PaymentStatus.PENDING.value,
        reason=dto.reason,
    )


def apply_payment_update(payment: Payment, dto: UpdatePaymentDTO) -> Payment:
    _apply(payment, dto, {"status", "reason"})
    return payment


# ─── Purchase ─────────────────────────────────
def purchase_to_dto(purchase: Purchase) -> PurchaseDTO:
    return PurchaseDTO(
        id=purchase.id,
        user_id=purchase.user_id,
        insurance_id=purchase.insurance_id,
        status=purchase.status,
        purchase_date=purchase.purchase_date,
    )


def purchase_from_insert(dto: InsertPurchaseDTO) -> Purchase:
    return Purchase(
        user_id=dto.user_id,
        insurance_id=dto.insurance_id,
        status=dto.status or PurchaseStatus.PENDING.value,
        purchase_date=utcnow(),
    )


def purchase_details_to_dto(row: PurchaseDetailsRow) -> PurchaseDetailsDTO:
    return PurchaseDetailsDTO(
        id=row.id,
        user_id=row.user_id,
        insurance_id=row.insurance_id,
        email=row.email,
        name=row.name,
        phone=row.phone,
        insurance_name=row.insurance_name,
        insurance_price=_to_float(row.insurance_price) or 0.0,
        status=row.status,
        purchase_date=row.purchase_date,
    )


# ─── User ─────────────────────────────────────
def user_to_dto(user: User) -> UserDTO:
    return UserDTO(
        id=user.id,
        email=user.email,
        name=user.name,
        phone=user.phone,
        role=user.role,
        created_at=user.created_at,
    )


def user_from_insert(dto: InsertUserDTO, hashed_password: str) -> User:
    return User(
        email=dto.email.lower().strip(),
        password=hashed_password,
        name=dto.name,
        phone=dto.phone,
        role=UserRole.CUSTOMER.value,
    )


def apply_user_update(user: User, dto: UpdateUserDTO) -> User:
    _apply(user, dto, {"name", "phone"})
    return user
