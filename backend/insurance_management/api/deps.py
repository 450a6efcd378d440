"""Shared dependencies for API routes.

Routes receive fully-wired controllers.  Tests swap the repository and
side-service providers through ``app.dependency_overrides``.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, AsyncGenerator
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from insurance_management.api.schemas.user import UserDTO
from insurance_management.controllers import (
    FeedbackController,
    InsuranceController,
    PaymentController,
    PurchaseController,
    UserController,
)
from insurance_management.core.security import (
    BcryptPasswordHasher,
    JWTTokenIssuer,
    PasswordHasher,
    TokenIssuer,
)
from insurance_management.db.session import get_db as _get_db
from insurance_management.mappers import user_to_dto
from insurance_management.repositories import (
    FeedbackRepository,
    InsuranceRepository,
    PaymentRepository,
    PurchaseRepository,
    UserRepository,
)
from insurance_management.storage.uploader import ObjectStorageUploader, S3Uploader

security_scheme = HTTPBearer(auto_error=False)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async DB session."""
    async for session in _get_db():
        yield session


# ─── Side services ────────────────────────────
def get_password_hasher() -> PasswordHasher:
    return BcryptPasswordHasher()


def get_token_issuer() -> TokenIssuer:
    return JWTTokenIssuer()


@lru_cache
def get_uploader() -> ObjectStorageUploader:
    """One S3 client per process; boto3 clients are thread-safe."""
    return S3Uploader()


# ─── Repositories ─────────────────────────────
def get_feedback_repository(db: AsyncSession = Depends(get_db)) -> FeedbackRepository:
    return FeedbackRepository(db)


def get_insurance_repository(db: AsyncSession = Depends(get_db)) -> InsuranceRepository:
    return InsuranceRepository(db)


def get_payment_repository(db: AsyncSession = Depends(get_db)) -> PaymentRepository:
    return PaymentRepository(db)


def get_purchase_repository(db: AsyncSession = Depends(get_db)) -> PurchaseRepository:
    return PurchaseRepository(db)


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    return UserRepository(db)


# ─── Controllers ──────────────────────────────
def get_feedback_controller(
    repository: FeedbackRepository = Depends(get_feedback_repository),
) -> FeedbackController:
    return FeedbackController(repository)


def get_insurance_controller(
    repository: InsuranceRepository = Depends(get_insurance_repository),
    uploader: ObjectStorageUploader = Depends(get_uploader),
) -> InsuranceController:
    return InsuranceController(repository, uploader)


def get_payment_controller(
    repository: PaymentRepository = Depends(get_payment_repository),
) -> PaymentController:
    return PaymentController(repository)


def get_purchase_controller(
    repository: PurchaseRepository = Depends(get_purchase_repository),
    users: UserRepository = Depends(get_user_repository),
    insurances: InsuranceRepository = Depends(get_insurance_repository),
) -> PurchaseController:
    return PurchaseController(repository, users, insurances)


def get_user_controller(
    repository: UserRepository = Depends(get_user_repository),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
) -> UserController:
    return UserController(repository, password_hasher, token_issuer)


# ─── Authentication ───────────────────────────
async def get_current_token_payload(
    credentials: HTTPAuthorizationCredentials | None = Depends(security_scheme),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
) -> dict[str, Any]:
    """Extract and validate JWT payload from bearer token."""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication credentials were not provided",
        )

    payload = token_issuer.decode_token(credentials.credentials)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )
    return payload


async def get_current_user(
    repository: UserRepository = Depends(get_user_repository),
    token_payload: dict[str, Any] = Depends(get_current_token_payload),
) -> UserDTO:
    """Resolve the user named by the token's subject."""
    subject = token_payload.get("sub")
    try:
        user_id = UUID(str(subject))
    except (TypeError, ValueError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication token",
        ) from None

    user = await repository.get_by_id(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or deleted user",
        )

    return user_to_dto(user)
