"""
Password hashing (bcrypt) and access tokens (JWT via python-jose).

Controllers depend on the ``PasswordHasher`` and ``TokenIssuer`` protocols
rather than on these implementations, so tests can hand in fakes.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Protocol

import bcrypt
from jose import JWTError, jwt

from insurance_management.api.schemas.user import UserDTO
from insurance_management.core.config import settings
from insurance_management.core.logging import get_logger

logger = get_logger(__name__)


class PasswordHasher(Protocol):
    def hash_password(self, password: str) -> str: ...

    def verify_password(self, password: str, hashed_password: str) -> bool: ...


class TokenIssuer(Protocol):
    def create_token(self, user: UserDTO) -> str: ...

    def decode_token(self, token: str) -> dict[str, Any] | None: ...


# ─── Functional helpers ───────────────────────
def hash_password(password: str) -> str:
    """Hash a plaintext password with a fresh bcrypt salt."""
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt())
    return hashed.decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    """Constant-time comparison of a plaintext password against a bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash, or the password is over 72 bytes
        logger.warning("Password could not be checked against stored hash")
        return False


def create_access_token(claims: dict[str, Any], expires_minutes: int | None = None) -> str:
    """Sign ``claims`` into a JWT with an ``exp`` claim."""
    minutes = expires_minutes or settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES
    to_encode = claims.copy()
    to_encode["exp"] = datetime.now(timezone.utc) + timedelta(minutes=minutes)
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict[str, Any] | None:
    """Verify signature and expiry. Returns the payload, or None when invalid."""
    try:
        return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as exc:
        logger.info("Rejected access token", error=str(exc))
        return None


# ─── Protocol implementations ─────────────────
class BcryptPasswordHasher:
    """PasswordHasher backed by bcrypt."""

    def hash_password(self, password: str) -> str:
        return hash_password(password)

    def verify_password(self, password: str, hashed_password: str) -> bool:
        return verify_password(password, hashed_password)


class JWTTokenIssuer:
    """TokenIssuer that signs a user's public profile into a JWT."""

    def create_token(self, user: UserDTO) -> str:
        return create_access_token(
            {
                "sub": str(user.id),
                "email": user.email,
                "role": user.role,
            }
        )

    def decode_token(self, token: str) -> dict[str, Any] | None:
        return decode_access_token(token)
