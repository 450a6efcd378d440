"""
Hand-written stand-ins for the controllers' collaborators.

Each fake keeps its state in memory and records the calls tests assert on
(e.g. how many times `delete` or `upload` ran).
"""

from __future__ import annotations

import uuid
from typing import Any

from insurance_management.api.schemas.user import UserDTO
from insurance_management.core.errors import StorageError
from insurance_management.db.models.base import utcnow
from insurance_management.repositories.purchases import PurchaseDetailsRow
from insurance_management.storage.uploader import FilePayload


class FakeRepository:
    """In-memory Repository keyed by entity id."""

    def __init__(self, entities: list[Any] | None = None) -> None:
        self.items: dict[Any, Any] = {}
        self.created: list[Any] = []
        self.updated: list[Any] = []
        self.delete_calls: list[Any] = []
        for entity in entities or []:
            self._stamp(entity)
            self.items[entity.id] = entity

    @staticmethod
    def _stamp(entity: Any) -> None:
        if getattr(entity, "id", None) is None:
            entity.id = uuid.uuid4()
        now = utcnow()
        for column in ("created_at", "updated_at", "purchase_date"):
            if hasattr(type(entity), column) and getattr(entity, column, None) is None:
                setattr(entity, column, now)

    async def get_all(self) -> list[Any]:
        return list(self.items.values())

    async def get_by_id(self, entity_id: Any, secondary_key: Any = None) -> Any | None:
        return self.items.get(entity_id)

    async def create(self, entity: Any) -> Any:
        self._stamp(entity)
        self.items[entity.id] = entity
        self.created.append(entity)
        return entity

    async def update(self, entity: Any) -> Any:
        if hasattr(type(entity), "updated_at"):
            entity.updated_at = utcnow()
        self.items[entity.id] = entity
        self.updated.append(entity)
        return entity

    async def delete(self, entity_id: Any, secondary_key: Any = None) -> bool:
        self.delete_calls.append((entity_id, secondary_key) if secondary_key is not None else entity_id)
        return self.items.pop(entity_id, None) is not None


class FakePurchaseRepository(FakeRepository):
    """Purchases looked up by (insurance_id, user_id)."""

    def __init__(self, entities=None, details: list[PurchaseDetailsRow] | None = None) -> None:
        super().__init__(entities)
        self.details = details or []

    def _find(self, insurance_id: Any, user_id: Any) -> Any | None:
        for purchase in self.items.values():
            if purchase.insurance_id == insurance_id and purchase.user_id == user_id:
                return purchase
        return None

    async def get_by_id(self, entity_id: Any, secondary_key: Any = None) -> Any | None:
        return self._find(entity_id, secondary_key)

    async def delete(self, entity_id: Any, secondary_key: Any = None) -> bool:
        self.delete_calls.append((entity_id, secondary_key))
        purchase = self._find(entity_id, secondary_key)
        if purchase is None:
            return False
        del self.items[purchase.id]
        return True

    async def list_details(self) -> list[PurchaseDetailsRow]:
        return list(self.details)


class FakeUserRepository(FakeRepository):
    async def get_by_email(self, email: str) -> Any | None:
        email = email.lower().strip()
        for user in self.items.values():
            if user.email == email:
                return user
        return None


class FakePasswordHasher:
    """Deterministic hashing: `hashed:<password>`."""

    def hash_password(self, password: str) -> str:
        return f"hashed:{password}"

    def verify_password(self, password: str, hashed_password: str) -> bool:
        return self.hash_password(password) == hashed_password


class FakeTokenIssuer:
    def __init__(self, token: str = "jwtToken") -> None:
        self.token = token
        self.issued_for: list[UserDTO] = []

    def create_token(self, user: UserDTO) -> str:
        self.issued_for.append(user)
        return self.token

    def decode_token(self, token: str) -> dict[str, Any] | None:
        if token != self.token or not self.issued_for:
            return None
        return {"sub": str(self.issued_for[-1].id)}


class FakeUploader:
    def __init__(self, url: str = "https://storage.test/insurance-images/insurances/uploaded.jpg") -> None:
        self.url = url
        self.uploads: list[FilePayload] = []

    async def upload(self, file: FilePayload) -> str:
        self.uploads.append(file)
        return self.url


class FailingUploader(FakeUploader):
    async def upload(self, file: FilePayload) -> str:
        self.uploads.append(file)
        raise StorageError("bucket unreachable", attempts=3)
