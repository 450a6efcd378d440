"""
Purchase repository.

Purchases are addressed by the (insurance_id, user_id) pair rather than by
their own primary key, and expose a read-only details projection joining
users and insurances.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any

from sqlalchemy import select

from insurance_management.db.models.insurance import Insurance
from insurance_management.db.models.purchase import Purchase
from insurance_management.db.models.user import User
from insurance_management.repositories.base import SQLAlchemyRepository


@dataclass
class PurchaseDetailsRow:
    """One denormalized purchase row for the admin dashboard."""

    id: uuid.UUID
    user_id: uuid.UUID
    insurance_id: uuid.UUID
    email: str
    name: str
    phone: str | None
    insurance_name: str
    insurance_price: Decimal
    status: str
    purchase_date: datetime


class PurchaseRepository(SQLAlchemyRepository[Purchase]):
    model = Purchase

    async def get_all(self) -> list[Purchase]:
        stmt = select(Purchase).order_by(Purchase.purchase_date.desc())
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id(self, entity_id: Any, secondary_key: Any = None) -> Purchase | None:
        """Fetch by (insurance_id, user_id)."""
        stmt = select(Purchase).where(
            Purchase.insurance_id == entity_id,
            Purchase.user_id == secondary_key,
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def delete(self, entity_id: Any, secondary_key: Any = None) -> bool:
        purchase = await self.get_by_id(entity_id, secondary_key)
        if purchase is None:
            return False
        await self.db.delete(purchase)
        await self.db.flush()
        return True

    async def list_details(self) -> list[PurchaseDetailsRow]:
        """Join purchases with their user and insurance, newest first."""
        stmt = (
            select(
                Purchase.id,
                Purchase.user_id,
                Purchase.insurance_id,
                User.email,
                User.name,
                User.phone,
                Insurance.name.label("insurance_name"),
                Insurance.price.label("insurance_price"),
                Purchase.status,
                Purchase.purchase_date,
            )
            .join(User, User.id == Purchase.user_id)
            .join(Insurance, Insurance.id == Purchase.insurance_id)
            .order_by(Purchase.purchase_date.desc())
        )
        result = await self.db.execute(stmt)
        return [PurchaseDetailsRow(**row._asdict()) for row in result.all()]
