"""
Purchase model — a user buying an insurance policy.

Looked up by the (insurance_id, user_id) pair, which is unique. Display
fields such as the user's email or the policy price are joined in at query
time, see `PurchaseRepository.list_details`.
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from insurance_management.db.models.base import Base, generate_uuid, utcnow


class Purchase(Base):
    __tablename__ = "purchases"
    __table_args__ = (
        UniqueConstraint("insurance_id", "user_id", name="uq_purchases_insurance_user"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=generate_uuid
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    insurance_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("insurances.id", ondelete="CASCADE"), nullable=False, index=True
    )
    status: Mapped[str] = mapped_column(String(50), nullable=False, default="Pending")
    purchase_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )

    # ── Relationships ─────────────────────────
    user = relationship("User")
    insurance = relationship("Insurance", back_populates="purchases")

    def __repr__(self) -> str:
        return f"<Purchase id={self.id} user={self.user_id} insurance={self.insurance_id} status={self.status}>"
