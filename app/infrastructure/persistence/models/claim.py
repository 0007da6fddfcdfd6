"""Claim ORM model. Belongs to a policy."""

from datetime import datetime

from sqlalchemy import DateTime, Enum, Float, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.enums import ClaimStatus
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import UserOwnedModel


class Claim(UserOwnedModel, Base):
    """Claim entity. Table: claim. Links to its insurance_policy."""

    __tablename__ = "claim"

    policy_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("insurance_policy.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    claim_number: Mapped[str] = mapped_column(String, nullable=False)
    status: Mapped[ClaimStatus] = mapped_column(
        Enum(ClaimStatus, name="claim_status", native_enum=False, length=32),
        nullable=False,
        default=ClaimStatus.DRAFT,
        index=True,
    )
    incident_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    damage_amount: Mapped[float | None] = mapped_column(Float, nullable=True)
    approved_amount: Mapped[float | None] = mapped_column(Float, nullable=True)

    __table_args__ = (
        Index("ix_claim_user_updated", "user_id", "updated_at"),
        Index("ix_claim_user_number", "user_id", "claim_number", unique=True),
    )
