"""Insurance policy ORM model."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Float, Index, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import UserOwnedModel


class InsurancePolicy(UserOwnedModel, Base):
    """Policy entity. Table: insurance_policy."""

    __tablename__ = "insurance_policy"

    policy_number: Mapped[str] = mapped_column(String, nullable=False)
    provider: Mapped[str] = mapped_column(String, nullable=False)
    insurance_type: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    coverage_amount: Mapped[float] = mapped_column(Float, nullable=False)
    premium: Mapped[float | None] = mapped_column(Float, nullable=True)
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("true")
    )

    __table_args__ = (
        Index("ix_insurance_policy_user_updated", "user_id", "updated_at"),
        Index("ix_insurance_policy_user_number", "user_id", "policy_number", unique=True),
    )
