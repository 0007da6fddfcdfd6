"""Supporting document ORM model. File metadata only; bytes live in object storage."""

from datetime import datetime

from sqlalchemy import (
    BigInteger,
    Boolean,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    String,
    Text,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from app.domain.enums import DocumentType
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import UserOwnedModel


class Document(UserOwnedModel, Base):
    """Document entity. Table: document. Optionally linked to a policy and/or claim."""

    __tablename__ = "document"

    policy_id: Mapped[str | None] = mapped_column(
        String,
        ForeignKey("insurance_policy.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    claim_id: Mapped[str | None] = mapped_column(
        String,
        ForeignKey("claim.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    file_name: Mapped[str] = mapped_column(String, nullable=False)
    file_size: Mapped[int] = mapped_column(BigInteger, nullable=False)
    mime_type: Mapped[str] = mapped_column(String, nullable=False)
    document_type: Mapped[DocumentType] = mapped_column(
        Enum(DocumentType, name="document_type", native_enum=False, length=32),
        nullable=False,
        default=DocumentType.OTHER,
        index=True,
    )
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    upload_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    is_analyzed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("false")
    )

    __table_args__ = (Index("ix_document_user_updated", "user_id", "updated_at"),)
