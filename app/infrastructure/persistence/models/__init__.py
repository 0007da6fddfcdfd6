"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.claim import Claim
from app.infrastructure.persistence.models.document import Document
from app.infrastructure.persistence.models.mixins import (
    CuidMixin,
    OwnerMixin,
    TimestampMixin,
    UserOwnedModel,
)
from app.infrastructure.persistence.models.policy import InsurancePolicy
from app.infrastructure.persistence.models.user import User

__all__ = [
    "Claim",
    "CuidMixin",
    "Document",
    "InsurancePolicy",
    "OwnerMixin",
    "TimestampMixin",
    "User",
    "UserOwnedModel",
]
