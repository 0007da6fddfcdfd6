"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.claim_repo import ClaimRepository
from app.infrastructure.persistence.repositories.document_repo import DocumentRepository
from app.infrastructure.persistence.repositories.memory_repo import (
    InMemoryRecordRepository,
    InMemoryRecordStore,
)
from app.infrastructure.persistence.repositories.policy_repo import PolicyRepository
from app.infrastructure.persistence.repositories.record_repo import SqlRecordRepository

__all__ = [
    "ClaimRepository",
    "DocumentRepository",
    "InMemoryRecordRepository",
    "InMemoryRecordStore",
    "PolicyRepository",
    "SqlRecordRepository",
]
