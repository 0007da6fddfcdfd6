"""Record store repositories for the configured backend (composition root)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from fastapi import Request

from app.core.config import get_settings
from app.domain.exceptions import StoreUnavailableException
from app.infrastructure.persistence.database import get_session_factory
from app.infrastructure.persistence.repositories import (
    ClaimRepository,
    DocumentRepository,
    PolicyRepository,
)

if TYPE_CHECKING:
    from app.application.interfaces.repositories import (
        IClaimRepository,
        IDocumentRepository,
        IPolicyRepository,
    )


@dataclass(frozen=True)
class RecordRepositories:
    """One repository per record kind."""

    policies: IPolicyRepository
    claims: IClaimRepository
    documents: IDocumentRepository


def get_record_repositories(request: Request) -> RecordRepositories:
    """SQL repositories for postgres; the lifespan-created store for memory."""
    if get_settings().database_backend == "memory":
        store = getattr(request.app.state, "memory_store", None)
        if store is None:
            raise StoreUnavailableException("memory")
        return RecordRepositories(
            policies=store.policies, claims=store.claims, documents=store.documents
        )
    session_factory = get_session_factory()
    return RecordRepositories(
        policies=PolicyRepository(session_factory),
        claims=ClaimRepository(session_factory),
        documents=DocumentRepository(session_factory),
    )
