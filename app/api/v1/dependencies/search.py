"""Global search and faceted filter use cases (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from app.api.v1.dependencies.records import RecordRepositories, get_record_repositories
from app.application.use_cases.faceted_filters import (
    ClaimFilterEngine,
    DocumentFilterEngine,
    PolicyFilterEngine,
)
from app.application.use_cases.search import (
    ClaimCandidateSearcher,
    DocumentCandidateSearcher,
    GlobalSearchService,
    PolicyCandidateSearcher,
)
from app.core.config import get_settings
from app.domain.enums import RecordKind

Repos = Annotated[RecordRepositories, Depends(get_record_repositories)]


def get_global_search_service(repos: Repos) -> GlobalSearchService:
    """Global search over all three kinds (user-scoped, read-only)."""
    return GlobalSearchService(
        {
            RecordKind.POLICY: PolicyCandidateSearcher(repos.policies),
            RecordKind.CLAIM: ClaimCandidateSearcher(repos.claims),
            RecordKind.DOCUMENT: DocumentCandidateSearcher(repos.documents),
        },
        exact_multi_kind_pagination=get_settings().search_exact_multi_kind_pagination,
    )


def get_policy_filter_engine(repos: Repos) -> PolicyFilterEngine:
    return PolicyFilterEngine(repos.policies)


def get_claim_filter_engine(repos: Repos) -> ClaimFilterEngine:
    return ClaimFilterEngine(repos.claims)


def get_document_filter_engine(repos: Repos) -> DocumentFilterEngine:
    return DocumentFilterEngine(repos.documents)
