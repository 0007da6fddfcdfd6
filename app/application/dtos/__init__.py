"""Application DTOs (no ORM dependency)."""

from app.application.dtos.claim import ClaimFilter, ClaimResult
from app.application.dtos.document import DocumentFilter, DocumentResult
from app.application.dtos.pagination import FilterPage, PageRequest
from app.application.dtos.policy import (
    PolicyFilter,
    PolicyFilterOptions,
    PolicyResult,
    PolicySummary,
)
from app.application.dtos.search import (
    KindCandidates,
    SearchQuery,
    SearchResponse,
    SearchResultItem,
)

__all__ = [
    "ClaimFilter",
    "ClaimResult",
    "DocumentFilter",
    "DocumentResult",
    "FilterPage",
    "KindCandidates",
    "PageRequest",
    "PolicyFilter",
    "PolicyFilterOptions",
    "PolicyResult",
    "PolicySummary",
    "SearchQuery",
    "SearchResponse",
    "SearchResultItem",
]
