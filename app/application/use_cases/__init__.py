"""Application use cases: one entry point per workflow."""

from app.application.use_cases.faceted_filters import (
    ClaimFilterEngine,
    DocumentFilterEngine,
    FacetedFilterEngine,
    PolicyFilterEngine,
)
from app.application.use_cases.search import GlobalSearchService

__all__ = [
    "ClaimFilterEngine",
    "DocumentFilterEngine",
    "FacetedFilterEngine",
    "GlobalSearchService",
    "PolicyFilterEngine",
]
