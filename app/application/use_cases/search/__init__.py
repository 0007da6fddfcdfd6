"""Global search use cases."""

from app.application.use_cases.search.candidates import (
    CandidateSearcher,
    ClaimCandidateSearcher,
    DocumentCandidateSearcher,
    PolicyCandidateSearcher,
)
from app.application.use_cases.search.global_search import GlobalSearchService
from app.application.use_cases.search.merger import fetch_window, merge_candidates

__all__ = [
    "CandidateSearcher",
    "ClaimCandidateSearcher",
    "DocumentCandidateSearcher",
    "GlobalSearchService",
    "PolicyCandidateSearcher",
    "fetch_window",
    "merge_candidates",
]
