"""Presentation-layer dependency injection (composition root).

Routes depend only on these providers, never on infrastructure directly.
"""

from app.api.v1.dependencies.auth import get_current_user_id
from app.api.v1.dependencies.records import (
    RecordRepositories,
    get_record_repositories,
)
from app.api.v1.dependencies.search import (
    get_claim_filter_engine,
    get_document_filter_engine,
    get_global_search_service,
    get_policy_filter_engine,
)

__all__ = [
    "RecordRepositories",
    "get_claim_filter_engine",
    "get_current_user_id",
    "get_document_filter_engine",
    "get_global_search_service",
    "get_policy_filter_engine",
    "get_record_repositories",
]
