"""Application services: query term handling and search hit presentation."""

from app.application.services.query_terms import (
    infer_claim_statuses,
    infer_document_types,
    tokenize,
)
from app.application.services.search_presentation import (
    claim_to_hit,
    document_to_hit,
    format_bytes,
    policy_to_hit,
)

__all__ = [
    "claim_to_hit",
    "document_to_hit",
    "format_bytes",
    "infer_claim_statuses",
    "infer_document_types",
    "policy_to_hit",
    "tokenize",
]
