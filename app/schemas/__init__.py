"""Pydantic request/response schemas for the API."""

from app.schemas.claim import ClaimFilterResponse, ClaimResponse
from app.schemas.common import FilterPagination, SearchPagination, total_pages
from app.schemas.document import DocumentFilterResponse, DocumentResponse
from app.schemas.health import HealthResponse
from app.schemas.policy import (
    PolicyFilterOptionsResponse,
    PolicyFilterResponse,
    PolicyResponse,
)
from app.schemas.search import SearchResponse, SearchResultItemResponse

__all__ = [
    "ClaimFilterResponse",
    "ClaimResponse",
    "DocumentFilterResponse",
    "DocumentResponse",
    "FilterPagination",
    "HealthResponse",
    "PolicyFilterOptionsResponse",
    "PolicyFilterResponse",
    "PolicyResponse",
    "SearchPagination",
    "SearchResponse",
    "SearchResultItemResponse",
    "total_pages",
]
