"""Global search API schemas."""

from datetime import datetime

from pydantic import Field

from app.domain.enums import RecordKind
from app.schemas.common import CamelModel, SearchPagination


class SearchResultItemResponse(CamelModel):
    """Single search hit (policy, claim, or document)."""

    id: str
    type: RecordKind = Field(..., description="policy | claim | document")
    title: str
    description: str
    date: datetime = Field(..., description="Record's last-modified time")
    link: str


class SearchResponse(CamelModel):
    """Merged page of hits plus the summed per-kind match total."""

    results: list[SearchResultItemResponse]
    pagination: SearchPagination
