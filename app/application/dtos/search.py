"""DTOs for cross-kind global search (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import datetime

from app.application.dtos.pagination import PageRequest
from app.domain.enums import RecordKind


@dataclass(frozen=True)
class SearchQuery:
    """Free-text query over one or more record kinds."""

    free_text: str
    kinds: tuple[RecordKind, ...] = tuple(RecordKind)
    paging: PageRequest = field(default_factory=lambda: PageRequest(page_size=20))


@dataclass(frozen=True)
class SearchResultItem:
    """Single search hit (read-model). last_modified is the record's updated_at."""

    id: str
    kind: RecordKind
    title: str
    description: str
    last_modified: datetime
    link: str


@dataclass(frozen=True)
class KindCandidates:
    """One kind's fetched candidates plus its independent total match count."""

    kind: RecordKind
    items: list[SearchResultItem]
    total: int


@dataclass(frozen=True)
class SearchResponse:
    """Merged page of results. total_matches sums every queried kind's count."""

    results: list[SearchResultItem]
    total_matches: int

    @classmethod
    def empty(cls) -> "SearchResponse":
        return cls(results=[], total_matches=0)
