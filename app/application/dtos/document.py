"""DTOs for supporting document reads and faceted filtering (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime

from app.domain.enums import DocumentType


@dataclass(frozen=True)
class DocumentResult:
    """Document read-model. policy_number / claim_number come from the parents when joined."""

    id: str
    user_id: str
    policy_id: str | None
    claim_id: str | None
    file_name: str
    file_size: int
    mime_type: str
    document_type: DocumentType
    description: str | None
    upload_date: datetime
    is_analyzed: bool
    created_at: datetime
    updated_at: datetime
    policy_number: str | None = None
    claim_number: str | None = None


@dataclass(frozen=True)
class DocumentFilter:
    """Faceted document filter. Empty tuples and None impose no constraint."""

    document_types: tuple[DocumentType, ...] = ()
    policy_id: str | None = None
    claim_id: str | None = None
    upload_date_from: datetime | None = None
    upload_date_to: datetime | None = None
    is_analyzed: bool | None = None
