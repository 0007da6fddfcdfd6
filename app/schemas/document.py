"""Document filter API schemas."""

from datetime import datetime

from app.domain.enums import DocumentType
from app.schemas.common import CamelModel, FilterPagination


class DocumentResponse(CamelModel):
    id: str
    user_id: str
    policy_id: str | None = None
    claim_id: str | None = None
    file_name: str
    file_size: int
    mime_type: str
    document_type: DocumentType
    description: str | None = None
    upload_date: datetime
    is_analyzed: bool
    created_at: datetime
    updated_at: datetime
    policy_number: str | None = None
    claim_number: str | None = None


class DocumentFilterResponse(CamelModel):
    documents: list[DocumentResponse]
    pagination: FilterPagination
