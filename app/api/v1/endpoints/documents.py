"""Document faceted filter API."""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.api.v1.dependencies import get_current_user_id, get_document_filter_engine
from app.api.v1.endpoints.params import parse_csv_enum, resolve_page_size, utc
from app.application.dtos.document import DocumentFilter
from app.application.dtos.pagination import PageRequest
from app.application.use_cases.faceted_filters import DocumentFilterEngine
from app.core.config import get_settings
from app.domain.enums import DocumentType
from app.schemas.common import FilterPagination, total_pages
from app.schemas.document import DocumentFilterResponse, DocumentResponse

router = APIRouter()


@router.get("/filter", response_model=DocumentFilterResponse)
async def filter_documents(
    user_id: Annotated[str, Depends(get_current_user_id)],
    engine: Annotated[DocumentFilterEngine, Depends(get_document_filter_engine)],
    document_type: str | None = Query(
        None, alias="documentType", description="Comma list of document types"
    ),
    policy_id: str | None = Query(None, alias="policyId"),
    claim_id: str | None = Query(None, alias="claimId"),
    upload_date_from: datetime | None = Query(None, alias="uploadDateFrom"),
    upload_date_to: datetime | None = Query(None, alias="uploadDateTo"),
    is_analyzed: bool | None = Query(None, alias="isAnalyzed"),
    page: int = Query(1, ge=1),
    page_size: int | None = Query(None, alias="pageSize", ge=1),
):
    """Filter the caller's documents (newest first)."""
    settings = get_settings()
    size = resolve_page_size(
        page_size, settings.filter_default_page_size, settings.filter_max_page_size, "pageSize"
    )
    filters = DocumentFilter(
        document_types=parse_csv_enum(document_type, "documentType", DocumentType),
        policy_id=policy_id or None,
        claim_id=claim_id or None,
        upload_date_from=utc(upload_date_from),
        upload_date_to=utc(upload_date_to),
        is_analyzed=is_analyzed,
    )
    result = await engine.filter(user_id, filters, PageRequest(page=page, page_size=size))
    return DocumentFilterResponse(
        documents=[DocumentResponse.model_validate(d) for d in result.items],
        pagination=FilterPagination(
            total=result.total,
            page=page,
            page_size=size,
            total_pages=total_pages(result.total, size),
        ),
    )
