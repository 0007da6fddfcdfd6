"""Claim faceted filter API."""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.api.v1.dependencies import get_claim_filter_engine, get_current_user_id
from app.api.v1.endpoints.params import parse_csv_enum, resolve_page_size, utc
from app.application.dtos.claim import ClaimFilter
from app.application.dtos.pagination import PageRequest
from app.application.use_cases.faceted_filters import ClaimFilterEngine
from app.core.config import get_settings
from app.domain.enums import ClaimStatus
from app.schemas.claim import ClaimFilterResponse, ClaimResponse
from app.schemas.common import FilterPagination, total_pages

router = APIRouter()


@router.get("/filter", response_model=ClaimFilterResponse)
async def filter_claims(
    user_id: Annotated[str, Depends(get_current_user_id)],
    engine: Annotated[ClaimFilterEngine, Depends(get_claim_filter_engine)],
    status: str | None = Query(None, description="Comma list of claim statuses"),
    policy_id: str | None = Query(None, alias="policyId"),
    incident_date_from: datetime | None = Query(None, alias="incidentDateFrom"),
    incident_date_to: datetime | None = Query(None, alias="incidentDateTo"),
    min_amount: float | None = Query(None, alias="minAmount", allow_inf_nan=False),
    max_amount: float | None = Query(None, alias="maxAmount", allow_inf_nan=False),
    page: int = Query(1, ge=1),
    page_size: int | None = Query(None, alias="pageSize", ge=1),
):
    """Filter the caller's claims (newest first)."""
    settings = get_settings()
    size = resolve_page_size(
        page_size, settings.filter_default_page_size, settings.filter_max_page_size, "pageSize"
    )
    filters = ClaimFilter(
        statuses=parse_csv_enum(status, "status", ClaimStatus),
        policy_id=policy_id or None,
        incident_date_from=utc(incident_date_from),
        incident_date_to=utc(incident_date_to),
        min_amount=min_amount,
        max_amount=max_amount,
    )
    result = await engine.filter(user_id, filters, PageRequest(page=page, page_size=size))
    return ClaimFilterResponse(
        claims=[ClaimResponse.model_validate(c) for c in result.items],
        pagination=FilterPagination(
            total=result.total,
            page=page,
            page_size=size,
            total_pages=total_pages(result.total, size),
        ),
    )
