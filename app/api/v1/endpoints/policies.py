"""Policy faceted filter API."""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.api.v1.dependencies import get_current_user_id, get_policy_filter_engine
from app.api.v1.endpoints.params import resolve_page_size, split_csv, utc
from app.application.dtos.pagination import PageRequest
from app.application.dtos.policy import PolicyFilter
from app.application.use_cases.faceted_filters import PolicyFilterEngine
from app.core.config import get_settings
from app.schemas.common import FilterPagination, total_pages
from app.schemas.policy import (
    PolicyFilterOptionsResponse,
    PolicyFilterResponse,
    PolicyResponse,
)
from app.shared.utils.concurrency import run_concurrently

router = APIRouter()


@router.get("/filter", response_model=PolicyFilterResponse)
async def filter_policies(
    user_id: Annotated[str, Depends(get_current_user_id)],
    engine: Annotated[PolicyFilterEngine, Depends(get_policy_filter_engine)],
    insurance_type: str | None = Query(None, alias="insuranceType"),
    provider: str | None = Query(None),
    is_active: bool | None = Query(None, alias="isActive"),
    min_amount: float | None = Query(None, alias="minAmount", allow_inf_nan=False),
    max_amount: float | None = Query(None, alias="maxAmount", allow_inf_nan=False),
    start_after: datetime | None = Query(None, alias="startAfter"),
    end_before: datetime | None = Query(None, alias="endBefore"),
    page: int = Query(1, ge=1),
    page_size: int | None = Query(None, alias="pageSize", ge=1),
):
    """Filter the caller's policies; also returns provider and type facets."""
    settings = get_settings()
    size = resolve_page_size(
        page_size, settings.filter_default_page_size, settings.filter_max_page_size, "pageSize"
    )
    filters = PolicyFilter(
        insurance_types=split_csv(insurance_type),
        providers=split_csv(provider),
        is_active=is_active,
        min_amount=min_amount,
        max_amount=max_amount,
        start_after=utc(start_after),
        end_before=utc(end_before),
    )
    result, options = await run_concurrently(
        engine.filter(user_id, filters, PageRequest(page=page, page_size=size)),
        engine.filter_options(user_id),
    )
    return PolicyFilterResponse(
        policies=[PolicyResponse.model_validate(p) for p in result.items],
        pagination=FilterPagination(
            total=result.total,
            page=page,
            page_size=size,
            total_pages=total_pages(result.total, size),
        ),
        filter_options=PolicyFilterOptionsResponse(
            providers=options.providers, insurance_types=options.insurance_types
        ),
    )
