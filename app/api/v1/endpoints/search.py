"""Search API: free-text search across policies, claims and documents."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.dependencies import get_current_user_id, get_global_search_service
from app.api.v1.endpoints.params import resolve_page_size
from app.application.dtos.pagination import PageRequest
from app.application.dtos.search import SearchQuery
from app.application.use_cases.search import GlobalSearchService
from app.core.config import get_settings
from app.core.limiter import limit_search
from app.domain.enums import RecordKind
from app.schemas.common import SearchPagination, total_pages
from app.schemas.search import SearchResponse, SearchResultItemResponse

router = APIRouter()


@router.get("", response_model=SearchResponse)
@limit_search
async def search(
    request: Request,
    user_id: Annotated[str, Depends(get_current_user_id)],
    search_svc: Annotated[GlobalSearchService, Depends(get_global_search_service)],
    q: str = Query("", max_length=500, description="Free text; blank returns no results"),
    types: str | None = Query(
        None, description="Comma list of policy, claim, document (default: all)"
    ),
    page: int = Query(1, ge=1),
    limit: int | None = Query(None, ge=1),
):
    """Search the caller's records; results are newest first."""
    settings = get_settings()
    page_size = resolve_page_size(
        limit, settings.search_default_page_size, settings.search_max_page_size, "limit"
    )
    query = SearchQuery(
        free_text=q,
        kinds=tuple(RecordKind.parse_list(types)),
        paging=PageRequest(page=page, page_size=page_size),
    )
    result = await search_svc.search(user_id, query)
    return SearchResponse(
        results=[
            SearchResultItemResponse(
                id=hit.id,
                type=hit.kind,
                title=hit.title,
                description=hit.description,
                date=hit.last_modified,
                link=hit.link,
            )
            for hit in result.results
        ],
        pagination=SearchPagination(
            total=result.total_matches,
            page=page,
            limit=page_size,
            total_pages=total_pages(result.total_matches, page_size),
        ),
    )
