"""Global search use case: tokenize, fan out per kind, merge, page."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from app.application.dtos.search import SearchQuery, SearchResponse
from app.application.services.query_terms import tokenize
from app.application.use_cases.search.merger import fetch_window, merge_candidates
from app.domain.enums import RecordKind
from app.shared.telemetry.tracing import record_span
from app.shared.utils.concurrency import run_concurrently

if TYPE_CHECKING:
    from app.application.use_cases.search.candidates import CandidateSearcher

logger = logging.getLogger(__name__)


class GlobalSearchService:
    """Free-text search across policies, claims and documents (user-scoped)."""

    def __init__(
        self,
        searchers: Mapping[RecordKind, "CandidateSearcher[Any]"],
        *,
        exact_multi_kind_pagination: bool = False,
    ) -> None:
        missing = [kind.value for kind in RecordKind if kind not in searchers]
        if missing:
            raise ValueError(f"No candidate searcher for kinds: {missing}")
        self.searchers = searchers
        self.exact_multi_kind_pagination = exact_multi_kind_pagination

    async def search(self, user_id: str, query: SearchQuery) -> SearchResponse:
        """Run query for user_id.

        A query with no terms returns an empty response without touching
        the store. Requested kinds run concurrently; any failing kind fails
        the whole request and cancels the others.
        """
        terms = tokenize(query.free_text)
        if not terms:
            return SearchResponse.empty()
        kinds = [kind for kind in RecordKind if kind in query.kinds] or list(RecordKind)
        skip, limit = fetch_window(
            len(kinds), query.paging, exact=self.exact_multi_kind_pagination
        )
        with record_span(
            "search.global",
            kinds=",".join(kind.value for kind in kinds),
            page=query.paging.page,
            page_size=query.paging.page_size,
        ):
            batches = await run_concurrently(
                *(
                    self.searchers[kind].fetch(user_id, terms, skip, limit)
                    for kind in kinds
                )
            )
        response = merge_candidates(batches, query.paging)
        logger.debug(
            "Global search kinds=%s terms=%d page=%d results=%d total=%d",
            [kind.value for kind in kinds],
            len(terms),
            query.paging.page,
            len(response.results),
            response.total_matches,
        )
        return response
