"""Merge per-kind candidate lists into one page.

Single-kind requests are paged exactly by the store. Multi-kind requests
fetch a capped window from each kind, concatenate, sort by last modified
(newest first) and slice the caller's page out of the merged list.

With the default capped window (page_size per kind) only the first page is
guaranteed complete: a kind with more than page_size matches never offers
its later records to the merge, so page 2+ may miss records or repeat
ones already shown. Clients depend on this behaviour; exact paging is
available through the widened window (skip + page_size per kind).
"""

from __future__ import annotations

from collections.abc import Sequence

from app.application.dtos.pagination import PageRequest
from app.application.dtos.search import KindCandidates, SearchResponse


def fetch_window(kind_count: int, paging: PageRequest, *, exact: bool = False) -> tuple[int, int]:
    """Return the (skip, limit) each candidate searcher should use."""
    if kind_count == 1:
        return paging.skip, paging.page_size
    if exact:
        return 0, paging.skip + paging.page_size
    return 0, paging.page_size


def merge_candidates(
    batches: Sequence[KindCandidates], paging: PageRequest
) -> SearchResponse:
    """Combine batches into the requested page.

    total_matches is always the sum of each kind's own total, whatever was
    fetched. Sorting is stable, so equal timestamps keep batch order.
    """
    total = sum(batch.total for batch in batches)
    if len(batches) == 1:
        return SearchResponse(results=list(batches[0].items), total_matches=total)
    merged = [item for batch in batches for item in batch.items]
    merged.sort(key=lambda item: item.last_modified, reverse=True)
    start = paging.skip
    return SearchResponse(
        results=merged[start : start + paging.page_size],
        total_matches=total,
    )
