"""Merge window and merge-then-slice paging."""

from app.application.dtos.pagination import PageRequest
from app.application.dtos.search import KindCandidates, SearchResultItem
from app.application.use_cases.search.merger import fetch_window, merge_candidates
from app.domain.enums import RecordKind
from tests.factories import ts


def _hit(id: str, kind: RecordKind, day: int) -> SearchResultItem:
    return SearchResultItem(
        id=id,
        kind=kind,
        title=id,
        description="",
        last_modified=ts(2023, 1, day),
        link=f"/{kind.value}/{id}",
    )


def test_fetch_window_single_kind_is_exact_store_paging() -> None:
    assert fetch_window(1, PageRequest(page=3, page_size=5)) == (10, 5)


def test_fetch_window_multi_kind_is_capped_at_page_size() -> None:
    assert fetch_window(3, PageRequest(page=3, page_size=5)) == (0, 5)


def test_fetch_window_multi_kind_exact_widens_to_page_end() -> None:
    assert fetch_window(2, PageRequest(page=3, page_size=5), exact=True) == (0, 15)


def test_single_kind_batch_is_returned_unchanged() -> None:
    items = [_hit("c2", RecordKind.CLAIM, 1), _hit("c1", RecordKind.CLAIM, 2)]
    response = merge_candidates(
        [KindCandidates(RecordKind.CLAIM, items, total=12)], PageRequest(page=2, page_size=2)
    )
    assert [r.id for r in response.results] == ["c2", "c1"]
    assert response.total_matches == 12


def test_merge_sorts_newest_first_and_sums_totals() -> None:
    batches = [
        KindCandidates(RecordKind.POLICY, [_hit("p1", RecordKind.POLICY, 1)], total=1),
        KindCandidates(RecordKind.CLAIM, [_hit("c1", RecordKind.CLAIM, 2)], total=1),
        KindCandidates(RecordKind.DOCUMENT, [_hit("d1", RecordKind.DOCUMENT, 3)], total=1),
    ]
    response = merge_candidates(batches, PageRequest(page=1, page_size=20))
    assert [r.id for r in response.results] == ["d1", "c1", "p1"]
    assert response.total_matches == 3


def test_merge_ties_keep_kind_order() -> None:
    batches = [
        KindCandidates(RecordKind.POLICY, [_hit("p1", RecordKind.POLICY, 5)], total=1),
        KindCandidates(RecordKind.CLAIM, [_hit("c1", RecordKind.CLAIM, 5)], total=1),
        KindCandidates(RecordKind.DOCUMENT, [_hit("d1", RecordKind.DOCUMENT, 5)], total=1),
    ]
    response = merge_candidates(batches, PageRequest(page=1, page_size=20))
    assert [r.id for r in response.results] == ["p1", "c1", "d1"]


def test_total_is_true_count_not_fetched_count() -> None:
    batches = [
        KindCandidates(RecordKind.POLICY, [_hit("p1", RecordKind.POLICY, 1)], total=40),
        KindCandidates(RecordKind.CLAIM, [_hit("c1", RecordKind.CLAIM, 2)], total=7),
    ]
    response = merge_candidates(batches, PageRequest(page=1, page_size=1))
    assert [r.id for r in response.results] == ["c1"]
    assert response.total_matches == 47


def test_capped_window_later_page_only_sees_merge_pool() -> None:
    """Page 2 slices the capped pool; records beyond each kind's first page never appear."""
    policies = [_hit(f"p{d}", RecordKind.POLICY, d) for d in (20, 19)]
    claims = [_hit(f"c{d}", RecordKind.CLAIM, d) for d in (10, 9)]
    batches = [
        KindCandidates(RecordKind.POLICY, policies, total=5),
        KindCandidates(RecordKind.CLAIM, claims, total=2),
    ]
    response = merge_candidates(batches, PageRequest(page=2, page_size=2))
    # True page 2 would hold the 3rd and 4th newest policies (not fetched).
    assert [r.id for r in response.results] == ["c10", "c9"]
    assert response.total_matches == 7


def test_page_past_merge_pool_is_empty() -> None:
    batches = [
        KindCandidates(RecordKind.POLICY, [_hit("p1", RecordKind.POLICY, 1)], total=30),
        KindCandidates(RecordKind.CLAIM, [_hit("c1", RecordKind.CLAIM, 2)], total=30),
    ]
    response = merge_candidates(batches, PageRequest(page=5, page_size=1))
    assert response.results == []
    assert response.total_matches == 60
