"""Per-kind candidate searchers for global search.

Each searcher turns query terms into one predicate over its kind's text
fields (plus any keyword-inferred enum condition), then fetches a page of
matching records and the kind's total match count concurrently.

Matching is deliberately permissive: a record matches when ANY term is a
substring of ANY text field, or when the inferred condition holds. A
two-word query whose words hit different, unrelated fields of the same
record is therefore a match. This favours recall over precision and is
relied on by existing clients; do not tighten it to AND-of-terms.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar

from app.application.dtos.search import KindCandidates, SearchResultItem
from app.application.services.query_terms import (
    infer_claim_statuses,
    infer_document_types,
)
from app.application.services.search_presentation import (
    claim_to_hit,
    document_to_hit,
    policy_to_hit,
)
from app.application.use_cases.store_calls import guarded
from app.domain.enums import RecordKind
from app.domain.value_objects.predicates import (
    NEWEST_FIRST,
    AnyOf,
    In,
    Predicate,
    TextMatch,
    owned_by,
)
from app.shared.telemetry.tracing import add_span_attributes, record_span
from app.shared.utils.concurrency import run_concurrently

if TYPE_CHECKING:
    from app.application.dtos.claim import ClaimResult
    from app.application.dtos.document import DocumentResult
    from app.application.dtos.policy import PolicyResult
    from app.application.interfaces.repositories import IRecordRepository

logger = logging.getLogger(__name__)


RecordT = TypeVar("RecordT")


class CandidateSearcher(ABC, Generic[RecordT]):
    """Search one kind's store partition for records matching query terms."""

    kind: ClassVar[RecordKind]
    text_fields: ClassVar[tuple[str, ...]]

    def __init__(self, repo: IRecordRepository[RecordT]) -> None:
        self.repo = repo

    def inferred_condition(self, terms: list[str]) -> Predicate | None:
        """Enum condition implied by keywords in terms; None when nothing is implied."""
        return None

    @abstractmethod
    def to_hit(self, record: RecordT) -> SearchResultItem:
        """Present one record as a search hit."""

    def build_predicate(self, user_id: str, terms: list[str]) -> Predicate:
        """User-scoped OR of the text match and the inferred condition (if any)."""
        conditions: list[Predicate] = [TextMatch(self.text_fields, tuple(terms))]
        inferred = self.inferred_condition(terms)
        if inferred is not None:
            conditions.append(inferred)
        return owned_by(user_id, AnyOf(tuple(conditions)))

    async def fetch(
        self,
        user_id: str,
        terms: list[str],
        skip: int,
        limit: int,
    ) -> KindCandidates:
        """Fetch up to limit hits (newest first, after skip) and the kind's total count.

        The count uses the same predicate but ignores skip/limit. Store
        errors surface as SearchBackendException.
        """
        predicate = self.build_predicate(user_id, terms)
        with record_span(
            f"search.candidates.{self.kind.value}",
            term_count=len(terms),
            skip=skip,
            limit=limit,
        ):
            records, total = await run_concurrently(
                guarded(
                    self.kind,
                    "search",
                    self.repo.search(predicate, NEWEST_FIRST, skip=skip, limit=limit),
                ),
                guarded(self.kind, "count", self.repo.count(predicate)),
            )
            add_span_attributes(fetched=len(records), total=total)
        logger.debug(
            "Candidates kind=%s fetched=%d total=%d", self.kind.value, len(records), total
        )
        return KindCandidates(
            kind=self.kind,
            items=[self.to_hit(record) for record in records],
            total=total,
        )


class PolicyCandidateSearcher(CandidateSearcher["PolicyResult"]):
    """Policies: number, provider, description. No keyword inference."""

    kind = RecordKind.POLICY
    text_fields = ("policy_number", "provider", "description")

    def to_hit(self, record: PolicyResult) -> SearchResultItem:
        return policy_to_hit(record)


class ClaimCandidateSearcher(CandidateSearcher["ClaimResult"]):
    """Claims: number, description; status keywords widen the match."""

    kind = RecordKind.CLAIM
    text_fields = ("claim_number", "description")

    def inferred_condition(self, terms: list[str]) -> Predicate | None:
        statuses = infer_claim_statuses(terms)
        if not statuses:
            return None
        return In("status", tuple(statuses))

    def to_hit(self, record: ClaimResult) -> SearchResultItem:
        return claim_to_hit(record)


class DocumentCandidateSearcher(CandidateSearcher["DocumentResult"]):
    """Documents: file name, description; category keywords widen the match."""

    kind = RecordKind.DOCUMENT
    text_fields = ("file_name", "description")

    def inferred_condition(self, terms: list[str]) -> Predicate | None:
        types = infer_document_types(terms)
        if not types:
            return None
        return In("document_type", tuple(types))

    def to_hit(self, record: DocumentResult) -> SearchResultItem:
        return document_to_hit(record)
