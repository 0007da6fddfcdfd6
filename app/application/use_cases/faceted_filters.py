"""Faceted filter use cases (one engine per record kind).

Independent of free-text search: every supplied filter field becomes one
AND-combined constraint (list membership, boolean equality, inclusive
range), always scoped to the requesting user. Paging is exact and done by
the store; the page and its total count are fetched concurrently.

A parent id (policy_id, claim_id) that belongs to another user simply
yields no rows, because the user scope is part of the same conjunction.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from app.application.dtos.claim import ClaimFilter, ClaimResult
from app.application.dtos.document import DocumentFilter, DocumentResult
from app.application.dtos.pagination import FilterPage, PageRequest
from app.application.dtos.policy import PolicyFilter, PolicyFilterOptions, PolicyResult
from app.application.use_cases.store_calls import guarded
from app.domain.enums import RecordKind
from app.domain.value_objects.predicates import (
    NEWEST_FIRST,
    AllOf,
    Eq,
    In,
    Predicate,
    Range,
    owned_by,
)
from app.shared.telemetry.tracing import add_span_attributes, record_span
from app.shared.utils.concurrency import run_concurrently

if TYPE_CHECKING:
    from app.application.interfaces.repositories import IRecordRepository

logger = logging.getLogger(__name__)


def _membership(field: str, values: tuple[Any, ...]) -> Predicate | None:
    return In(field, tuple(values)) if values else None


def _equals(field: str, value: Any) -> Predicate | None:
    return Eq(field, value) if value is not None else None


def _between(
    field: str,
    gte: float | datetime | None,
    lte: float | datetime | None,
) -> Predicate | None:
    if gte is None and lte is None:
        return None
    return Range(field, gte=gte, lte=lte)


RecordT = TypeVar("RecordT")
FilterT = TypeVar("FilterT")


class FacetedFilterEngine(ABC, Generic[RecordT, FilterT]):
    """Exact, paged, AND-combined structured filter over one kind."""

    kind: ClassVar[RecordKind]

    def __init__(self, repo: IRecordRepository[RecordT]) -> None:
        self.repo = repo

    @abstractmethod
    def constraints(self, filters: FilterT) -> list[Predicate | None]:
        """One entry per filter field; None for fields that were not supplied."""

    def build_predicate(self, user_id: str, filters: FilterT) -> AllOf:
        """User scope AND every supplied constraint."""
        supplied = [c for c in self.constraints(filters) if c is not None]
        return AllOf((Eq("user_id", user_id), *supplied))

    async def filter(
        self, user_id: str, filters: FilterT, paging: PageRequest
    ) -> FilterPage[RecordT]:
        """Return one exact page (newest first) and the total match count."""
        predicate = self.build_predicate(user_id, filters)
        with record_span(
            f"filter.{self.kind.value}",
            constraint_count=len(predicate.conditions) - 1,
            page=paging.page,
            page_size=paging.page_size,
        ):
            items, total = await run_concurrently(
                guarded(
                    self.kind,
                    "filter",
                    self.repo.search(
                        predicate, NEWEST_FIRST, skip=paging.skip, limit=paging.page_size
                    ),
                ),
                guarded(self.kind, "count", self.repo.count(predicate)),
            )
            add_span_attributes(total=total)
        logger.debug(
            "Faceted filter kind=%s constraints=%d page=%d total=%d",
            self.kind.value,
            len(predicate.conditions) - 1,
            paging.page,
            total,
        )
        return FilterPage(items=items, total=total)


class PolicyFilterEngine(FacetedFilterEngine[PolicyResult, PolicyFilter]):
    """Policies by type, provider, active flag, coverage amount and term dates."""

    kind = RecordKind.POLICY

    def constraints(self, filters: PolicyFilter) -> list[Predicate | None]:
        return [
            _membership("insurance_type", filters.insurance_types),
            _membership("provider", filters.providers),
            _equals("is_active", filters.is_active),
            _between("coverage_amount", filters.min_amount, filters.max_amount),
            _between("start_date", filters.start_after, None),
            _between("end_date", None, filters.end_before),
        ]

    async def filter_options(self, user_id: str) -> PolicyFilterOptions:
        """Distinct providers and insurance types over all of the user's policies."""
        scope = owned_by(user_id)
        providers, insurance_types = await run_concurrently(
            guarded(self.kind, "facets", self.repo.distinct_values(scope, "provider")),
            guarded(
                self.kind, "facets", self.repo.distinct_values(scope, "insurance_type")
            ),
        )
        return PolicyFilterOptions(
            providers=list(providers), insurance_types=list(insurance_types)
        )


class ClaimFilterEngine(FacetedFilterEngine[ClaimResult, ClaimFilter]):
    """Claims by status, parent policy, incident date and damage amount."""

    kind = RecordKind.CLAIM

    def constraints(self, filters: ClaimFilter) -> list[Predicate | None]:
        return [
            _membership("status", filters.statuses),
            _equals("policy_id", filters.policy_id),
            _between(
                "incident_date", filters.incident_date_from, filters.incident_date_to
            ),
            _between("damage_amount", filters.min_amount, filters.max_amount),
        ]


class DocumentFilterEngine(FacetedFilterEngine[DocumentResult, DocumentFilter]):
    """Documents by category, parent policy/claim, upload date and analysis flag."""

    kind = RecordKind.DOCUMENT

    def constraints(self, filters: DocumentFilter) -> list[Predicate | None]:
        return [
            _membership("document_type", filters.document_types),
            _equals("policy_id", filters.policy_id),
            _equals("claim_id", filters.claim_id),
            _equals("is_analyzed", filters.is_analyzed),
            _between("upload_date", filters.upload_date_from, filters.upload_date_to),
        ]
