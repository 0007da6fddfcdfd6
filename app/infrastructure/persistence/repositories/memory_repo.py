"""In-process record store for development and tests (DATABASE_BACKEND=memory).

Evaluates the same predicate trees the SQL repositories compile, with the
same semantics: case-insensitive literal substring match, inclusive
ranges, newest-first ordering with id as tiebreak.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from app.application.dtos.claim import ClaimResult
from app.application.dtos.document import DocumentResult
from app.application.dtos.policy import PolicyResult, PolicySummary
from app.domain.value_objects.predicates import (
    AllOf,
    AnyOf,
    Eq,
    In,
    Predicate,
    Range,
    SortOrder,
    TextMatch,
)
from app.shared.utils.datetime import ensure_utc

logger = logging.getLogger(__name__)


def _normalize(value: Any) -> Any:
    return ensure_utc(value) if isinstance(value, datetime) else value


def matches(record: Any, predicate: Predicate) -> bool:
    """Evaluate predicate against one record's attributes."""
    if isinstance(predicate, AllOf):
        return all(matches(record, c) for c in predicate.conditions)
    if isinstance(predicate, AnyOf):
        return any(matches(record, c) for c in predicate.conditions)
    if isinstance(predicate, TextMatch):
        for field in predicate.fields:
            value = getattr(record, field)
            if value is None:
                continue
            haystack = str(value).lower()
            if any(term.lower() in haystack for term in predicate.terms):
                return True
        return False
    if isinstance(predicate, In):
        return getattr(record, predicate.field) in predicate.values
    if isinstance(predicate, Eq):
        return _normalize(getattr(record, predicate.field)) == _normalize(predicate.value)
    if isinstance(predicate, Range):
        value = _normalize(getattr(record, predicate.field))
        if value is None:
            return False
        if predicate.gte is not None and value < _normalize(predicate.gte):
            return False
        if predicate.lte is not None and value > _normalize(predicate.lte):
            return False
        return True
    raise TypeError(f"Unsupported predicate: {type(predicate).__name__}")


RecordT = TypeVar("RecordT")


class InMemoryRecordRepository(Generic[RecordT]):
    """IRecordRepository over a list of read-model records."""

    def __init__(self, records: Iterable[RecordT] = ()) -> None:
        self.records: list[RecordT] = list(records)

    async def search(
        self,
        predicate: Predicate,
        sort: SortOrder,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[RecordT]:
        hits = [r for r in self.records if matches(r, predicate)]
        hits.sort(
            key=lambda r: (_normalize(getattr(r, sort.field)), getattr(r, "id")),
            reverse=sort.descending,
        )
        end = None if limit is None else skip + limit
        return hits[skip:end]

    async def count(self, predicate: Predicate) -> int:
        return sum(1 for r in self.records if matches(r, predicate))

    async def distinct_values(self, predicate: Predicate, field: str) -> list[Any]:
        values = {
            getattr(r, field)
            for r in self.records
            if matches(r, predicate) and getattr(r, field) is not None
        }
        return sorted(values)


class SeedData(BaseModel):
    """Shape of the JSON seed file for the memory backend."""

    policies: list[PolicyResult] = []
    claims: list[ClaimResult] = []
    documents: list[DocumentResult] = []


class InMemoryRecordStore:
    """Holds one repository per kind, with parent summaries joined onto children."""

    def __init__(
        self,
        policies: Iterable[PolicyResult] = (),
        claims: Iterable[ClaimResult] = (),
        documents: Iterable[DocumentResult] = (),
    ) -> None:
        policy_list = list(policies)
        by_policy = {p.id: p for p in policy_list}
        claim_list = [
            dataclasses.replace(c, policy=_summary(by_policy.get(c.policy_id)))
            for c in claims
        ]
        by_claim = {c.id: c for c in claim_list}
        document_list = [
            dataclasses.replace(
                d,
                policy_number=_number(by_policy, d.policy_id, "policy_number"),
                claim_number=_number(by_claim, d.claim_id, "claim_number"),
            )
            for d in documents
        ]
        self.policies = InMemoryRecordRepository(policy_list)
        self.claims = InMemoryRecordRepository(claim_list)
        self.documents = InMemoryRecordRepository(document_list)

    @classmethod
    def from_json_file(cls, path: str | Path) -> "InMemoryRecordStore":
        """Load records from a JSON file shaped like SeedData."""
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        seed = SeedData.model_validate(raw)
        logger.info(
            "Loaded memory store from %s: policies=%d claims=%d documents=%d",
            path,
            len(seed.policies),
            len(seed.claims),
            len(seed.documents),
        )
        return cls(seed.policies, seed.claims, seed.documents)


def _summary(policy: PolicyResult | None) -> PolicySummary | None:
    if policy is None:
        return None
    return PolicySummary(
        policy_number=policy.policy_number,
        provider=policy.provider,
        insurance_type=policy.insurance_type,
    )


def _number(index: dict[str, Any], parent_id: str | None, attr: str) -> str | None:
    parent = index.get(parent_id) if parent_id else None
    return getattr(parent, attr) if parent is not None else None
