"""Insurance policy repository. Returns application DTOs."""

from __future__ import annotations

from sqlalchemy import Row

from app.application.dtos.policy import PolicyResult
from app.infrastructure.persistence.models.policy import InsurancePolicy
from app.infrastructure.persistence.repositories.record_repo import SqlRecordRepository
from app.shared.utils.datetime import ensure_utc


def _policy_to_result(p: InsurancePolicy) -> PolicyResult:
    """Map ORM InsurancePolicy to application PolicyResult."""
    return PolicyResult(
        id=p.id,
        user_id=p.user_id,
        policy_number=p.policy_number,
        provider=p.provider,
        insurance_type=p.insurance_type,
        description=p.description,
        coverage_amount=p.coverage_amount,
        premium=p.premium,
        start_date=ensure_utc(p.start_date),
        end_date=ensure_utc(p.end_date),
        is_active=p.is_active,
        created_at=ensure_utc(p.created_at),
        updated_at=ensure_utc(p.updated_at),
    )


class PolicyRepository(SqlRecordRepository[InsurancePolicy, PolicyResult]):
    """Policy partition of the record store (read-only)."""

    model = InsurancePolicy
    queryable_fields = frozenset({
        "id", "user_id", "policy_number", "provider", "insurance_type",
        "description", "coverage_amount", "start_date", "end_date", "is_active",
        "created_at", "updated_at",
    })

    def _to_result(self, row: Row) -> PolicyResult:
        return _policy_to_result(row[0])
