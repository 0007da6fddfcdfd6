"""Claim repository. Rows carry the parent policy's number, provider and type."""

from __future__ import annotations

from sqlalchemy import Row, Select, select

from app.application.dtos.claim import ClaimResult
from app.application.dtos.policy import PolicySummary
from app.infrastructure.persistence.models.claim import Claim
from app.infrastructure.persistence.models.policy import InsurancePolicy
from app.infrastructure.persistence.repositories.record_repo import SqlRecordRepository
from app.shared.utils.datetime import ensure_utc


def _claim_to_result(c: Claim, policy: PolicySummary | None) -> ClaimResult:
    """Map ORM Claim (plus joined policy columns) to application ClaimResult."""
    return ClaimResult(
        id=c.id,
        user_id=c.user_id,
        policy_id=c.policy_id,
        claim_number=c.claim_number,
        status=c.status,
        incident_date=ensure_utc(c.incident_date),
        description=c.description,
        damage_amount=c.damage_amount,
        approved_amount=c.approved_amount,
        created_at=ensure_utc(c.created_at),
        updated_at=ensure_utc(c.updated_at),
        policy=policy,
    )


class ClaimRepository(SqlRecordRepository[Claim, ClaimResult]):
    """Claim partition of the record store (read-only)."""

    model = Claim
    queryable_fields = frozenset({
        "id", "user_id", "policy_id", "claim_number", "status", "incident_date",
        "description", "damage_amount", "approved_amount", "created_at", "updated_at",
    })

    def _base_select(self) -> Select:
        return select(
            Claim,
            InsurancePolicy.policy_number,
            InsurancePolicy.provider,
            InsurancePolicy.insurance_type,
        ).outerjoin(InsurancePolicy, Claim.policy_id == InsurancePolicy.id)

    def _to_result(self, row: Row) -> ClaimResult:
        claim, policy_number, provider, insurance_type = row
        summary = (
            PolicySummary(
                policy_number=policy_number,
                provider=provider,
                insurance_type=insurance_type,
            )
            if policy_number is not None
            else None
        )
        return _claim_to_result(claim, summary)
