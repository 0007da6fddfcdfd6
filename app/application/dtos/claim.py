"""DTOs for claim reads and faceted filtering (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime

from app.application.dtos.policy import PolicySummary
from app.domain.enums import ClaimStatus


@dataclass(frozen=True)
class ClaimResult:
    """Claim read-model. policy is filled when the repository joins the parent."""

    id: str
    user_id: str
    policy_id: str
    claim_number: str
    status: ClaimStatus
    incident_date: datetime
    description: str
    damage_amount: float | None
    approved_amount: float | None
    created_at: datetime
    updated_at: datetime
    policy: PolicySummary | None = None


@dataclass(frozen=True)
class ClaimFilter:
    """Faceted claim filter. Empty tuples and None impose no constraint."""

    statuses: tuple[ClaimStatus, ...] = ()
    policy_id: str | None = None
    incident_date_from: datetime | None = None
    incident_date_to: datetime | None = None
    min_amount: float | None = None
    max_amount: float | None = None
