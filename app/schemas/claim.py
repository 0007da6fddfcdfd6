"""Claim filter API schemas."""

from datetime import datetime

from app.domain.enums import ClaimStatus
from app.schemas.common import CamelModel, FilterPagination


class ClaimPolicyResponse(CamelModel):
    """Parent policy fields shown alongside a claim."""

    policy_number: str
    provider: str | None = None
    insurance_type: str | None = None


class ClaimResponse(CamelModel):
    id: str
    user_id: str
    policy_id: str
    claim_number: str
    status: ClaimStatus
    incident_date: datetime
    description: str
    damage_amount: float | None = None
    approved_amount: float | None = None
    created_at: datetime
    updated_at: datetime
    policy: ClaimPolicyResponse | None = None


class ClaimFilterResponse(CamelModel):
    claims: list[ClaimResponse]
    pagination: FilterPagination
