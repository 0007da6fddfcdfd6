"""Policy filter API schemas."""

from datetime import datetime

from app.schemas.common import CamelModel, FilterPagination


class PolicyResponse(CamelModel):
    id: str
    user_id: str
    policy_number: str
    provider: str
    insurance_type: str
    description: str | None = None
    coverage_amount: float
    premium: float | None = None
    start_date: datetime
    end_date: datetime
    is_active: bool
    created_at: datetime
    updated_at: datetime


class PolicyFilterOptionsResponse(CamelModel):
    """Distinct facet values over all of the caller's policies."""

    providers: list[str]
    insurance_types: list[str]


class PolicyFilterResponse(CamelModel):
    policies: list[PolicyResponse]
    pagination: FilterPagination
    filter_options: PolicyFilterOptionsResponse
