"""DTOs for insurance policy reads and faceted filtering (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PolicyResult:
    """Policy read-model (search candidate and filter row)."""

    id: str
    user_id: str
    policy_number: str
    provider: str
    insurance_type: str
    description: str | None
    coverage_amount: float
    premium: float | None
    start_date: datetime
    end_date: datetime
    is_active: bool
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class PolicySummary:
    """Parent policy fields carried on claim and document rows."""

    policy_number: str
    provider: str | None = None
    insurance_type: str | None = None


@dataclass(frozen=True)
class PolicyFilter:
    """Faceted policy filter. Empty tuples and None impose no constraint."""

    insurance_types: tuple[str, ...] = ()
    providers: tuple[str, ...] = ()
    is_active: bool | None = None
    min_amount: float | None = None
    max_amount: float | None = None
    start_after: datetime | None = None
    end_before: datetime | None = None


@dataclass(frozen=True)
class PolicyFilterOptions:
    """Distinct facet values over all of a user's policies (for filter UI)."""

    providers: list[str]
    insurance_types: list[str]
