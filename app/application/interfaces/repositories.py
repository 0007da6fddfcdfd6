"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs and domain predicates only; no
infrastructure imports. One uniform contract serves all three record kinds.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar

if TYPE_CHECKING:
    from app.application.dtos.claim import ClaimResult
    from app.application.dtos.document import DocumentResult
    from app.application.dtos.policy import PolicyResult
    from app.domain.value_objects.predicates import Predicate, SortOrder

RecordT = TypeVar("RecordT", covariant=True)


class IRecordRepository(Protocol[RecordT]):
    """Read-only record store partition for one kind (DIP)."""

    async def search(
        self,
        predicate: Predicate,
        sort: SortOrder,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[RecordT]:
        """Return records matching predicate, sorted, windowed by skip/limit."""

    async def count(self, predicate: Predicate) -> int:
        """Return the number of records matching predicate."""

    async def distinct_values(self, predicate: Predicate, field: str) -> list[Any]:
        """Return distinct values of field over records matching predicate (sorted)."""


class IPolicyRepository(IRecordRepository["PolicyResult"], Protocol):
    """Policy partition of the record store."""


class IClaimRepository(IRecordRepository["ClaimResult"], Protocol):
    """Claim partition of the record store."""


class IDocumentRepository(IRecordRepository["DocumentResult"], Protocol):
    """Document partition of the record store."""
