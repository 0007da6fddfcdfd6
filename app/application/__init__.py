"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions.
Infrastructure implements the repository interfaces.
"""

from app.application.interfaces import (
    IClaimRepository,
    IDocumentRepository,
    IPolicyRepository,
    IRecordRepository,
)
from app.application.use_cases.faceted_filters import (
    ClaimFilterEngine,
    DocumentFilterEngine,
    PolicyFilterEngine,
)
from app.application.use_cases.search import GlobalSearchService

__all__ = [
    "ClaimFilterEngine",
    "DocumentFilterEngine",
    "GlobalSearchService",
    "IClaimRepository",
    "IDocumentRepository",
    "IPolicyRepository",
    "IRecordRepository",
    "PolicyFilterEngine",
]
