"""Application interfaces (ports): repository protocols."""

from app.application.interfaces.repositories import (
    IClaimRepository,
    IDocumentRepository,
    IPolicyRepository,
    IRecordRepository,
)

__all__ = [
    "IClaimRepository",
    "IDocumentRepository",
    "IPolicyRepository",
    "IRecordRepository",
]
