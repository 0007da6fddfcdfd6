"""Domain layer: value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import ClaimStatus, DocumentType, RecordKind
from app.domain.exceptions import (
    PolicyVaultException,
    SearchBackendException,
    StoreUnavailableException,
    ValidationException,
)
from app.domain.value_objects import (
    NEWEST_FIRST,
    AllOf,
    AnyOf,
    Eq,
    In,
    Predicate,
    Range,
    SortOrder,
    TextMatch,
    owned_by,
)

__all__ = [
    # Enums
    "ClaimStatus",
    "DocumentType",
    "RecordKind",
    # Exceptions
    "PolicyVaultException",
    "SearchBackendException",
    "StoreUnavailableException",
    "ValidationException",
    # Value objects
    "AllOf",
    "AnyOf",
    "Eq",
    "In",
    "NEWEST_FIRST",
    "Predicate",
    "Range",
    "SortOrder",
    "TextMatch",
    "owned_by",
]
