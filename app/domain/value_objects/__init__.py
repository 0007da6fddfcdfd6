"""Domain value objects and shared value types."""

from app.domain.value_objects.predicates import (
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
