"""Store-neutral query predicates.

Search and filter use cases describe what they want as a small tree of
conditions over record field names; each repository backend compiles the
tree into its own query form (SQL expression, Python check). Field names
are the record attribute names (e.g. "updated_at", "policy_number").
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, TypeAlias

RangeBound: TypeAlias = int | float | datetime


@dataclass(frozen=True)
class TextMatch:
    """True when any term is a case-insensitive substring of any field.

    Terms are literal text; backends must not treat LIKE wildcards
    (%, _) inside a term as patterns.
    """

    fields: tuple[str, ...]
    terms: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.fields:
            raise ValueError("TextMatch requires at least one field")
        if not self.terms:
            raise ValueError("TextMatch requires at least one term")


@dataclass(frozen=True)
class In:
    """True when the field value is one of values."""

    field: str
    values: tuple[Any, ...]


@dataclass(frozen=True)
class Eq:
    """True when the field value equals value."""

    field: str
    value: Any


@dataclass(frozen=True)
class Range:
    """Inclusive range; either bound may be omitted (but not both)."""

    field: str
    gte: RangeBound | None = None
    lte: RangeBound | None = None

    def __post_init__(self) -> None:
        if self.gte is None and self.lte is None:
            raise ValueError(f"Range on {self.field} needs gte or lte")


@dataclass(frozen=True)
class AnyOf:
    """Disjunction of conditions."""

    conditions: tuple["Predicate", ...]


@dataclass(frozen=True)
class AllOf:
    """Conjunction of conditions. An empty AllOf matches every record."""

    conditions: tuple["Predicate", ...]


Predicate: TypeAlias = TextMatch | In | Eq | Range | AnyOf | AllOf


@dataclass(frozen=True)
class SortOrder:
    """Sort key for list queries."""

    field: str
    descending: bool = True


# Every list query in this service orders by last modification, newest first.
NEWEST_FIRST = SortOrder(field="updated_at", descending=True)


def owned_by(user_id: str, predicate: Predicate | None = None) -> AllOf:
    """Scope a predicate to a single owner (AND user_id == user_id)."""
    scope = Eq("user_id", user_id)
    if predicate is None:
        return AllOf((scope,))
    return AllOf((scope, predicate))
