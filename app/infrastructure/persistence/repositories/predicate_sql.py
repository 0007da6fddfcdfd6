"""Compile store-neutral predicates into SQLAlchemy boolean expressions."""

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import and_, false, or_, true
from sqlalchemy.sql.elements import ColumnElement

from app.domain.value_objects.predicates import (
    AllOf,
    AnyOf,
    Eq,
    In,
    Predicate,
    Range,
    TextMatch,
)
from app.shared.utils.sanitization import LIKE_ESCAPE_CHAR, escape_like

ColumnResolver = Callable[[str], ColumnElement]


def compile_predicate(predicate: Predicate, column: ColumnResolver) -> ColumnElement[bool]:
    """Return a WHERE expression for predicate.

    column maps a record field name to its SQL column and raises ValueError
    for fields the repository does not expose.
    """
    if isinstance(predicate, AllOf):
        if not predicate.conditions:
            return true()
        return and_(*(compile_predicate(c, column) for c in predicate.conditions))
    if isinstance(predicate, AnyOf):
        if not predicate.conditions:
            return false()
        return or_(*(compile_predicate(c, column) for c in predicate.conditions))
    if isinstance(predicate, TextMatch):
        return or_(
            *(
                column(field).ilike(f"%{escape_like(term)}%", escape=LIKE_ESCAPE_CHAR)
                for field in predicate.fields
                for term in predicate.terms
            )
        )
    if isinstance(predicate, In):
        if not predicate.values:
            return false()
        return column(predicate.field).in_(predicate.values)
    if isinstance(predicate, Eq):
        if predicate.value is None:
            return column(predicate.field).is_(None)
        return column(predicate.field) == predicate.value
    if isinstance(predicate, Range):
        col = column(predicate.field)
        bounds = []
        if predicate.gte is not None:
            bounds.append(col >= predicate.gte)
        if predicate.lte is not None:
            bounds.append(col <= predicate.lte)
        return and_(*bounds)
    raise TypeError(f"Unsupported predicate: {type(predicate).__name__}")
