"""Base SQL repository for read-only, predicate-driven record queries.

One subclass per record kind. Each call opens its own session from the
shared factory so global search can run list and count queries for several
kinds concurrently.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import Row, Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.sql.elements import ColumnElement

from app.domain.value_objects.predicates import Predicate, SortOrder
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.repositories.predicate_sql import compile_predicate


ModelType = TypeVar("ModelType", bound=Base)
ResultType = TypeVar("ResultType")


class SqlRecordRepository(ABC, Generic[ModelType, ResultType]):
    """Implements IRecordRepository over one ORM model.

    Subclasses set model and queryable_fields and implement _to_result.
    Override _base_select to join parent columns onto each row.
    """

    model: ClassVar[type[Any]]
    queryable_fields: ClassVar[frozenset[str]]

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self.session_factory = session_factory

    def _column(self, field: str) -> ColumnElement:
        """Resolve a record field name to this model's column."""
        if field not in self.queryable_fields:
            raise ValueError(
                f"Field {field!r} is not queryable on {self.model.__tablename__}"
            )
        return getattr(self.model, field)

    def _base_select(self) -> Select:
        return select(self.model)

    @abstractmethod
    def _to_result(self, row: Row) -> ResultType:
        """Map one result row (model first, then any joined columns) to a DTO."""

    async def search(
        self,
        predicate: Predicate,
        sort: SortOrder,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[ResultType]:
        """Return matching records ordered by sort (id breaks ties), windowed by skip/limit."""
        sort_col = self._column(sort.field)
        id_col = self.model.id
        order = (
            (sort_col.desc(), id_col.desc())
            if sort.descending
            else (sort_col.asc(), id_col.asc())
        )
        stmt = (
            self._base_select()
            .where(compile_predicate(predicate, self._column))
            .order_by(*order)
            .offset(skip)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [self._to_result(row) for row in result.all()]

    async def count(self, predicate: Predicate) -> int:
        """Return number of records matching predicate."""
        stmt = (
            select(func.count())
            .select_from(self.model)
            .where(compile_predicate(predicate, self._column))
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return result.scalar() or 0

    async def distinct_values(self, predicate: Predicate, field: str) -> list[Any]:
        """Return sorted distinct values of field over matching records."""
        col = self._column(field)
        stmt = (
            select(col)
            .where(compile_predicate(predicate, self._column))
            .distinct()
            .order_by(col)
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return list(result.scalars().all())
