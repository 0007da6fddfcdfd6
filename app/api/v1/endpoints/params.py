"""Query-string helpers shared by the search and filter endpoints."""

from collections.abc import Callable
from datetime import datetime
from typing import Any, TypeVar

from fastapi.exceptions import RequestValidationError

from app.shared.utils.datetime import ensure_utc


def _invalid(field: str, value: Any, message: str, error_type: str) -> RequestValidationError:
    return RequestValidationError(
        [{"type": error_type, "loc": ("query", field), "msg": message, "input": value}]
    )


def split_csv(raw: str | None) -> tuple[str, ...]:
    """Split a comma list, trimming entries and dropping empty ones."""
    if not raw:
        return ()
    return tuple(part.strip() for part in raw.split(",") if part.strip())


E = TypeVar("E")


def parse_csv_enum(raw: str | None, field: str, enum_type: Callable[[str], E]) -> tuple[E, ...]:
    """Parse a comma list of enum values; unknown values are a 422."""
    values = []
    for token in split_csv(raw):
        try:
            values.append(enum_type(token))
        except ValueError as e:
            raise _invalid(field, token, f"Unknown value {token!r}", "enum") from e
    return tuple(values)


def resolve_page_size(requested: int | None, default: int, maximum: int, field: str) -> int:
    """Requested size (>= 1 enforced by Query) capped by configuration; default when absent."""
    if requested is None:
        return default
    if requested > maximum:
        raise _invalid(
            field,
            requested,
            f"Input should be less than or equal to {maximum}",
            "less_than_equal",
        )
    return requested


def utc(value: datetime | None) -> datetime | None:
    """Treat naive query datetimes as UTC."""
    return ensure_utc(value)
