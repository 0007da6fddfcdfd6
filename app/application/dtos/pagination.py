"""Paging DTOs shared by search and faceted filters."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from app.domain.exceptions import ValidationException


@dataclass(frozen=True)
class PageRequest:
    """1-based page number and page size."""

    page: int = 1
    page_size: int = 10

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValidationException("page must be >= 1", field="page")
        if self.page_size < 1:
            raise ValidationException("page_size must be >= 1", field="page_size")

    @property
    def skip(self) -> int:
        """Number of records before this page."""
        return (self.page - 1) * self.page_size


T = TypeVar("T")


@dataclass(frozen=True)
class FilterPage(Generic[T]):
    """One exact page of a faceted filter plus the total match count."""

    items: list[T]
    total: int
