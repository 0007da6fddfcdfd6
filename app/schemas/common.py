"""Shared API schema building blocks (camelCase wire format, pagination envelope)."""

import math

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Response model serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def total_pages(total: int, size: int) -> int:
    """ceil(total / size); 0 when there are no matches."""
    return math.ceil(total / size)


class SearchPagination(CamelModel):
    """Pagination envelope for GET /search."""

    total: int
    page: int
    limit: int
    total_pages: int = Field(..., description="ceil(total / limit)")


class FilterPagination(CamelModel):
    """Pagination envelope for the faceted filter endpoints."""

    total: int
    page: int
    page_size: int
    total_pages: int = Field(..., description="ceil(total / pageSize)")
