"""Pagination Schemas — query parameters and the {data, meta} envelope.

Invariants:
    - page >= 1, 1 <= size <= MAX_PAGE_SIZE
    - Defaults: page=1, size=10
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from app.core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from app.schemas.common import CamelModel

T = TypeVar("T")


class PaginationParams(BaseModel):
    """Page request — 1-based page number and page length."""
    page: int = Field(DEFAULT_PAGE, ge=1)
    size: int = Field(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)


class PaginationMetaSchema(CamelModel):
    page: int
    size: int
    total: int
    total_pages: int


class PaginatedResponse(CamelModel, Generic[T]):
    """Page of results plus metadata describing the slice."""
    data: list[T]
    meta: PaginationMetaSchema
