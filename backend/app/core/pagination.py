"""Pagination — pure computation of page metadata and query offsets.

Invariants:
    - total_pages == ceil(total / size)
    - page > total_pages raises PageOutOfRangeError, unless total == 0
    - Never touches IO; callers pass the row count in
"""

import math
from dataclasses import dataclass

from app.core.errors import PageOutOfRangeError


@dataclass(frozen=True)
class PaginationMeta:
    """Describes one slice of an ordered result set."""
    page: int
    size: int
    total: int
    total_pages: int


def page_offset(page: int, size: int) -> int:
    """Rows to skip before the first row of a 1-based page."""
    return (page - 1) * size


def calculate_pagination(total: int, page: int, size: int) -> PaginationMeta:
    """Compute pagination metadata. Pure, no IO."""
    total_pages = math.ceil(total / size)
    if total > 0 and page > total_pages:
        raise PageOutOfRangeError(page)
    return PaginationMeta(
        page=page, size=size, total=total, total_pages=total_pages,
    )
