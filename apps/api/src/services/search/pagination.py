"""Page assembly: pure arithmetic over (rows, total_count, page, page_size)."""

import math
from dataclasses import dataclass
from typing import Any, Sequence

from src.schemas.search import PaginationResponse


@dataclass(frozen=True)
class Page:
    rows: tuple[Any, ...]
    pagination: PaginationResponse


def build_pagination(total_count: int, page: int, page_size: int, row_count: int) -> PaginationResponse:
    skip = (page - 1) * page_size
    total_pages = math.ceil(total_count / page_size) if total_count > 0 else 0
    return PaginationResponse(
        total_count=total_count,
        current_page=page,
        page_size=page_size,
        total_pages=total_pages,
        has_next_page=skip + row_count < total_count,
        has_previous_page=page > 1,
    )


def assemble_page(rows: Sequence[Any], total_count: int, page: int, page_size: int) -> Page:
    """Wrap an already-fetched, already-ordered row window with its pagination metadata."""
    return Page(
        rows=tuple(rows),
        pagination=build_pagination(total_count, page, page_size, len(rows)),
    )
