"""Citizen search pipeline and service facade.

Pipeline: raw params -> validate_filters (FilterSpec) -> build_predicate -> storage
(row window + total count, concurrently) -> assemble_page.

Storage failures propagate unchanged: no retry, no partial page.
"""

import asyncio
import logging
from collections.abc import Mapping
from typing import Any, Optional

from .filter_validator import FilterSpec, validate_filters
from .pagination import Page, assemble_page
from .predicate_builder import build_predicate
from .storage import DEFAULT_SORT, StorageError, StoragePort

logger = logging.getLogger(__name__)


async def run_search(spec: FilterSpec, storage: StoragePort) -> Page:
    """Execute an already-validated FilterSpec against ``storage``."""
    predicate = build_predicate(spec)
    rows_task = asyncio.ensure_future(
        storage.fetch_rows(
            predicate,
            sort=DEFAULT_SORT,
            skip=spec.offset,
            take=spec.limit,
        )
    )
    count_task = asyncio.ensure_future(storage.count(predicate))
    try:
        rows, total_count = await asyncio.gather(rows_task, count_task)
    except StorageError as exc:
        logger.warning("Citizen search failed (facets=%s): %s", spec.active_facets(), exc)
        raise
    finally:
        # gather does not cancel the sibling read when one of them fails
        for task in (rows_task, count_task):
            if not task.done():
                task.cancel()
    logger.info(
        "Citizen search facets=%s page=%s page_size=%s total=%s",
        spec.active_facets(),
        spec.page,
        spec.page_size,
        total_count,
    )
    return assemble_page(rows, total_count, spec.page, spec.page_size)


async def search_citizens(raw: Optional[Mapping[str, Any]], storage: StoragePort) -> Page:
    """Validate raw request parameters and run the search. Raises SearchValidationError / StorageError."""
    spec = validate_filters(raw)
    return await run_search(spec, storage)


class SearchService:
    """Facade for citizen search operations."""

    @staticmethod
    async def search(raw: Optional[Mapping[str, Any]], storage: StoragePort) -> Page:
        return await search_citizens(raw, storage)


search_service = SearchService()
