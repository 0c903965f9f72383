"""Storage port used by citizen search. Adapters: sql_storage (Postgres), memory_storage (in-process)."""

from dataclasses import dataclass
from typing import Any, Protocol, Sequence

from .predicates import Predicate


class StorageError(Exception):
    """Raised by a storage adapter when a read fails (connection, timeout, query error)."""


@dataclass(frozen=True)
class SortField:
    field: str
    descending: bool = False


SortKey = tuple[SortField, ...]

# Newest registrations first; citizen_id breaks ties so pages never overlap.
DEFAULT_SORT: SortKey = (
    SortField("registration_date", descending=True),
    SortField("citizen_id"),
)


class StoragePort(Protocol):
    async def count(self, predicate: Predicate) -> int:
        """Rows matching ``predicate`` across the whole store (no skip/take)."""
        ...

    async def fetch_rows(
        self,
        predicate: Predicate,
        *,
        sort: SortKey = DEFAULT_SORT,
        skip: int = 0,
        take: int = 20,
    ) -> Sequence[Any]:
        """Rows matching ``predicate`` ordered by ``sort``, window [skip, skip + take)."""
        ...
