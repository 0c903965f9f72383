"""In-process StoragePort: evaluates predicates with Predicate.matches over a list of records."""

from typing import Any, Iterable, Sequence

from .predicates import Predicate, read_field
from .storage import DEFAULT_SORT, SortKey


class InMemoryStorage:
    """Records may be dicts, pydantic models or plain objects; related collections are lists."""

    def __init__(self, records: Iterable[Any] = ()):
        self._records = list(records)

    async def count(self, predicate: Predicate) -> int:
        return sum(1 for r in self._records if predicate.matches(r))

    async def fetch_rows(
        self,
        predicate: Predicate,
        *,
        sort: SortKey = DEFAULT_SORT,
        skip: int = 0,
        take: int = 20,
    ) -> Sequence[Any]:
        rows = [r for r in self._records if predicate.matches(r)]
        # Stable sorts applied from the least significant key; None sorts last either way.
        for key in reversed(sort):
            present = [r for r in rows if read_field(r, key.field) is not None]
            missing = [r for r in rows if read_field(r, key.field) is None]
            present.sort(key=lambda r, f=key.field: read_field(r, f), reverse=key.descending)
            rows = present + missing
        return rows[skip:skip + take]
