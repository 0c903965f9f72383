from __future__ import annotations

import asyncio
from datetime import datetime, timezone

import pytest

from src.services.search import (
    DEFAULT_SORT,
    InMemoryStorage,
    SearchValidationError,
    StorageError,
    run_search,
    search_citizens,
    validate_filters,
)
from src.services.search.predicates import MATCH_ALL
from tests.conftest import make_citizen


def _search(params, storage):
    return asyncio.run(search_citizens(params, storage))


def _ids(page):
    return [r["citizen_id"] for r in page.rows]


class RecordingStorage(InMemoryStorage):
    """InMemoryStorage that records every read it serves."""

    def __init__(self, records=()):
        super().__init__(records)
        self.calls = []

    async def count(self, predicate):
        self.calls.append(("count", predicate))
        return await super().count(predicate)

    async def fetch_rows(self, predicate, *, sort=DEFAULT_SORT, skip=0, take=20):
        self.calls.append(("fetch_rows", predicate, sort, skip, take))
        return await super().fetch_rows(predicate, sort=sort, skip=skip, take=take)


class FailingStorage:
    def __init__(self):
        self.count_calls = 0

    async def count(self, predicate):
        self.count_calls += 1
        raise StorageError("connection refused")

    async def fetch_rows(self, predicate, *, sort=DEFAULT_SORT, skip=0, take=20):
        return []


def test_bilingual_scenario(bilingual_records):
    r1, r2, r3 = bilingual_records
    storage = InMemoryStorage([r1, r2, r3])

    both = _search({"nameAr": "محمد", "nameEn": "Ali"}, storage)
    assert _ids(both) == [r2["citizen_id"]]
    assert both.pagination.total_count == 1

    arabic_only = _search({"nameAr": "محمد"}, storage)
    assert set(_ids(arabic_only)) == {r1["citizen_id"], r2["citizen_id"]}
    assert arabic_only.pagination.total_count == 2


def test_no_facets_returns_everything(bilingual_records):
    storage = RecordingStorage(bilingual_records)
    page = _search({}, storage)
    assert page.pagination.total_count == 3
    assert len(page.rows) == 3
    assert all(call[1] is MATCH_ALL for call in storage.calls)


def test_exactly_two_reads_with_same_predicate_and_window():
    storage = RecordingStorage([make_citizen(first_name_en="Ali") for _ in range(3)])
    _search({"nameEn": "Ali", "page": "2", "pageSize": "2"}, storage)

    kinds = sorted(call[0] for call in storage.calls)
    assert kinds == ["count", "fetch_rows"]
    predicates = {call[1] for call in storage.calls}
    assert len(predicates) == 1
    fetch = next(call for call in storage.calls if call[0] == "fetch_rows")
    assert fetch[2] == DEFAULT_SORT
    assert (fetch[3], fetch[4]) == (2, 2)


def test_paging_through_results_is_deterministic():
    same_time = datetime(2024, 5, 1, tzinfo=timezone.utc)
    newer = datetime(2024, 6, 1, tzinfo=timezone.utc)
    records = [
        make_citizen(citizen_id=30, registration_date=same_time),
        make_citizen(citizen_id=10, registration_date=same_time),
        make_citizen(citizen_id=20, registration_date=same_time),
        make_citizen(citizen_id=40, registration_date=newer),
        make_citizen(citizen_id=5, registration_date=datetime(2023, 1, 1, tzinfo=timezone.utc)),
    ]
    storage = InMemoryStorage(records)

    first = _search({"pageSize": "2"}, storage)
    second = _search({"pageSize": "2", "page": "2"}, storage)
    third = _search({"pageSize": "2", "page": "3"}, storage)

    assert _ids(first) == [40, 10]
    assert _ids(second) == [20, 30]
    assert _ids(third) == [5]
    assert first.pagination.has_next_page is True
    assert third.pagination.has_next_page is False
    assert third.pagination.total_pages == 3


def test_spouse_relation_without_member_id():
    with_spouse = make_citizen(family_relationships=[{"related_citizen_id": "X", "relationship_type": "SPOUSE"}])
    with_child = make_citizen(family_relationships=[{"related_citizen_id": "Y", "relationship_type": "CHILD"}])
    storage = InMemoryStorage([with_spouse, with_child, make_citizen()])
    page = _search({"relationship": "SPOUSE"}, storage)
    assert _ids(page) == [with_spouse["citizen_id"]]


def test_validation_error_happens_before_any_read():
    storage = RecordingStorage([make_citizen()])
    with pytest.raises(SearchValidationError) as exc_info:
        _search({"pageSize": "500", "birthDateTo": "31-12-2000"}, storage)
    assert exc_info.value.fields == ["birthDateTo", "pageSize"]
    assert storage.calls == []


def test_storage_error_propagates_without_retry():
    storage = FailingStorage()
    with pytest.raises(StorageError):
        _search({"nameEn": "Ali"}, storage)
    assert storage.count_calls == 1


class SlowRowsStorage:
    """Row read hangs; count fails once the row read has started."""

    def __init__(self):
        self.rows_cancelled = False

    async def count(self, predicate):
        await asyncio.sleep(0)
        raise StorageError("count timed out")

    async def fetch_rows(self, predicate, *, sort=DEFAULT_SORT, skip=0, take=20):
        try:
            await asyncio.sleep(30)
        except asyncio.CancelledError:
            self.rows_cancelled = True
            raise
        return []


def test_failed_count_cancels_the_pending_row_read():
    storage = SlowRowsStorage()

    async def scenario():
        with pytest.raises(StorageError):
            await run_search(validate_filters({"nameEn": "Ali"}), storage)
        # let the cancellation reach the row read
        await asyncio.sleep(0)
        return storage.rows_cancelled

    assert asyncio.run(scenario()) is True
