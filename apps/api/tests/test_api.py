from __future__ import annotations

from datetime import date

import pytest
from fastapi.testclient import TestClient

from src.core import get_settings, limiter
from src.core.constants import MAX_PAGE
from src.dependencies import get_storage
from src.main import app
from src.services.search import DEFAULT_SORT, InMemoryStorage, StorageError
from tests.conftest import make_citizen


class _DownStorage:
    async def count(self, predicate):
        raise StorageError("statement timeout")

    async def fetch_rows(self, predicate, *, sort=DEFAULT_SORT, skip=0, take=20):
        raise StorageError("statement timeout")


@pytest.fixture
def client_with():
    def _make(storage):
        app.dependency_overrides[get_storage] = lambda: storage
        return TestClient(app)

    limiter.reset()
    yield _make
    app.dependency_overrides.clear()
    limiter.reset()


def test_health(client_with):
    client = client_with(InMemoryStorage())
    assert client.get("/health").json() == {"status": "ok"}


def test_search_envelope_shape(client_with, bilingual_records):
    r1, r2, r3 = bilingual_records
    r2 = {**r2, "passports": [{"passport_number": "P0001", "issue_date": date(2020, 1, 1)}]}
    client = client_with(InMemoryStorage([r1, r2, r3]))

    resp = client.get("/citizens/search", params={"nameAr": "محمد", "nameEn": "Ali"})
    assert resp.status_code == 200
    body = resp.json()
    assert [c["national_id"] for c in body["data"]] == [r2["national_id"]]
    assert body["data"][0]["passports"][0]["passport_number"] == "P0001"
    assert body["pagination"] == {
        "totalCount": 1,
        "currentPage": 1,
        "pageSize": 20,
        "totalPages": 1,
        "hasNextPage": False,
        "hasPreviousPage": False,
    }


def test_single_script_search(client_with, bilingual_records):
    client = client_with(InMemoryStorage(bilingual_records))
    body = client.get("/citizens/search", params={"nameAr": "محمد"}).json()
    assert body["pagination"]["totalCount"] == 2


def test_blank_params_from_the_form_are_ignored(client_with, bilingual_records):
    client = client_with(InMemoryStorage(bilingual_records))
    resp = client.get(
        "/citizens/search",
        params={"nameAr": "", "gender": "", "isAlive": "", "relationship": "", "page": "1"},
    )
    assert resp.status_code == 200
    assert resp.json()["pagination"]["totalCount"] == 3


def test_invalid_params_return_400_with_field_names(client_with):
    client = client_with(InMemoryStorage([make_citizen()]))
    resp = client.get("/citizens/search", params={"pageSize": "500", "page": "0", "birthDateFrom": "2000-02-30"})
    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == "Invalid search parameters."
    assert body["fields"] == ["birthDateFrom", "page", "pageSize"]


def test_storage_failure_returns_500(client_with):
    client = client_with(_DownStorage())
    resp = client.get("/citizens/search", params={"nameEn": "Ali"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to search citizens."}


def test_huge_page_is_a_400_not_a_storage_failure(client_with):
    client = client_with(InMemoryStorage([make_citizen()]))
    resp = client.get("/citizens/search", params={"page": str(MAX_PAGE + 1)})
    assert resp.status_code == 400
    assert resp.json()["fields"] == ["page"]


def test_forwarded_for_header_does_not_reset_the_rate_limit(client_with):
    client = client_with(InMemoryStorage())
    allowed = int(get_settings().search_rate_limit.split("/")[0])

    statuses = [
        client.get(
            "/citizens/search",
            headers={"X-Forwarded-For": f"203.0.113.{i}"},
        ).status_code
        for i in range(allowed + 1)
    ]
    assert statuses[:allowed] == [200] * allowed
    assert statuses[-1] == 429
