from __future__ import annotations

from src.services.search import assemble_page


def test_last_partial_page():
    page = assemble_page(rows=[object()] * 5, total_count=45, page=3, page_size=20)
    p = page.pagination
    assert p.total_pages == 3
    assert p.has_next_page is False
    assert p.has_previous_page is True
    assert p.current_page == 3
    assert p.page_size == 20
    assert p.total_count == 45


def test_first_full_page_has_next():
    p = assemble_page(rows=[object()] * 20, total_count=45, page=1, page_size=20).pagination
    assert p.total_pages == 3
    assert p.has_next_page is True
    assert p.has_previous_page is False


def test_empty_result():
    p = assemble_page(rows=[], total_count=0, page=1, page_size=20).pagination
    assert p.total_pages == 0
    assert p.has_next_page is False
    assert p.has_previous_page is False


def test_exact_multiple_of_page_size():
    p = assemble_page(rows=[object()] * 20, total_count=40, page=2, page_size=20).pagination
    assert p.total_pages == 2
    assert p.has_next_page is False


def test_page_past_the_end():
    p = assemble_page(rows=[], total_count=10, page=5, page_size=20).pagination
    assert p.total_pages == 1
    assert p.has_next_page is False
    assert p.has_previous_page is True


def test_rows_are_kept_in_given_order():
    rows = ["c", "a", "b"]
    page = assemble_page(rows=rows, total_count=3, page=1, page_size=20)
    assert page.rows == ("c", "a", "b")


def test_pagination_serializes_camel_case():
    p = assemble_page(rows=[], total_count=0, page=1, page_size=20).pagination
    assert p.model_dump(by_alias=True) == {
        "totalCount": 0,
        "currentPage": 1,
        "pageSize": 20,
        "totalPages": 0,
        "hasNextPage": False,
        "hasPreviousPage": False,
    }
