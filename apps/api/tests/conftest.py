from __future__ import annotations

import os
import sys
from datetime import date, datetime, timezone
from itertools import count
from pathlib import Path

import pytest


def pytest_configure():
    # Ensure apps/api is on sys.path for absolute imports like 'src.services.search'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    os.environ.setdefault("LOG_LEVEL", "WARNING")


_ids = count(1)


def make_citizen(**overrides) -> dict:
    """Citizen record as the in-memory storage sees it (same field names as the ORM)."""
    n = next(_ids)
    record = {
        "citizen_id": n,
        "national_id": f"1190{n:08d}",
        "first_name_ar": None,
        "last_name_ar": None,
        "father_name_ar": None,
        "mother_name_ar": None,
        "first_name_en": None,
        "last_name_en": None,
        "father_name_en": None,
        "mother_name_en": None,
        "gender": "M",
        "birth_date": date(1990, 1, 1),
        "marital_status": "SINGLE",
        "is_alive": True,
        "registration_date": datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc),
        "passports": [],
        "family_relationships": [],
    }
    record.update(overrides)
    return record


@pytest.fixture
def citizen_factory():
    return make_citizen


@pytest.fixture
def bilingual_records():
    """R1 matches only the Arabic fragment, R2 matches both, R3 matches neither."""
    r1 = make_citizen(first_name_ar="محمد", last_name_ar="الأحمد", first_name_en="Omar", last_name_en="Saleh")
    r2 = make_citizen(first_name_ar="علي", father_name_ar="محمد", first_name_en="Ali", last_name_en="Hassan")
    r3 = make_citizen(first_name_ar="خالد", last_name_ar="النجار", first_name_en="Khaled", last_name_en="Najjar")
    return r1, r2, r3
