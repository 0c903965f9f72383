"""Add pg_trgm GIN indexes for ILIKE %...% search on names, national id and passport number.

Revision ID: 002
Revises: 001
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op


revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_TRGM_COLUMNS = (
    ("citizens", "first_name_ar"),
    ("citizens", "last_name_ar"),
    ("citizens", "father_name_ar"),
    ("citizens", "mother_name_ar"),
    ("citizens", "first_name_en"),
    ("citizens", "last_name_en"),
    ("citizens", "father_name_en"),
    ("citizens", "mother_name_en"),
    ("citizens", "national_id"),
    ("passports", "passport_number"),
)


def upgrade() -> None:
    # pg_trgm for ILIKE %...% (name / national id / passport number fragments)
    op.execute("CREATE EXTENSION IF NOT EXISTS pg_trgm")
    for table, column in _TRGM_COLUMNS:
        op.execute(
            f"CREATE INDEX IF NOT EXISTS ix_{table}_{column}_gin_trgm "
            f"ON {table} USING GIN ({column} gin_trgm_ops)"
        )


def downgrade() -> None:
    for table, column in reversed(_TRGM_COLUMNS):
        op.execute(f"DROP INDEX IF EXISTS ix_{table}_{column}_gin_trgm")
