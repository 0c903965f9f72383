"""Initial schema: citizens, passports, family relationships.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "citizens",
        sa.Column("citizen_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("national_id", sa.String(50), nullable=False),
        sa.Column("first_name_ar", sa.String(100), nullable=True),
        sa.Column("last_name_ar", sa.String(100), nullable=True),
        sa.Column("father_name_ar", sa.String(100), nullable=True),
        sa.Column("mother_name_ar", sa.String(100), nullable=True),
        sa.Column("first_name_en", sa.String(100), nullable=True),
        sa.Column("last_name_en", sa.String(100), nullable=True),
        sa.Column("father_name_en", sa.String(100), nullable=True),
        sa.Column("mother_name_en", sa.String(100), nullable=True),
        sa.Column("gender", sa.String(1), nullable=True),
        sa.Column("birth_date", sa.Date(), nullable=True),
        sa.Column("birth_place", sa.String(255), nullable=True),
        sa.Column("marital_status", sa.String(20), nullable=True),
        sa.Column("occupation", sa.String(255), nullable=True),
        sa.Column("nationality", sa.String(100), nullable=True),
        sa.Column("is_alive", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("registration_date", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_citizens_national_id", "citizens", ["national_id"], unique=True)
    op.create_index("ix_citizens_registration_date", "citizens", ["registration_date"])
    op.create_index("ix_citizens_birth_date", "citizens", ["birth_date"])

    op.create_table(
        "passports",
        sa.Column("passport_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "citizen_id",
            sa.Integer(),
            sa.ForeignKey("citizens.citizen_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("passport_number", sa.String(50), nullable=False),
        sa.Column("passport_type", sa.String(30), nullable=True),
        sa.Column("issue_date", sa.Date(), nullable=True),
        sa.Column("expiry_date", sa.Date(), nullable=True),
        sa.Column("status", sa.String(30), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()")),
    )
    op.create_index("ix_passports_citizen_id", "passports", ["citizen_id"])
    op.create_index("ix_passports_passport_number", "passports", ["passport_number"])

    op.create_table(
        "family_relationships",
        sa.Column("relationship_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "citizen_id",
            sa.Integer(),
            sa.ForeignKey("citizens.citizen_id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("related_citizen_id", sa.String(50), nullable=False),
        sa.Column("relationship_type", sa.String(20), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()")),
    )
    op.create_index("ix_family_relationships_citizen_id", "family_relationships", ["citizen_id"])
    op.create_index(
        "ix_family_relationships_related",
        "family_relationships",
        ["related_citizen_id", "relationship_type"],
    )


def downgrade() -> None:
    op.drop_table("family_relationships")
    op.drop_table("passports")
    op.drop_table("citizens")
