"""Initial schema: vacancies, applications.

Revision ID: 001
Revises:
Create Date: 2026-10-18
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

json_type = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def upgrade() -> None:
    # Vacancies
    op.create_table(
        "vacancies",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(255), nullable=False, server_default=""),
        sa.Column("subtitle", sa.String(255), nullable=False, server_default=""),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
        sa.Column("header_image", sa.String(500), nullable=False, server_default=""),
        sa.Column("bg_gradient", sa.String(255), nullable=False, server_default=""),
        sa.Column("requirements", json_type),
        sa.Column("tech_stack", json_type),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sqlite_autoincrement=True,
    )

    # Applications
    op.create_table(
        "applications",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("primary_contact", sa.String(255), nullable=False, server_default=""),
        sa.Column("additional_contacts", json_type),
        sa.Column("name", sa.String(255), nullable=False, server_default=""),
        sa.Column("about", sa.Text, nullable=False, server_default=""),
        sa.Column("vacancy_id", sa.Integer),
        sa.Column("status", sa.String(50), nullable=False, server_default="pending"),
        sa.Column("salary_expectation", sa.String(255), nullable=False, server_default=""),
        sa.Column("available_from", sa.String(255), nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sqlite_autoincrement=True,
    )
    op.create_index("idx_application_vacancy", "applications", ["vacancy_id"])
    op.create_index("idx_application_status", "applications", ["status"])


def downgrade() -> None:
    op.drop_index("idx_application_status", table_name="applications")
    op.drop_index("idx_application_vacancy", table_name="applications")
    op.drop_table("applications")
    op.drop_table("vacancies")
