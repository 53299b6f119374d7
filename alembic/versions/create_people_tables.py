"""Create admins, teachers, parents and students tables

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-17
"""
from alembic import op
import sqlalchemy as sa

revision = "a1b2c3d4e5f6"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


def _person_columns():
    return [
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("surname", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True, unique=True),
        sa.Column("phone", sa.String(length=50), nullable=True, unique=True),
        sa.Column("address", sa.String(length=500), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "admins",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("username", sa.String(length=255), nullable=False),
        *_timestamps(),
    )
    op.create_table(
        "teachers",
        sa.Column("id", sa.Uuid(), primary_key=True),
        *_person_columns(),
        *_timestamps(),
    )
    op.create_table(
        "parents",
        sa.Column("id", sa.Uuid(), primary_key=True),
        *_person_columns(),
        *_timestamps(),
    )
    op.create_table(
        "students",
        sa.Column("id", sa.Uuid(), primary_key=True),
        *_person_columns(),
        sa.Column(
            "parent_id",
            sa.Uuid(),
            sa.ForeignKey("parents.id", ondelete="CASCADE"),
            nullable=False,
        ),
        *_timestamps(),
    )

    for table in ("admins", "teachers", "parents", "students"):
        op.create_index(f"ix_{table}_id", table, ["id"])
        op.create_index(f"ix_{table}_username", table, ["username"], unique=True)
    op.create_index("ix_students_parent_id", "students", ["parent_id"])


def downgrade() -> None:
    op.drop_index("ix_students_parent_id", table_name="students")
    for table in ("students", "parents", "teachers", "admins"):
        op.drop_index(f"ix_{table}_username", table_name=table)
        op.drop_index(f"ix_{table}_id", table_name=table)
        op.drop_table(table)
