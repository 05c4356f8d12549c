"""Create catalog (categories, roadmaps, courses, lessons) and progress tables

Revision ID: create_catalog_and_progress
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "create_catalog_and_progress"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _named_table(name: str, *columns: sa.Column) -> None:
    # name_key holds the lower-cased name; its UNIQUE index is the
    # case-insensitive uniqueness guarantee
    op.create_table(
        name,
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("name_key", sa.String(255), nullable=False),
        *columns,
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index(f"ix_{name}_name_key", name, ["name_key"], unique=True)


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("username", sa.String(), unique=True),
        sa.Column("email", sa.String(), unique=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )

    _named_table("roadmap_categories")
    _named_table("course_categories")

    _named_table(
        "roadmaps",
        sa.Column("description", sa.String(5000), nullable=False),
        sa.Column(
            "roadmap_category_id",
            sa.Integer(),
            sa.ForeignKey("roadmap_categories.id", ondelete="RESTRICT"),
            nullable=False,
        ),
        sa.Column("created_by_user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("achieved", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )

    _named_table(
        "courses",
        sa.Column("description", sa.Text()),
        sa.Column(
            "course_category_id",
            sa.Integer(),
            sa.ForeignKey("course_categories.id", ondelete="RESTRICT"),
            nullable=False,
        ),
        sa.Column("created_by_user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )

    op.create_table(
        "roadmap_courses",
        sa.Column(
            "roadmap_id",
            sa.Integer(),
            sa.ForeignKey("roadmaps.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "course_id",
            sa.Integer(),
            sa.ForeignKey("courses.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )

    op.create_table(
        "lessons",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "course_id",
            sa.Integer(),
            sa.ForeignKey("courses.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("created_by_user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_lessons_course_id", "lessons", ["course_id"])

    op.create_table(
        "user_progress",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column(
            "lesson_id",
            sa.Integer(),
            sa.ForeignKey("lessons.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("completed_date", sa.DateTime(), nullable=False),
        sa.UniqueConstraint("user_id", "lesson_id", name="unique_user_lesson"),
    )
    op.create_index("ix_user_progress_user_id", "user_progress", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_user_progress_user_id", table_name="user_progress")
    op.drop_table("user_progress")
    op.drop_index("ix_lessons_course_id", table_name="lessons")
    op.drop_table("lessons")
    op.drop_table("roadmap_courses")
    for name in ("courses", "roadmaps", "course_categories", "roadmap_categories"):
        op.drop_index(f"ix_{name}_name_key", table_name=name)
        op.drop_table(name)
    op.drop_table("users")
