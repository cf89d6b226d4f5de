"""add habits, recurrence and completion tables

Revision ID: 20261019_habits_initial
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20261019_habits_initial"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "habits",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )

    op.create_table(
        "habit_week_days",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("week_day", sa.Integer(), nullable=False),
        sa.Column(
            "habit_id",
            sa.String(length=36),
            sa.ForeignKey("habits.id", ondelete="RESTRICT", onupdate="CASCADE"),
            nullable=False,
        ),
        sa.UniqueConstraint(
            "habit_id", "week_day", name="uq_habit_week_days_habit_week_day"
        ),
    )

    op.create_table(
        "days",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("date", sa.DateTime(), nullable=False),
        sa.UniqueConstraint("date", name="uq_days_date"),
    )

    op.create_table(
        "day_habits",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column(
            "day_id",
            sa.String(length=36),
            sa.ForeignKey("days.id", ondelete="RESTRICT", onupdate="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "habit_id",
            sa.String(length=36),
            sa.ForeignKey("habits.id", ondelete="RESTRICT", onupdate="CASCADE"),
            nullable=False,
        ),
        sa.UniqueConstraint("day_id", "habit_id", name="uq_day_habits_day_habit"),
    )
    op.create_index("ix_day_habits_day_id", "day_habits", ["day_id"])
    op.create_index("ix_day_habits_habit_id", "day_habits", ["habit_id"])


def downgrade():
    op.drop_index("ix_day_habits_habit_id", table_name="day_habits")
    op.drop_index("ix_day_habits_day_id", table_name="day_habits")
    op.drop_table("day_habits")
    op.drop_table("days")
    op.drop_table("habit_week_days")
    op.drop_table("habits")
