"""Habit, recurrence and completion models."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column, relationship

from habittracker.extensions import db


def _uuid() -> str:
    return str(uuid.uuid4())


class Habit(db.Model):
    __tablename__ = "habits"

    id: Mapped[str] = mapped_column(db.String(36), primary_key=True, default=_uuid)
    title: Mapped[str] = mapped_column(db.String(255), nullable=False)
    # Always midnight of the creation day.
    created_at: Mapped[datetime] = mapped_column(db.DateTime, nullable=False)

    week_days: Mapped[list["HabitWeekDay"]] = relationship(
        "HabitWeekDay",
        back_populates="habit",
        order_by="HabitWeekDay.week_day",
    )
    day_habits: Mapped[list["DayHabit"]] = relationship(
        "DayHabit", back_populates="habit"
    )


class HabitWeekDay(db.Model):
    __tablename__ = "habit_week_days"
    __table_args__ = (
        db.UniqueConstraint("habit_id", "week_day", name="uq_habit_week_days_habit_week_day"),
    )

    id: Mapped[str] = mapped_column(db.String(36), primary_key=True, default=_uuid)
    week_day: Mapped[int] = mapped_column(nullable=False)
    habit_id: Mapped[str] = mapped_column(
        db.ForeignKey("habits.id", ondelete="RESTRICT", onupdate="CASCADE"),
        nullable=False,
    )

    habit: Mapped[Habit] = relationship("Habit", back_populates="week_days")


class Day(db.Model):
    __tablename__ = "days"
    __table_args__ = (db.UniqueConstraint("date", name="uq_days_date"),)

    id: Mapped[str] = mapped_column(db.String(36), primary_key=True, default=_uuid)
    date: Mapped[datetime] = mapped_column(db.DateTime, nullable=False)

    day_habits: Mapped[list["DayHabit"]] = relationship(
        "DayHabit", back_populates="day"
    )


class DayHabit(db.Model):
    __tablename__ = "day_habits"
    __table_args__ = (
        db.UniqueConstraint("day_id", "habit_id", name="uq_day_habits_day_habit"),
    )

    id: Mapped[str] = mapped_column(db.String(36), primary_key=True, default=_uuid)
    day_id: Mapped[str] = mapped_column(
        db.ForeignKey("days.id", ondelete="RESTRICT", onupdate="CASCADE"),
        nullable=False,
        index=True,
    )
    habit_id: Mapped[str] = mapped_column(
        db.ForeignKey("habits.id", ondelete="RESTRICT", onupdate="CASCADE"),
        nullable=False,
        index=True,
    )

    day: Mapped[Day] = relationship("Day", back_populates="day_habits")
    habit: Mapped[Habit] = relationship("Habit", back_populates="day_habits")
