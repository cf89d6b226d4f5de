"""Habit services: creation, day view, completion toggling and summary."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload

from habittracker.core.utils.dates import WEEK_DAY_NAMES, start_of_day, week_day_index
from habittracker.domains.habits.models.habit_models import (
    Day,
    DayHabit,
    Habit,
    HabitWeekDay,
)
from habittracker.extensions import db

logger = logging.getLogger(__name__)


def create_habit(*, title: str, week_days: List[int], today: datetime) -> Habit:
    title_norm = (title or "").strip()
    if not title_norm:
        raise ValueError("validation_error")
    if any(not 0 <= week_day <= 6 for week_day in week_days):
        raise ValueError("validation_error")

    habit = Habit(
        title=title_norm,
        created_at=start_of_day(today),
        week_days=[HabitWeekDay(week_day=week_day) for week_day in dict.fromkeys(week_days)],
    )
    db.session.add(habit)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ValueError("conflict")
    logger.info(
        "Created habit %s (%s) on %s",
        habit.id,
        ",".join(WEEK_DAY_NAMES[rule.week_day] for rule in habit.week_days) or "no days",
        habit.created_at.date().isoformat(),
    )
    return habit


def list_habits() -> List[Habit]:
    return (
        Habit.query.options(selectinload(Habit.week_days))
        .order_by(Habit.created_at, Habit.title)
        .all()
    )


def get_available_habits(day: date | datetime) -> List[Habit]:
    day_start = start_of_day(day)
    return (
        Habit.query.options(selectinload(Habit.week_days))
        .filter(Habit.created_at <= day_start)
        .filter(Habit.week_days.any(HabitWeekDay.week_day == week_day_index(day_start)))
        .order_by(Habit.created_at, Habit.title)
        .all()
    )


def get_day(day: date | datetime) -> dict:
    """Habits due on ``day`` plus the ids already completed for it.

    Reading a day never materializes its Day row.
    """
    day_start = start_of_day(day)
    available = get_available_habits(day_start)
    day_row = _find_day(day_start)
    completed: List[str] = []
    if day_row is not None:
        completed = [
            habit_id
            for (habit_id,) in db.session.query(DayHabit.habit_id)
            .filter(DayHabit.day_id == day_row.id)
            .order_by(DayHabit.habit_id)
            .all()
        ]
    return {"available_habits": available, "completed_habits": completed}


def _find_day(day_start: datetime) -> Optional[Day]:
    return Day.query.filter_by(date=day_start).first()


def get_or_create_day(day: date | datetime) -> Day:
    """Return the Day row for ``day``, inserting it if needed.

    The insert runs in a savepoint so a concurrent writer winning the unique
    ``days.date`` race only rolls back that savepoint; the winner's row is
    then read back.
    """
    day_start = start_of_day(day)
    existing = _find_day(day_start)
    if existing is not None:
        return existing
    try:
        with db.session.begin_nested():
            created = Day(date=day_start)
            db.session.add(created)
        return created
    except IntegrityError:
        logger.info("Day %s created concurrently, reusing it", day_start.date().isoformat())
        return Day.query.filter_by(date=day_start).one()


def toggle_habit(habit_id: str, *, today: datetime) -> bool:
    """Flip today's completion for a habit and return the new state."""
    habit = db.session.get(Habit, habit_id)
    if habit is None:
        raise ValueError("not_found")

    day = get_or_create_day(today)
    day_habit = DayHabit.query.filter_by(day_id=day.id, habit_id=habit.id).first()
    if day_habit is not None:
        db.session.delete(day_habit)
        completed = False
    else:
        db.session.add(DayHabit(day_id=day.id, habit_id=habit.id))
        completed = True
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ValueError("conflict")
    logger.info(
        "Habit %s %s on %s",
        habit.id,
        "completed" if completed else "uncompleted",
        day.date.date().isoformat(),
    )
    return completed


def get_summary() -> List[dict]:
    """Per materialized day: completed habit count and available habit count."""
    days = Day.query.order_by(Day.date).all()
    if not days:
        return []

    completed_by_day: Dict[str, int] = {
        day_id: int(count or 0)
        for day_id, count in db.session.query(DayHabit.day_id, func.count(DayHabit.id))
        .group_by(DayHabit.day_id)
        .all()
    }
    schedules = [
        (habit.created_at, {rule.week_day for rule in habit.week_days})
        for habit in Habit.query.options(selectinload(Habit.week_days)).all()
    ]

    summary = []
    for day in days:
        week_day = week_day_index(day.date)
        available = sum(
            1
            for created_at, week_days in schedules
            if week_day in week_days and created_at <= day.date
        )
        summary.append(
            {
                "id": day.id,
                "date": day.date,
                "completed": completed_by_day.get(day.id, 0),
                "available": available,
            }
        )
    return summary
