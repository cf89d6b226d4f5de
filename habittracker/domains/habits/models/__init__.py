from habittracker.domains.habits.models.habit_models import (
    Day,
    DayHabit,
    Habit,
    HabitWeekDay,
)

__all__ = ["Day", "DayHabit", "Habit", "HabitWeekDay"]
