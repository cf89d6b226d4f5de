"""Habit DTOs and schemas."""

from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, List
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

from habittracker.core.utils.dates import parse_iso_day

WeekDay = Annotated[StrictInt, Field(ge=0, le=6)]


class HabitCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1, max_length=255)
    week_days: List[WeekDay] = Field(alias="weekDays")

    @field_validator("week_days")
    @classmethod
    def _dedupe_week_days(cls, value: List[int]) -> List[int]:
        # Keep first occurrence order; the store allows one rule per weekday.
        return list(dict.fromkeys(value))


class DayQuery(BaseModel):
    date: date

    @field_validator("date", mode="before")
    @classmethod
    def _coerce_date(cls, value):
        if isinstance(value, str):
            return parse_iso_day(value)
        return value


class ToggleHabitParams(BaseModel):
    id: UUID


class HabitResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    created_at: datetime
    week_days: List[int] = Field(serialization_alias="weekDays")


class DayResponse(BaseModel):
    available_habits: List[HabitResponse] = Field(serialization_alias="availableHabits")
    completed_habits: List[str] = Field(serialization_alias="completedHabits")


class SummaryEntryResponse(BaseModel):
    id: str
    date: datetime
    completed: int
    available: int
