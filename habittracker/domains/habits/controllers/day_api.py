"""Day view and summary JSON API controllers."""

from __future__ import annotations

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from habittracker.core.utils.validation import validation_error_response
from habittracker.domains.habits import services as habit_services
from habittracker.domains.habits.controllers.habit_api import habit_response
from habittracker.domains.habits.schemas.habit_schemas import (
    DayQuery,
    DayResponse,
    SummaryEntryResponse,
)

day_api_bp = Blueprint("day_api", __name__)


@day_api_bp.get("/day")
def day_detail():
    try:
        query = DayQuery.model_validate(request.args.to_dict())
    except ValidationError as exc:
        return validation_error_response(exc)
    day = habit_services.get_day(query.date)
    resp = DayResponse(
        available_habits=[habit_response(habit) for habit in day["available_habits"]],
        completed_habits=day["completed_habits"],
    )
    return jsonify(resp.model_dump(mode="json", by_alias=True))


@day_api_bp.get("/summary")
def summary():
    rows = habit_services.get_summary()
    return jsonify(
        [SummaryEntryResponse(**row).model_dump(mode="json") for row in rows]
    )
