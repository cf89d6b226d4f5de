"""Habits JSON API controllers (thin, schema-validated)."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from habittracker.core.utils.validation import validation_error_response
from habittracker.domains.habits import services as habit_services
from habittracker.domains.habits.schemas.habit_schemas import (
    HabitCreate,
    HabitResponse,
    ToggleHabitParams,
)

habit_api_bp = Blueprint("habit_api", __name__)


def habit_response(habit) -> HabitResponse:
    return HabitResponse(
        id=habit.id,
        title=habit.title,
        created_at=habit.created_at,
        week_days=[rule.week_day for rule in habit.week_days],
    )


@habit_api_bp.get("")
def list_habits():
    habits = habit_services.list_habits()
    payload = [
        habit_response(habit).model_dump(mode="json", by_alias=True) for habit in habits
    ]
    return jsonify({"ok": True, "habits": payload})


@habit_api_bp.post("")
def create_habit():
    payload = request.get_json(silent=True) or {}
    try:
        data = HabitCreate.model_validate(payload)
    except ValidationError as exc:
        return validation_error_response(exc)
    today = current_app.extensions["clock"].today()
    try:
        habit = habit_services.create_habit(
            title=data.title, week_days=data.week_days, today=today
        )
    except ValueError as exc:
        if str(exc) == "conflict":
            return jsonify({"ok": False, "error": "conflict"}), 409
        return jsonify({"ok": False, "error": "validation_error"}), 400
    return jsonify({"ok": True, "habit_id": habit.id}), 201


@habit_api_bp.patch("/<habit_id>/toggle")
def toggle_habit(habit_id: str):
    try:
        params = ToggleHabitParams.model_validate({"id": habit_id})
    except ValidationError as exc:
        return validation_error_response(exc)
    today = current_app.extensions["clock"].today()
    try:
        completed = habit_services.toggle_habit(str(params.id), today=today)
    except ValueError as exc:
        code = str(exc)
        if code == "not_found":
            return jsonify({"ok": False, "error": "not_found"}), 404
        return jsonify({"ok": False, "error": "conflict"}), 409
    return jsonify({"ok": True, "completed": completed})
