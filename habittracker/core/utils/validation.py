"""Input validation helpers."""

from __future__ import annotations

from flask import jsonify
from pydantic import ValidationError


def validation_error_response(exc: ValidationError):
    # ctx may carry exception instances, which are not JSON serializable.
    details = exc.errors(include_url=False, include_context=False)
    return jsonify({"ok": False, "error": "validation_error", "details": details}), 400
