"""Shared extensions for the habit tracker application."""

from pathlib import Path

from flask import current_app
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy(session_options={"expire_on_commit": False})
migrate = Migrate()


def _default_limit() -> str:
    return current_app.config["RATELIMIT_DEFAULT"]


# Resolved per request so every app created from the factory gets its own
# configured limit; enabled flag and storage come from RATELIMIT_* config.
limiter = Limiter(key_func=get_remote_address, default_limits=[_default_limit])


def init_extensions(app) -> None:
    """Initialize all extensions with the Flask app."""
    db.init_app(app)
    migrate.init_app(app, db, directory=str(Path(__file__).resolve().parent / "migrations"))
    limiter.init_app(app)
