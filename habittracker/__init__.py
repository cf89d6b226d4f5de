"""Habit tracker application factory and bootstrap."""

from __future__ import annotations

import os
import sqlite3
from pathlib import Path
from typing import Optional

from flask import Flask
from sqlalchemy import event
from sqlalchemy.engine import Engine

from habittracker.config import config_by_name
from habittracker.core.utils.dates import Clock
from habittracker.extensions import init_extensions


@event.listens_for(Engine, "connect")
def _set_sqlite_pragma(dbapi_connection, connection_record):
    """Enforce foreign keys and hand transaction control to SQLAlchemy.

    pysqlite defers BEGIN until the first DML statement, which breaks
    SAVEPOINT handling; disabling its implicit transactions and emitting
    BEGIN from the ``begin`` hook below keeps nested transactions intact.
    """
    if not isinstance(dbapi_connection, sqlite3.Connection):
        return
    dbapi_connection.isolation_level = None
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@event.listens_for(Engine, "begin")
def _sqlite_begin(conn):
    # Take the write lock up front: a second writer then waits on the busy
    # timeout instead of failing its SHARED -> RESERVED upgrade, and reads
    # whatever the first one committed.
    if conn.dialect.name == "sqlite":
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_app(config_name: Optional[str] = None) -> Flask:
    """Create and configure the habit tracker Flask application."""
    env_name = (config_name or os.environ.get("APP_ENV") or "development").lower()
    project_root = Path(__file__).resolve().parent.parent
    instance_root = project_root / "instance"

    app = Flask(
        __name__,
        instance_path=str(instance_root),
        instance_relative_config=True,
    )
    config_cls = config_by_name.get(env_name, config_by_name["development"])
    app.config.from_object(config_cls)
    instance_root.mkdir(parents=True, exist_ok=True)

    # Normalize sqlite path to absolute to avoid "unable to open database file"
    db_uri = app.config.get("SQLALCHEMY_DATABASE_URI")
    if db_uri and db_uri.startswith("sqlite:///") and db_uri != "sqlite:///:memory:":
        db_path = Path(db_uri.replace("sqlite:///", "", 1))
        if not db_path.is_absolute():
            db_path = project_root / db_path
        db_path.parent.mkdir(parents=True, exist_ok=True)
        app.config["SQLALCHEMY_DATABASE_URI"] = f"sqlite:///{db_path}"

    init_extensions(app)
    _register_blueprints(app)
    _register_error_handlers(app)

    app.extensions["clock"] = Clock(app.config.get("APP_TIMEZONE") or None)

    @app.get("/health")
    def health():
        return {"ok": True}, 200

    return app


def _register_blueprints(app: Flask) -> None:
    """Lazy import and register all controllers."""
    from habittracker.domains.habits.controllers.day_api import day_api_bp
    from habittracker.domains.habits.controllers.habit_api import habit_api_bp

    app.register_blueprint(habit_api_bp, url_prefix="/habits")
    app.register_blueprint(day_api_bp)


def _register_error_handlers(app: Flask) -> None:
    """Basic JSON error responses."""
    from werkzeug.exceptions import HTTPException

    @app.errorhandler(HTTPException)
    def _http_error(exc: HTTPException):
        return {"ok": False, "error": exc.description}, exc.code

    @app.errorhandler(Exception)
    def _generic_error(exc: Exception):
        app.logger.exception("Unhandled error: %s", exc)
        # In debug/testing, surface the exception message to speed up diagnosis
        if app.debug or app.testing:
            return {"ok": False, "error": str(exc)}, 500
        return {"ok": False, "error": "unexpected_error"}, 500
