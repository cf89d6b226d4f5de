import sys
from datetime import datetime
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config as AlembicConfig
from sqlalchemy.orm import scoped_session, sessionmaker

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from habittracker import create_app
from habittracker.core.utils.dates import Clock, start_of_day
from habittracker.domains.habits import models as habit_models  # noqa: F401
from habittracker.extensions import db

# Wednesday, mid-afternoon: exercises start-of-day normalization.
FIXED_NOW = datetime(2026, 10, 21, 14, 30)


# ==================== Pytest Markers ====================
def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (database, API)")


class FixedClock(Clock):
    """Clock pinned to a settable instant."""

    def __init__(self, now: datetime) -> None:
        super().__init__()
        self.current = now

    def now(self) -> datetime:
        return self.current

    def set(self, now: datetime) -> None:
        self.current = now


def _alembic_config() -> AlembicConfig:
    cfg = AlembicConfig(str(ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(ROOT / "habittracker" / "migrations"))
    cfg.set_main_option("habittracker_env", "testing")
    return cfg


@pytest.fixture(scope="session", autouse=True)
def migrated_db():
    """Apply migrations once per session to mirror production schema."""
    cfg = _alembic_config()
    # Start from an empty schema even if a previous run was interrupted.
    command.downgrade(cfg, "base")
    command.upgrade(cfg, "head")
    yield
    command.downgrade(cfg, "base")


@pytest.fixture()
def clock():
    return FixedClock(FIXED_NOW)


@pytest.fixture()
def today(clock):
    return start_of_day(clock.now())


@pytest.fixture()
def app(migrated_db, clock):
    """
    Create a per-test app with an isolated database transaction.

    The session joins an outer connection transaction through savepoints, so
    service-level commits are rolled back after the test.
    """
    app = create_app("testing")
    app.extensions["clock"] = clock
    ctx = app.app_context()
    ctx.push()

    connection = db.engine.connect()
    transaction = connection.begin()

    original_session = db.session
    session_factory = scoped_session(
        sessionmaker(
            bind=connection,
            join_transaction_mode="create_savepoint",
            expire_on_commit=False,
        )
    )
    db.session = session_factory

    try:
        yield app
    finally:
        session_factory.remove()
        transaction.rollback()
        connection.close()
        db.session = original_session
        ctx.pop()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def live_app(migrated_db, clock):
    """
    App bound to the real engine, without the per-test outer transaction.

    For tests that need several connections to commit against the same
    database; rows written are deleted afterwards.
    """
    app = create_app("testing")
    app.extensions["clock"] = clock
    yield app
    with app.app_context():
        for model in (
            habit_models.DayHabit,
            habit_models.Day,
            habit_models.HabitWeekDay,
            habit_models.Habit,
        ):
            db.session.query(model).delete()
        db.session.commit()
