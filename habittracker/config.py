"""Application configuration for the habit tracker."""

from __future__ import annotations

import os
from typing import Dict, Type

from dotenv import load_dotenv
from sqlalchemy.engine.url import make_url

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() in ("1", "true", "yes")


def _engine_options_from_uri(uri: str) -> dict:
    url = make_url(uri)
    # Always keep pool_pre_ping, vary connect_args by dialect.
    if url.get_backend_name() == "sqlite":
        return {
            "pool_pre_ping": True,
            "connect_args": {"detect_types": 0, "timeout": 30},
        }
    if url.get_backend_name() in {"postgresql", "postgres"}:
        timeout = int(os.environ.get("DB_CONNECT_TIMEOUT_SECONDS", "10"))
        return {"pool_pre_ping": True, "connect_args": {"connect_timeout": timeout}}
    return {"pool_pre_ping": True}


class BaseConfig:
    """Base configuration loaded for all environments."""

    SECRET_KEY = os.environ.get("SECRET_KEY", "change-me")
    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", "sqlite:///instance/habits.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = _engine_options_from_uri(SQLALCHEMY_DATABASE_URI)

    # IANA zone used to decide what "today" is; empty means server local time.
    APP_TIMEZONE = os.environ.get("APP_TIMEZONE", "")

    RATELIMIT_DEFAULT = os.environ.get("RATELIMIT_DEFAULT", "200/hour")
    RATELIMIT_STORAGE_URI = os.environ.get("REDIS_URL", "memory://")
    RATELIMIT_ENABLED = _env_flag("RATELIMIT_ENABLED", "true")

    MAX_CONTENT_LENGTH = int(os.environ.get("MAX_CONTENT_LENGTH", str(1024 * 1024)))


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    ENV = "development"


class TestingConfig(BaseConfig):
    TESTING = True
    # Use file-backed SQLite so Alembic migrations and app share the same DB.
    SQLALCHEMY_DATABASE_URI = os.environ.get("TEST_DATABASE_URL", "sqlite:///instance/test.db")
    SQLALCHEMY_ENGINE_OPTIONS = _engine_options_from_uri(SQLALCHEMY_DATABASE_URI)
    APP_TIMEZONE = ""
    RATELIMIT_ENABLED = False


class ProductionConfig(BaseConfig):
    DEBUG = False
    ENV = "production"


config_by_name: Dict[str, Type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}
