"""Alembic environment for the habit tracker (online migrations only)."""

from logging.config import fileConfig
from pathlib import Path

from alembic import context
from sqlalchemy import engine_from_config, pool

from habittracker import create_app
from habittracker.domains.habits import models  # noqa: F401
from habittracker.extensions import db

config = context.config

if config.config_file_name and Path(config.config_file_name).exists():
    # Keep application loggers alive when migrations run inside the test session.
    fileConfig(config.config_file_name, disable_existing_loggers=False)


def run_migrations() -> None:
    app = create_app(config.get_main_option("habittracker_env", "development"))
    configuration = config.get_section(config.config_ini_section) or {}
    configuration["sqlalchemy.url"] = app.config["SQLALCHEMY_DATABASE_URI"]

    connectable = engine_from_config(configuration, prefix="sqlalchemy.", poolclass=pool.NullPool)
    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=db.metadata,
            render_as_batch=connection.dialect.name == "sqlite",
        )
        with context.begin_transaction():
            context.run_migrations()


run_migrations()
