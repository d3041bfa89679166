"""Alembic environment configuration for async SQLAlchemy.

Only the owned tables (BaseModel.metadata) are migrated. The legacy
directory table is read-only and never appears in autogenerate output.
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from alembic import context
from directory_gate.core.config import settings
from directory_gate.infrastructure.persistence import BaseModel

# Alembic Config object
config = context.config

# Interpret the config file for Python logging
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Get database URL from Settings (not from alembic.ini)
config.set_main_option("sqlalchemy.url", settings.database_url)

# Import all models here for autogenerate support
# Note: E402 suppressed because imports must come after config setup
from directory_gate.infrastructure.persistence.models.app_version import AppVersion  # noqa: E402, F401
from directory_gate.infrastructure.persistence.models.call_log import CallLog  # noqa: E402, F401
from directory_gate.infrastructure.persistence.models.personal_request import (  # noqa: E402, F401
    PersonalRequest,
)
from directory_gate.infrastructure.persistence.models.user import User  # noqa: E402, F401

# Add model's MetaData for autogenerate
target_metadata = BaseModel.metadata


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode.

    This configures the context with just a URL and not an Engine.
    Calls to context.execute() emit the given string to the script output.
    """
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    """Run migrations with the given connection.

    Args:
        connection: SQLAlchemy connection to use for migrations.
    """
    context.configure(connection=connection, target_metadata=target_metadata)

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations() -> None:
    """Run migrations in async mode."""
    connectable = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)

    await connectable.dispose()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode using async engine."""
    asyncio.run(run_async_migrations())


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
