from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool

from event_planner.core.config import settings
from event_planner.core.database import Base

# register every table on Base.metadata
import event_planner.models.admin  # noqa: F401
import event_planner.models.config_store  # noqa: F401
import event_planner.models.events  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Alembic runs with the sync driver (psycopg2)
config.set_main_option("sqlalchemy.url", settings.DATABASE_SYNC_URL or settings.DATABASE_URL)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
