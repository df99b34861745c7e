from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from app.database import Base
from app import models  # noqa: F401

BACKEND_DIR = Path(__file__).resolve().parent.parent


def _alembic_config(database_url: str) -> Config:
    config = Config(str(BACKEND_DIR / "alembic.ini"))
    config.set_main_option("script_location", str(BACKEND_DIR / "alembic"))
    config.set_main_option("sqlalchemy.url", database_url)
    return config


def test_migrations_build_the_model_schema(tmp_path):
    database_url = f"sqlite:///{tmp_path / 'ledger.db'}"

    command.upgrade(_alembic_config(database_url), "head")

    inspector = inspect(create_engine(database_url))
    for table in Base.metadata.sorted_tables:
        migrated = {c["name"] for c in inspector.get_columns(table.name)}
        assert migrated == {c.name for c in table.columns}, table.name


def test_migrations_downgrade_cleanly(tmp_path):
    database_url = f"sqlite:///{tmp_path / 'ledger.db'}"
    config = _alembic_config(database_url)

    command.upgrade(config, "head")
    command.downgrade(config, "base")

    tables = set(inspect(create_engine(database_url)).get_table_names())
    assert tables <= {"alembic_version"}
