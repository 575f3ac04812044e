"""Tests for the movies table migration."""

import importlib.util

from pathlib import Path
from types import ModuleType

import pytest

from sqlalchemy import create_engine, inspect

from alembic.migration import MigrationContext
from alembic.operations import Operations


MIGRATION_PATH = (
    Path(__file__).resolve().parents[2] / "alembic" / "versions" / "001_create_movies.py"
)


@pytest.fixture
def migration() -> ModuleType:
    spec = importlib.util.spec_from_file_location("migration_001", MIGRATION_PATH)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_revision_is_root(migration: ModuleType) -> None:
    assert migration.revision == "001"
    assert migration.down_revision is None


def test_upgrade_and_downgrade(migration: ModuleType, tmp_path: Path) -> None:
    engine = create_engine(f"sqlite:///{tmp_path / 'migration.db'}")
    try:
        with engine.begin() as conn:
            with Operations.context(MigrationContext.configure(conn)):
                migration.upgrade()
            inspector = inspect(conn)
            columns = {c["name"] for c in inspector.get_columns("movies")}
            indexes = {i["name"] for i in inspector.get_indexes("movies")}

        assert columns == {"id", "year", "title", "studios", "producers", "winner"}
        assert indexes == {"ix_movies_year", "ix_movies_winner"}

        with engine.begin() as conn:
            with Operations.context(MigrationContext.configure(conn)):
                migration.downgrade()
            assert "movies" not in inspect(conn).get_table_names()
    finally:
        engine.dispose()
