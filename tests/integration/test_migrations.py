import sqlite3
from pathlib import Path

import pytest

from src.adapters.sqlite.migrator import SQLiteMigrator

PROJECT_ROOT = Path(__file__).parent.parent.parent


def _tables(db_path: str) -> set[str]:
    conn = sqlite3.connect(db_path)
    try:
        rows = conn.execute("SELECT name FROM sqlite_master WHERE type='table'").fetchall()
        return {row[0] for row in rows}
    finally:
        conn.close()


def test_applies_project_migrations(tmp_path: Path) -> None:
    db_path = str(tmp_path / "nested" / "dashboard.db")
    migrator = SQLiteMigrator(db_path, str(PROJECT_ROOT / "migrations"))

    applied = migrator.run_migrations()

    assert applied == ["0001_initial.sql"]
    assert {"invoices", "users", "_migrations"} <= _tables(db_path)


def test_is_idempotent(tmp_path: Path) -> None:
    db_path = str(tmp_path / "dashboard.db")
    migrator = SQLiteMigrator(db_path, str(PROJECT_ROOT / "migrations"))
    migrator.run_migrations()

    assert migrator.run_migrations() == []
    assert migrator.applied_migrations() == {"0001_initial.sql"}


def test_down_section_is_not_applied(tmp_path: Path) -> None:
    migrations = tmp_path / "migrations"
    migrations.mkdir()
    (migrations / "0001_t.sql").write_text(
        "-- Up\nCREATE TABLE t (id INTEGER);\n-- Down\nDROP TABLE t;\n"
    )
    db_path = str(tmp_path / "db.sqlite")

    SQLiteMigrator(db_path, str(migrations)).run_migrations()

    assert "t" in _tables(db_path)


def test_failed_migration_is_reported(tmp_path: Path) -> None:
    migrations = tmp_path / "migrations"
    migrations.mkdir()
    (migrations / "0001_bad.sql").write_text("CREATE TABLE (;")
    migrator = SQLiteMigrator(str(tmp_path / "db.sqlite"), str(migrations))

    with pytest.raises(RuntimeError, match="0001_bad.sql"):
        migrator.run_migrations()

    assert migrator.applied_migrations() == set()
