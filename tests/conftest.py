from datetime import UTC, datetime
from pathlib import Path
from unittest.mock import Mock

import pytest

from src.adapters.auth.session_store import InMemorySessionStore
from src.adapters.revalidation import StubRevalidationAdapter
from src.adapters.sqlite.migrator import SQLiteMigrator
from src.adapters.sqlite.repos import SQLiteInvoiceRepo, SQLiteUserRepo
from src.rules.loader import load_rules
from src.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules() -> Rules:
    """The project's real rules file."""
    return load_rules(PROJECT_ROOT / "rules.yaml")


@pytest.fixture
def db_path(tmp_path: Path) -> str:
    """A migrated, empty SQLite database."""
    path = str(tmp_path / "dashboard.db")
    SQLiteMigrator(path, str(PROJECT_ROOT / "migrations")).run_migrations()
    return path


@pytest.fixture
def invoice_repo(db_path: str) -> SQLiteInvoiceRepo:
    return SQLiteInvoiceRepo(db_path)


@pytest.fixture
def user_repo(db_path: str) -> SQLiteUserRepo:
    return SQLiteUserRepo(db_path)


@pytest.fixture
def revalidator() -> StubRevalidationAdapter:
    return StubRevalidationAdapter()


@pytest.fixture
def session_store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def now() -> datetime:
    """Fixed 'now' time for tests."""
    return datetime(2024, 6, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def mock_time(now: datetime) -> Mock:
    """Mock time port that returns a fixed time."""
    time = Mock()
    time.now_utc.return_value = now
    return time
