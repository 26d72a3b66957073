import asyncio
from pathlib import Path

import pytest

from src.adapters.sqlite.repos import SQLiteUserRepo
from src.app_shell.cli import main

PROJECT_ROOT = Path(__file__).parent.parent.parent


@pytest.fixture
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(PROJECT_ROOT)
    monkeypatch.setenv("DASH_DATA_DIR", str(tmp_path))
    return tmp_path


def test_migrate(data_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["migrate"])

    assert (data_dir / "dashboard.db").exists()
    assert "Applied 1 migration(s)." in capsys.readouterr().out


def test_create_user(data_dir: Path) -> None:
    main(["create-user", "--email", "user@nextmail.com", "--password", "123456"])

    repo = SQLiteUserRepo(str(data_dir / "dashboard.db"))
    user = asyncio.run(repo.get_by_email("user@nextmail.com"))
    assert user is not None
    assert user.name == "user"
    assert user.password_hash != "123456"


def test_create_user_short_password(data_dir: Path) -> None:
    with pytest.raises(SystemExit):
        main(["create-user", "--email", "user@nextmail.com", "--password", "123"])


def test_create_duplicate_user(data_dir: Path) -> None:
    main(["create-user", "--email", "user@nextmail.com", "--password", "123456"])

    with pytest.raises(SystemExit):
        main(["create-user", "--email", "user@nextmail.com", "--password", "123456"])


def test_unknown_command() -> None:
    with pytest.raises(SystemExit):
        main(["frobnicate"])
