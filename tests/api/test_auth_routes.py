import asyncio

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.adapters.auth.session_store import InMemorySessionStore
from src.adapters.sqlite.repos import SQLiteUserRepo
from src.api.auth_utils import get_password_hash
from src.api.deps import get_rules, get_session_store, get_user_repo
from src.api.routes.auth import router
from src.domain.entities import User
from src.rules.models import Rules


@pytest.fixture
def client(
    user_repo: SQLiteUserRepo, session_store: InMemorySessionStore, rules: Rules
) -> TestClient:
    asyncio.run(
        user_repo.save(
            User(
                email="user@nextmail.com",
                name="User",
                password_hash=get_password_hash("123456"),
            )
        )
    )

    app = FastAPI()
    app.include_router(router)
    app.dependency_overrides[get_user_repo] = lambda: user_repo
    app.dependency_overrides[get_session_store] = lambda: session_store
    app.dependency_overrides[get_rules] = lambda: rules
    return TestClient(app)


def test_login_success_sets_cookie_and_redirects(
    client: TestClient, session_store: InMemorySessionStore
) -> None:
    response = client.post(
        "/login",
        data={"email": "user@nextmail.com", "password": "123456"},
        follow_redirects=False,
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/dashboard"
    assert "access_token" in response.cookies
    assert len(session_store) == 1


def test_login_wrong_password(client: TestClient, session_store: InMemorySessionStore) -> None:
    response = client.post(
        "/login",
        data={"email": "user@nextmail.com", "password": "wrong-password"},
        follow_redirects=False,
    )

    assert response.status_code == 401
    assert response.json() == {"message": "Invalid credentials."}
    assert len(session_store) == 0


def test_login_unknown_user(client: TestClient) -> None:
    response = client.post(
        "/login",
        data={"email": "ghost@nextmail.com", "password": "123456"},
        follow_redirects=False,
    )

    assert response.status_code == 401
    assert response.json() == {"message": "Invalid credentials."}


def test_login_unsupported_provider(client: TestClient, rules: Rules) -> None:
    other = rules.model_copy(update={"auth": rules.auth.model_copy(update={"provider": "github"})})
    client.app.dependency_overrides[get_rules] = lambda: other  # type: ignore[attr-defined]

    response = client.post(
        "/login",
        data={"email": "user@nextmail.com", "password": "123456"},
        follow_redirects=False,
    )

    assert response.status_code == 401
    assert response.json() == {"message": "Something went wrong."}


def test_logout_drops_session(client: TestClient, session_store: InMemorySessionStore) -> None:
    client.post(
        "/login",
        data={"email": "user@nextmail.com", "password": "123456"},
        follow_redirects=False,
    )
    assert len(session_store) == 1

    response = client.post("/logout", follow_redirects=False)

    assert response.status_code == 303
    assert response.headers["location"] == "/login"
    assert len(session_store) == 0
