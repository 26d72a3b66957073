import os
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path

from fastapi import Depends, Response

from src.adapters.auth.credentials import CredentialsAuthenticator
from src.adapters.auth.session_store import InMemorySessionStore
from src.adapters.clock import SystemClock
from src.adapters.navigation import ResponseNavigator
from src.adapters.revalidation import PathRevalidationAdapter
from src.adapters.sqlite.repos import SQLiteInvoiceRepo, SQLiteUserRepo
from src.components.invoices import InvoiceActionConfig, build_config
from src.rules.loader import load_rules
from src.rules.models import Rules

AuthenticatorFactory = Callable[[Response], CredentialsAuthenticator]


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("DASH_DATA_DIR", "./data"))
        self.db_path = str(self.data_dir / "dashboard.db")
        self.rules_path = Path(os.environ.get("DASH_RULES_PATH", self.base_dir / "rules.yaml"))
        self.migrations_dir = self.base_dir / "migrations"


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return load_rules(settings.rules_path)


def get_action_config(rules: Rules = Depends(get_rules)) -> InvoiceActionConfig:
    return build_config(rules.invoices)


# --- Repos ---
def get_invoice_repo(settings: Settings = Depends(get_settings)) -> SQLiteInvoiceRepo:
    return SQLiteInvoiceRepo(settings.db_path)


def get_user_repo(settings: Settings = Depends(get_settings)) -> SQLiteUserRepo:
    return SQLiteUserRepo(settings.db_path)


# --- Process-wide adapters ---
@lru_cache
def get_revalidator() -> PathRevalidationAdapter:
    return PathRevalidationAdapter()


@lru_cache
def get_session_store() -> InMemorySessionStore:
    return InMemorySessionStore()


def get_clock() -> SystemClock:
    return SystemClock()


# --- Per-request adapters ---
def get_navigator() -> ResponseNavigator:
    return ResponseNavigator()


def get_authenticator_factory(
    rules: Rules = Depends(get_rules),
    user_repo: SQLiteUserRepo = Depends(get_user_repo),
    session_store: InMemorySessionStore = Depends(get_session_store),
    clock: SystemClock = Depends(get_clock),
) -> AuthenticatorFactory:
    """Authenticators write the session cookie onto the response they are built for."""

    def factory(response: Response) -> CredentialsAuthenticator:
        return CredentialsAuthenticator(
            user_repo=user_repo,
            session_store=session_store,
            response=response,
            time=clock,
            password_min_length=rules.auth.password_min_length,
            ttl_minutes=rules.auth.sessions.ttl_minutes,
            cookie=rules.auth.sessions.cookie,
        )

    return factory
