"""
SQLite repositories for invoices and users.

Statements always use ``?`` placeholders. Blocking sqlite3 calls run in the
threadpool so the async ports never block the event loop; each call opens
and closes its own connection.
"""

from __future__ import annotations

import sqlite3
from datetime import datetime
from typing import Any
from uuid import UUID

from fastapi.concurrency import run_in_threadpool

from src.domain.entities import InvoiceRecord, User
from src.domain.errors import DataStoreError

INSERT_INVOICE = (
    "INSERT INTO invoices (customer_id, amount, status, date) VALUES (?, ?, ?, ?)"
)
UPDATE_INVOICE = (
    "UPDATE invoices SET customer_id = ?, amount = ?, status = ? WHERE id = ?"
)
DELETE_INVOICE = "DELETE FROM invoices WHERE id = ?"


def dict_factory(cursor: sqlite3.Cursor, row: tuple[Any, ...]) -> dict[str, Any]:
    """Convert SQLite row to dictionary."""
    return {col[0]: row[idx] for idx, col in enumerate(cursor.description)}


class SQLiteRepoBase:
    """Base class for SQLite repositories."""

    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        conn.execute("PRAGMA foreign_keys = ON;")
        return conn

    def _write(self, statement: str, params: tuple[Any, ...]) -> int:
        """Run one write statement and commit. Returns affected row count."""
        try:
            conn = self._get_conn()
        except sqlite3.Error as e:
            raise DataStoreError(f"Could not open database: {e}", statement=statement) from e
        try:
            cursor = conn.execute(statement, params)
            conn.commit()
            return cursor.rowcount
        except (sqlite3.Error, OverflowError) as e:
            # OverflowError: an integer parameter outside SQLite's 64-bit range
            conn.rollback()
            raise DataStoreError(str(e), statement=statement) from e
        finally:
            conn.close()

    def _fetch(self, query: str, params: tuple[Any, ...]) -> list[dict[str, Any]]:
        try:
            conn = self._get_conn()
        except sqlite3.Error as e:
            raise DataStoreError(f"Could not open database: {e}", statement=query) from e
        try:
            return conn.execute(query, params).fetchall()
        except sqlite3.Error as e:
            raise DataStoreError(str(e), statement=query) from e
        finally:
            conn.close()


class SQLiteInvoiceRepo(SQLiteRepoBase):
    """SQLite implementation of InvoiceRepoPort."""

    async def insert(self, *, customer_id: str, amount: int, status: str, date: str) -> None:
        await run_in_threadpool(
            self._write, INSERT_INVOICE, (customer_id, amount, status, date)
        )

    async def update(self, invoice_id: str, *, customer_id: str, amount: int, status: str) -> None:
        await run_in_threadpool(
            self._write, UPDATE_INVOICE, (customer_id, amount, status, invoice_id)
        )

    async def delete(self, invoice_id: str) -> None:
        await run_in_threadpool(self._write, DELETE_INVOICE, (invoice_id,))

    async def get_by_id(self, invoice_id: str) -> InvoiceRecord | None:
        rows = await run_in_threadpool(
            self._fetch, "SELECT * FROM invoices WHERE id = ?", (invoice_id,)
        )
        return InvoiceRecord.model_validate(rows[0]) if rows else None

    async def list_all(self) -> list[InvoiceRecord]:
        rows = await run_in_threadpool(
            self._fetch, "SELECT * FROM invoices ORDER BY date DESC, id", ()
        )
        return [InvoiceRecord.model_validate(row) for row in rows]


class SQLiteUserRepo(SQLiteRepoBase):
    """SQLite implementation of UserRepoPort."""

    async def get_by_email(self, email: str) -> User | None:
        rows = await run_in_threadpool(
            self._fetch, "SELECT * FROM users WHERE email = ?", (email,)
        )
        return self._map_row(rows[0]) if rows else None

    async def save(self, user: User) -> User:
        await run_in_threadpool(
            self._write,
            """
            INSERT INTO users (id, name, email, password_hash, created_at)
            VALUES (?, ?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                name=excluded.name,
                email=excluded.email,
                password_hash=excluded.password_hash
            """,
            (
                str(user.id),
                user.name,
                user.email,
                user.password_hash,
                user.created_at.isoformat(),
            ),
        )
        return user

    def _map_row(self, row: dict[str, Any]) -> User:
        return User(
            id=UUID(row["id"]),
            name=row["name"],
            email=row["email"],
            password_hash=row["password_hash"],
            created_at=datetime.fromisoformat(row["created_at"]),
        )
