from __future__ import annotations

import threading
import time
from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient
from psycopg2 import pool

from app import create_app
from db.connection import ConnectionPool
from repositories.user_repo import INSERT_SQL, SELECT_ALL_SQL, SELECT_BY_ID_SQL


class FakeStore:
    """In-memory stand-in for the testing.users table."""

    def __init__(self) -> None:
        self.rows: List[Dict[str, Any]] = []
        self.next_id = 1
        self.fail_with: Optional[Exception] = None
        self.insert_returns_nothing = False
        self.delay = 0.0
        self.statements: List[tuple] = []
        self._lock = threading.Lock()

    def run(self, sql: str, params: Optional[dict]) -> List[Dict[str, Any]]:
        if self.delay:
            time.sleep(self.delay)
        with self._lock:
            self.statements.append((sql, params))
            if self.fail_with is not None:
                raise self.fail_with
            if sql == INSERT_SQL:
                row = {"id": self.next_id, **params}
                self.next_id += 1
                self.rows.append(row)
                return [] if self.insert_returns_nothing else [dict(row)]
            if sql == SELECT_ALL_SQL:
                return [dict(r) for r in sorted(self.rows, key=lambda r: r["id"])]
            if sql == SELECT_BY_ID_SQL:
                return [dict(r) for r in self.rows if r["id"] == params["id"]][:1]
            raise AssertionError(f"unexpected statement: {sql}")


class FakeCursor:
    def __init__(self, store: FakeStore) -> None:
        self._store = store
        self._rows: List[Dict[str, Any]] = []

    def __enter__(self) -> "FakeCursor":
        return self

    def __exit__(self, *exc: object) -> None:
        return None

    def execute(self, sql: str, params: Optional[dict] = None) -> None:
        self._rows = self._store.run(sql, params)

    def fetchall(self) -> List[Dict[str, Any]]:
        return self._rows


class FakeConnection:
    def __init__(self, store: FakeStore) -> None:
        self._store = store
        self.autocommit = False
        self.closed = 0

    def cursor(self, cursor_factory: Any = None) -> FakeCursor:
        return FakeCursor(self._store)


class FakeRawPool:
    """Mimics psycopg2's bounded pool: fails fast once every slot is taken."""

    def __init__(self, store: FakeStore, maxconn: int = 2) -> None:
        self._store = store
        self.maxconn = maxconn
        self.in_use: List[FakeConnection] = []
        self.released: List[tuple] = []
        self.closed = False
        self.connect_error: Optional[Exception] = None
        self._lock = threading.Lock()

    def getconn(self) -> FakeConnection:
        with self._lock:
            if self.connect_error is not None:
                raise self.connect_error
            if len(self.in_use) >= self.maxconn:
                raise pool.PoolError("connection pool exhausted")
            conn = FakeConnection(self._store)
            self.in_use.append(conn)
            return conn

    def putconn(self, conn: FakeConnection, close: bool = False) -> None:
        with self._lock:
            self.in_use.remove(conn)
            self.released.append((conn, close))

    def closeall(self) -> None:
        self.closed = True


@pytest.fixture()
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture()
def raw_pool(store: FakeStore) -> FakeRawPool:
    return FakeRawPool(store)


@pytest.fixture()
def db_pool(raw_pool: FakeRawPool) -> ConnectionPool:
    return ConnectionPool(raw_pool, timeout=5.0)


@pytest.fixture()
def client(db_pool: ConnectionPool):
    with TestClient(create_app(db_pool)) as test_client:
        yield test_client
