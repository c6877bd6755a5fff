"""Service test fixtures — fake document store, SQLite-backed store, FastAPI test client.

Invariants:
    - Every test gets a fresh SQLite database file under tmp_path
    - get_document_store dependency overridden to use the test store
    - db_manager patched so the readiness probe sees the test database
    - FakeDocumentStore records every call and can fail on demand

Design Decisions:
    - SQLite file over :memory:: schedule reads run concurrently on separate
      connections, and each :memory: connection would see its own empty DB
    - DatabaseSessionManager built via __new__: skips pool arguments SQLite
      does not need
"""

import asyncio
from typing import Any

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from chessmentor.api.dependencies import get_document_store
from chessmentor.core.errors import StorageError
from chessmentor.db.base import Base
from chessmentor.infrastructure.database import DatabaseSessionManager
from chessmentor.infrastructure.document_store import SqlDocumentStore
import chessmentor.infrastructure.database as db_module
import chessmentor.models  # noqa: F401
from chessmentor.main import app


class FakeDocumentStore:
    """In-memory DocumentStore that records calls.

    - calls: list of (op, collection, detail) in call order
    - events: "start:<field>" / "end:<field>" markers for query interleaving
    - fail_puts / fail_query_fields: inject StorageError
    """

    def __init__(self):
        self.collections: dict[str, dict[str, dict]] = {}
        self.calls: list[tuple[str, str, Any]] = []
        self.events: list[str] = []
        self.fail_puts = False
        self.fail_query_fields: set[str] = set()
        self._next_id = 0

    def seed(self, collection: str, *records: dict) -> None:
        for record in records:
            self.collections.setdefault(collection, {})[record["id"]] = dict(record)

    def count(self, op: str) -> int:
        return sum(1 for call in self.calls if call[0] == op)

    async def get(self, collection: str, doc_id: str) -> dict | None:
        self.calls.append(("get", collection, doc_id))
        doc = self.collections.get(collection, {}).get(doc_id)
        return dict(doc) if doc else None

    async def put(self, collection: str, record: dict) -> str:
        self.calls.append(("put", collection, record))
        if self.fail_puts:
            raise StorageError("write refused", "commit")
        self._next_id += 1
        doc_id = record.get("id") or f"doc-{self._next_id}"
        self.seed(collection, {**record, "id": doc_id})
        return doc_id

    async def query(self, collection: str, field: str, value: Any) -> list[dict]:
        self.calls.append(("query", collection, (field, value)))
        self.events.append(f"start:{field}")
        await asyncio.sleep(0)
        self.events.append(f"end:{field}")
        if field in self.fail_query_fields:
            raise StorageError(f"query on {field} timed out", "query")
        return [
            dict(doc) for doc in self.collections.get(collection, {}).values()
            if doc.get(field) == value
        ]


@pytest.fixture
def fake_store():
    return FakeDocumentStore()


@pytest.fixture
async def test_engine(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'chessmentor.db'}", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_manager(test_engine):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )
    return manager


@pytest.fixture
async def sql_store(test_manager):
    return SqlDocumentStore(test_manager)


@pytest.fixture
async def client(sql_store, test_manager):
    """FastAPI test client with the document store overridden."""
    app.dependency_overrides[get_document_store] = lambda: sql_store

    original_manager = db_module.db_manager
    db_module.db_manager = test_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_users(sql_store):
    """One coach, two learners, stored in the users collection."""
    await sql_store.put("users", {
        "id": "C1", "name": "Magnus", "role": "COACH",
        "avatarUrl": "https://img.test/c1.png", "email": "c1@test",
    })
    await sql_store.put("users", {
        "id": "S1", "name": "Beth", "role": "LEARNER",
        "avatarUrl": "https://img.test/s1.png",
    })
    await sql_store.put("users", {
        "id": "S2", "name": "Josh", "role": "LEARNER",
        "avatarUrl": "https://img.test/s2.png",
    })
