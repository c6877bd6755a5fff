"""SQL Document Store — DocumentStore protocol over the documents table.

Invariants:
    - Each call opens and closes its own DB session (safe under asyncio.gather)
    - put() is a single insert + commit; no retry, no upsert
    - put() assigns a random 20-char hex id when the record has none, and the
      stored body always includes the id
    - get() always reports the row key as "id", even for bodies written without one
    - Every SQLAlchemy failure surfaces as StorageError (via DatabaseSessionManager)

Design Decisions:
    - JSON path comparison typed by the Python value (str/int/bool): the same
      expression renders on PostgreSQL (->>) and SQLite (JSON_EXTRACT)
    - Results of query() come back in insertion order (created_at, id) so
      callers see a stable sequence
"""

import logging
import uuid
from typing import Any

from sqlalchemy import select

from chessmentor.infrastructure.database import DatabaseSessionManager
from chessmentor.models.document import Document

logger = logging.getLogger(__name__)

_ID_LENGTH = 20


def new_document_id() -> str:
    """Random identifier in the style of hosted document stores."""
    return uuid.uuid4().hex[:_ID_LENGTH]


def _field_equals(field: str, value: Any):
    path = Document.body[field]
    if isinstance(value, bool):
        return path.as_boolean() == value
    if isinstance(value, int):
        return path.as_integer() == value
    return path.as_string() == str(value)


class SqlDocumentStore:
    """DocumentStore implementation on SQLAlchemy."""

    def __init__(self, manager: DatabaseSessionManager):
        self._manager = manager

    async def get(self, collection: str, doc_id: str) -> dict | None:
        async with self._manager.session() as db:
            doc = await db.get(Document, (collection, doc_id))
            return {**doc.body, "id": doc.id} if doc else None

    async def put(self, collection: str, record: dict) -> str:
        doc_id = record.get("id") or new_document_id()
        body = {**record, "id": doc_id}
        async with self._manager.session() as db:
            db.add(Document(collection=collection, id=doc_id, body=body))
            await db.commit()
        logger.info(
            f"Stored document {doc_id}",
            extra={"collection": collection},
        )
        return doc_id

    async def query(
        self, collection: str, field: str, value: Any,
    ) -> list[dict]:
        stmt = (
            select(Document)
            .where(Document.collection == collection)
            .where(_field_equals(field, value))
            .order_by(Document.created_at, Document.id)
        )
        async with self._manager.session() as db:
            result = await db.execute(stmt)
            return [dict(d.body) for d in result.scalars().all()]
