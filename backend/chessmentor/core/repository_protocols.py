"""Boundary Protocols — contract between the scheduling core and the document store.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO goes through DocumentStore; records cross the boundary as plain dicts
    - put() assigns the identifier when the record carries none and returns it

Design Decisions:
    - Protocol over ABC: structural subtyping, the SQL store and test fakes
      satisfy it without inheriting
    - Equality-only query: no OR across fields, no ranges. Dual-role lookups are
      two queries plus a client-side merge (see core/schedule.py)
    - Async in Protocol: implementations do IO, but the core functions that
      consume the records are never async themselves
"""

from typing import Any, Protocol


class DocumentStore(Protocol):
    """Contract for keyed and equality-filtered document persistence."""
    async def get(self, collection: str, doc_id: str) -> dict | None: ...
    async def put(self, collection: str, record: dict) -> str: ...
    async def query(
        self, collection: str, field: str, value: Any,
    ) -> list[dict]: ...
