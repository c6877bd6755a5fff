"""Document ORM — one row per stored record, keyed by (collection, id).

Invariants:
    - id is assigned by the store (random hex) unless the caller provides one
    - body holds the full record, id included, as a flat JSON object
    - equality queries filter on body[field] compared as text

Design Decisions:
    - Generic JSON document table over one table per entity: sessions and
      users are flat self-contained documents with no joins at read time
    - Composite primary key: the same id may exist in different collections
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from chessmentor.db.base import Base


class Document(Base):
    """A stored record in a named collection."""
    __tablename__ = "documents"

    collection: Mapped[str] = mapped_column(String(64), primary_key=True)
    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    body: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
