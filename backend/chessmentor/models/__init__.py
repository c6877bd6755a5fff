"""ORM Models — SQLAlchemy declarative models for persisted records.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every record lives in the generic documents table

Design Decisions:
    - Models imported here so Base.metadata is complete before create_all
      or alembic autogenerate runs
"""

from chessmentor.models.document import Document  # noqa: F401
