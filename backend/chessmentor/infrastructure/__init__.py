"""Infrastructure Layer — database access, the document store, and logging setup.

Invariants:
    - Infrastructure never imports core/ domain logic (errors and protocols only)
    - Every storage failure is mapped to StorageError before leaving this layer

Design Decisions:
    - Thin adapters over SQLAlchemy: retries are deliberately absent (bookings
      are user-initiated and re-submitted by hand)
"""
