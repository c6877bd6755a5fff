"""Services Layer — the IO shell around the pure scheduling core.

Invariants:
    - Services depend on the DocumentStore protocol, never on SQLAlchemy
    - Services hold no state between calls

Design Decisions:
    - One service per responsibility: booking (write), schedule (read),
      participant directory (user lookups)
"""
