"""Core Layer — pure scheduling logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic ("now" is always a parameter)

Design Decisions:
    - Functional core separated from imperative shell: services do the IO,
      core decides what to write and how to present what was read
"""
