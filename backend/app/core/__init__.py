"""Core Layer — pure normalization and formatting logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic (the clock is read only by today())

Design Decisions:
    - Functional core separated from imperative shell: validation is testable
      without a database
"""
