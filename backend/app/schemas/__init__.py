"""Pydantic Schemas — response contracts for API endpoints.

Invariants:
    - Schemas describe the wire shape; validation of raw input lives in core/normalize.py
    - Every date field is the canonical display string, never a date object

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
