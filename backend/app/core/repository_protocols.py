"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Core serializers accept anything shaped like a stored record

Design Decisions:
    - Protocol over ABC: structural subtyping, ORM rows and plain test doubles both fit
"""

from datetime import date
from typing import Protocol
from uuid import UUID


class UserLike(Protocol):
    """Read surface of a stored user."""
    id: UUID
    username: str


class ExerciseLike(Protocol):
    """Read surface of a stored exercise."""
    description: str
    duration: int
    date: date
