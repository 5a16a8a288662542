"""ORM Models — SQLAlchemy declarative models for users and exercises.

Invariants:
    - All models inherit from Base (db/base.py)
    - Exercise references User by foreign key (never embedded)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata knows every table before create_all
"""

from app.models.user import User  # noqa: F401
from app.models.exercise import Exercise  # noqa: F401
