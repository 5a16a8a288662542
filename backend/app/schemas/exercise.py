"""Exercise Schemas — request/response shapes for exercises and logs.

Invariants:
    - ExerciseCreate accepts raw values (strings from forms, numbers from JSON);
      core/normalize.py decides what is valid
    - ExerciseResponse.id is the owning user's id

Design Decisions:
    - Any-typed request fields: a non-numeric duration must surface as the
      domain's InvalidInputError, not a Pydantic validation error
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ExerciseCreate(BaseModel):
    """Raw exercise payload from JSON or form body."""
    model_config = ConfigDict(extra="ignore")

    description: Any = None
    duration: Any = None
    date: Any = None


class ExerciseResponse(BaseModel):
    id: str
    username: str
    description: str
    duration: int
    date: str


class LogEntry(BaseModel):
    description: str
    duration: int
    date: str


class LogResponse(BaseModel):
    username: str
    count: int
    id: str
    log: list[LogEntry]
