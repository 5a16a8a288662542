"""Exercise Routes — log an exercise and read a user's exercise log.

Invariants:
    - Unknown user -> 400 {"error": "unknown userId"} on both endpoints
    - from/to/limit are read as raw strings; invalid values are ignored, not rejected
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.routes.request_body import read_body
from app.infrastructure.database import get_db
from app.schemas.exercise import ExerciseCreate, ExerciseResponse, LogResponse
from app.services import exercises as exercise_service

router = APIRouter(prefix="/api/users", tags=["exercises"])


@router.post("/{user_id}/exercises", response_model=ExerciseResponse)
async def add_exercise(
    user_id: str,
    body: dict = Depends(read_body),
    db: AsyncSession = Depends(get_db),
):
    """Log {description, duration, date?} for a user."""
    payload = ExerciseCreate.model_validate(body)
    return await exercise_service.add_exercise(
        db, user_id, payload.description, payload.duration, payload.date,
    )


@router.get("/{user_id}/logs", response_model=LogResponse)
async def get_logs(
    user_id: str,
    from_: str | None = Query(None, alias="from"),
    to: str | None = Query(None),
    limit: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """Exercise history, optionally bounded by from/to and capped by limit."""
    return await exercise_service.fetch_log(db, user_id, from_, to, limit)
