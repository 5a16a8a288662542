"""Exercise Service — log exercises and read back a user's history.

Invariants:
    - The user is resolved first: an unknown user wins over any field error
    - description/duration validated before insert, date defaults to today
    - fetch_log count equals the number of entries returned (after limit)
"""

import logging
from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import UserId
from app.core.format_records import format_created_exercise, format_log
from app.core.log_query import build_log_query
from app.core.normalize import (
    parse_date_or_default, parse_duration, require_text, today as current_date,
)
from app.models.exercise import Exercise
from app.services.exercise_log import build_log_statement
from app.services.users import get_user_or_raise

logger = logging.getLogger(__name__)


async def add_exercise(
    db: AsyncSession,
    raw_user_id: str,
    description,
    duration,
    raw_date=None,
    today: date | None = None,
) -> dict:
    """Log an exercise for a user; response carries the user's id."""
    user = await get_user_or_raise(db, raw_user_id)

    exercise = Exercise(
        user_id=user.id,
        description=require_text(description, "description"),
        duration=parse_duration(duration),
        date=parse_date_or_default(raw_date, today or current_date()),
    )
    db.add(exercise)
    await db.commit()
    await db.refresh(exercise)
    logger.info(
        "Exercise logged",
        extra={"user_id": user.id, "exercise_id": exercise.id},
    )
    return format_created_exercise(user, exercise)


async def fetch_log(
    db: AsyncSession, raw_user_id: str, from_=None, to=None, limit=None,
) -> dict:
    """Exercise history for a user, filtered by optional from/to/limit."""
    user = await get_user_or_raise(db, raw_user_id)
    query = build_log_query(UserId(user.id), from_, to, limit)
    result = await db.execute(build_log_statement(query))
    return format_log(user, list(result.scalars().all()))
