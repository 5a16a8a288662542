"""Record Formatting — pure rendering of stored records into response payloads.

Invariants:
    - Every outgoing date passes through format_date
    - Ids are rendered as strings
    - The exercise-creation payload carries the USER's id, not the exercise's
"""

from app.core.normalize import format_date
from app.core.repository_protocols import ExerciseLike, UserLike


def format_user(user: UserLike) -> dict:
    return {"username": user.username, "id": str(user.id)}


def format_log_entry(exercise: ExerciseLike) -> dict:
    return {
        "description": exercise.description,
        "duration": exercise.duration,
        "date": format_date(exercise.date),
    }


def format_created_exercise(user: UserLike, exercise: ExerciseLike) -> dict:
    """Response for a newly logged exercise."""
    return {
        "id": str(user.id),
        "username": user.username,
        **format_log_entry(exercise),
    }


def format_log(user: UserLike, exercises: list[ExerciseLike]) -> dict:
    """Response for an exercise log; count is the number of returned entries."""
    log = [format_log_entry(e) for e in exercises]
    return {
        "username": user.username,
        "count": len(log),
        "id": str(user.id),
        "log": log,
    }
