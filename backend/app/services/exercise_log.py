"""Exercise Log Statement — translates a LogQuery into a SQLAlchemy select().

Invariants:
    - Always filtered by user_id, always ordered by date ascending
    - Date bounds and limit appear only when the LogQuery carries them
"""

from sqlalchemy import Select, select

from app.core.log_query import LogQuery
from app.models.exercise import Exercise


def build_log_statement(query: LogQuery) -> Select:
    stmt = select(Exercise).where(Exercise.user_id == query.user_id)
    if query.has_date_filter:
        bounds = []
        if query.date_from is not None:
            bounds.append(Exercise.date >= query.date_from)
        if query.date_to is not None:
            bounds.append(Exercise.date <= query.date_to)
        stmt = stmt.where(*bounds)
    # created_at breaks ties between same-day entries
    stmt = stmt.order_by(Exercise.date.asc(), Exercise.created_at.asc())
    if query.limit is not None:
        stmt = stmt.limit(query.limit)
    return stmt
