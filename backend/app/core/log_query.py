"""Log Query — pure construction of the exercise-log filter from raw query params.

Invariants:
    - user_id filter is always present
    - Each date bound is applied only if it parses; an invalid bound never drops the other
    - No valid bound -> no date filter at all
    - limit is a positive int or None (no cap); results are always date-ascending

Design Decisions:
    - Frozen dataclass over an ORM filter dict: core stays free of SQLAlchemy, the
      service layer translates LogQuery into a select()
"""

from dataclasses import dataclass
from datetime import date
from typing import Any

from app.core.domain_types import UserId
from app.core.normalize import parse_date, parse_limit


@dataclass(frozen=True)
class LogQuery:
    """Canonical filter for GET /api/users/{id}/logs."""
    user_id: UserId
    date_from: date | None = None
    date_to: date | None = None
    limit: int | None = None

    @property
    def has_date_filter(self) -> bool:
        """False when neither bound parsed: the log is not filtered by date."""
        return self.date_from is not None or self.date_to is not None


def build_log_query(
    user_id: UserId, from_: Any = None, to: Any = None, limit: Any = None,
) -> LogQuery:
    """Build a LogQuery, silently ignoring invalid bounds and limits."""
    return LogQuery(
        user_id=user_id,
        date_from=parse_date(from_),
        date_to=parse_date(to),
        limit=parse_limit(limit),
    )
