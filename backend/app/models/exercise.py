"""Exercise ORM — one logged activity of a user.

Invariants:
    - Always belongs to a User (user_id FK, indexed for log lookups)
    - duration is whole units
    - date is a calendar date (no time of day)

Design Decisions:
    - Date column over DateTime: range filters and output both work at day
      granularity, so bounds compare inclusively without time-of-day drift
"""

import uuid
from datetime import date as calendar_date, datetime, timezone

from sqlalchemy import Date, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base


class Exercise(Base):
    """Exercise entity — immutable after creation."""
    __tablename__ = "exercises"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True,
    )
    description: Mapped[str] = mapped_column(String(1000), nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)
    date: Mapped[calendar_date] = mapped_column(Date, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
