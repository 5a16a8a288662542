"""User ORM — a person exercises are logged against.

Invariants:
    - id is UUID primary key (client-side default)
    - username is stored trimmed and non-empty (enforced by core/normalize.py)
    - No uniqueness constraint on username
    - Exercises reference users by user_id only (no ORM relationship)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from app.db.base import Base


class User(Base):
    """User entity — owns its exercises."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    username: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
