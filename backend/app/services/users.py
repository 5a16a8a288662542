"""User Service — create, list and look up users.

Invariants:
    - username is trimmed and non-empty before insert
    - get_user_or_raise is the single existence check used by exercise endpoints
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import parse_user_id
from app.core.errors import UnknownUserError
from app.core.format_records import format_user
from app.core.normalize import require_text
from app.models.user import User

logger = logging.getLogger(__name__)


async def create_user(db: AsyncSession, username) -> dict:
    """Insert a user; returns {username, id}."""
    name = require_text(username, "username")
    user = User(username=name)
    db.add(user)
    await db.commit()
    await db.refresh(user)
    logger.info("User created", extra={"user_id": user.id})
    return format_user(user)


async def list_users(db: AsyncSession) -> list[dict]:
    """Every user, in natural store order."""
    result = await db.execute(select(User))
    return [format_user(u) for u in result.scalars().all()]


async def get_user_or_raise(db: AsyncSession, raw_id: str) -> User:
    """Fetch user by raw path id or raise UnknownUserError."""
    user_id = parse_user_id(raw_id)
    user = await db.get(User, user_id)
    if user is None:
        raise UnknownUserError(str(raw_id))
    return user
