"""Domain Types — identity types and id parsing shared across layers.

Invariants:
    - UserId wraps UUIDs — never use bare UUID in domain logic
    - parse_user_id is the only place raw path ids become UserId

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType
from uuid import UUID

from app.core.errors import MalformedIdError


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)


def parse_user_id(raw: str) -> UserId:
    """Raw path segment -> UserId. Raises MalformedIdError for non-UUID input."""
    try:
        return UserId(UUID(str(raw)))
    except ValueError:
        raise MalformedIdError(str(raw))
