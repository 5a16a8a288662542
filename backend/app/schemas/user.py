"""User Schemas — request/response shapes for /api/users."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class UserCreate(BaseModel):
    """Raw creation payload. username is checked by require_text, not here."""
    model_config = ConfigDict(extra="ignore")

    username: Any = None


class UserResponse(BaseModel):
    username: str
    id: str
