"""User Routes — create and list users.

Invariants:
    - POST returns {username, id}; GET returns [{username, id}, ...]
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.routes.request_body import read_body
from app.infrastructure.database import get_db
from app.schemas.user import UserCreate, UserResponse
from app.services import users as user_service

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserResponse)
async def create_user(
    body: dict = Depends(read_body), db: AsyncSession = Depends(get_db),
):
    """Create a user from {username}."""
    payload = UserCreate.model_validate(body)
    return await user_service.create_user(db, payload.username)


@router.get("", response_model=list[UserResponse])
async def list_users(db: AsyncSession = Depends(get_db)):
    """List every user."""
    return await user_service.list_users(db)
