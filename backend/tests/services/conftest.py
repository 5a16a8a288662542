"""Service test fixtures — seeded users and exercises in the test DB."""

from datetime import date

import pytest

from app.models.exercise import Exercise
from app.models.user import User


@pytest.fixture
async def seed_user(test_db):
    """Insert a user directly into the test DB."""
    user = User(username="fcc_test")
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user


@pytest.fixture
async def seed_exercises(test_db, seed_user):
    """Three exercises for seed_user, inserted out of date order."""
    rows = [
        Exercise(user_id=seed_user.id, description="swim", duration=45, date=date(2023, 3, 1)),
        Exercise(user_id=seed_user.id, description="run", duration=30, date=date(2023, 1, 15)),
        Exercise(user_id=seed_user.id, description="bike", duration=60, date=date(2023, 2, 10)),
    ]
    test_db.add_all(rows)
    await test_db.commit()
    return rows
