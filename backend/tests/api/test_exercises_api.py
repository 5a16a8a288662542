"""Exercise Endpoints — POST /api/users/{id}/exercises and GET /api/users/{id}/logs.

Tests cover:
    - creation payload (user's id, canonical date) and date defaulting
    - 400 for unknown user and invalid fields, 500 for malformed ids
    - from/to/limit filtering, ordering and count
"""

from uuid import uuid4

import pytest

from app.core.normalize import format_date, today


async def _add(client, user_id, description, duration, date=None):
    body = {"description": description, "duration": duration}
    if date is not None:
        body["date"] = date
    return await client.post(f"/api/users/{user_id}/exercises", json=body)


# ─── POST exercises ──────────────────────────────────────────────

async def test_add_exercise_reference_example(client, user):
    res = await _add(client, user["id"], "test run", 30, "2023-01-15")
    assert res.status_code == 200
    assert res.json() == {
        "id": user["id"],
        "username": "fcc_test",
        "description": "test run",
        "duration": 30,
        "date": "Sun Jan 15 2023",
    }


async def test_add_exercise_form_body(client, user):
    res = await client.post(
        f"/api/users/{user['id']}/exercises",
        data={"description": "swim", "duration": "45", "date": "2023-02-01"},
    )
    assert res.status_code == 200
    assert res.json()["duration"] == 45
    assert res.json()["date"] == "Wed Feb 01 2023"


async def test_add_exercise_without_date_uses_today(client, user):
    res = await _add(client, user["id"], "walk", 10)
    assert res.json()["date"] == format_date(today())


async def test_add_exercise_invalid_date_uses_today(client, user):
    res = await _add(client, user["id"], "walk", 10, "not a date")
    assert res.json()["date"] == format_date(today())


@pytest.mark.parametrize("description, duration", [
    ("", 30), ("   ", 30), ("run", "abc"), ("run", ""),
])
async def test_add_exercise_invalid_fields_is_400(client, user, description, duration):
    res = await _add(client, user["id"], description, duration)
    assert res.status_code == 400
    assert "error" in res.json()


async def test_add_exercise_unknown_user_is_400(client):
    res = await _add(client, uuid4(), "run", 30)
    assert res.status_code == 400
    assert res.json() == {"error": "unknown userId"}


async def test_add_exercise_unknown_user_beats_bad_fields(client):
    res = await _add(client, uuid4(), "", "abc")
    assert res.json() == {"error": "unknown userId"}


async def test_add_exercise_malformed_id_is_500(client):
    res = await _add(client, "not-a-valid-id", "run", 30)
    assert res.status_code == 500
    assert res.json() == {"error": "server error"}


# ─── GET logs ────────────────────────────────────────────────────

@pytest.fixture
async def logged(client, user):
    """Exercises on 2023-01-10 < 2023-01-20 < 2023-01-30, posted out of order."""
    await _add(client, user["id"], "second", 20, "2023-01-20")
    await _add(client, user["id"], "third", 30, "2023-01-30")
    await _add(client, user["id"], "first", 10, "2023-01-10")
    return user


async def test_logs_all_entries_ascending(client, logged):
    res = await client.get(f"/api/users/{logged['id']}/logs")
    assert res.status_code == 200
    body = res.json()
    assert body["username"] == "fcc_test"
    assert body["id"] == logged["id"]
    assert body["count"] == 3
    assert [e["description"] for e in body["log"]] == ["first", "second", "third"]
    assert body["log"][0] == {
        "description": "first", "duration": 10, "date": "Tue Jan 10 2023",
    }


async def test_logs_from_filters_earlier_entries(client, logged):
    res = await client.get(
        f"/api/users/{logged['id']}/logs", params={"from": "2023-01-20"},
    )
    assert [e["description"] for e in res.json()["log"]] == ["second", "third"]


async def test_logs_from_and_to(client, logged):
    res = await client.get(
        f"/api/users/{logged['id']}/logs",
        params={"from": "2023-01-15", "to": "2023-01-25"},
    )
    body = res.json()
    assert body["count"] == 1
    assert body["log"][0]["description"] == "second"


async def test_logs_invalid_from_still_applies_to(client, logged):
    res = await client.get(
        f"/api/users/{logged['id']}/logs",
        params={"from": "bogus", "to": "2023-01-20"},
    )
    assert [e["description"] for e in res.json()["log"]] == ["first", "second"]


async def test_logs_both_bounds_invalid_returns_everything(client, logged):
    res = await client.get(
        f"/api/users/{logged['id']}/logs", params={"from": "x", "to": "y"},
    )
    assert res.json()["count"] == 3


async def test_logs_limit_one_returns_earliest(client, logged):
    res = await client.get(
        f"/api/users/{logged['id']}/logs", params={"limit": "1"},
    )
    body = res.json()
    assert body["count"] == 1
    assert body["log"][0]["description"] == "first"


@pytest.mark.parametrize("limit", ["0", "-1", "lots"])
async def test_logs_ignores_invalid_limit(client, logged, limit):
    res = await client.get(
        f"/api/users/{logged['id']}/logs", params={"limit": limit},
    )
    assert res.json()["count"] == 3


async def test_logs_unknown_user_is_400(client):
    res = await client.get(f"/api/users/{uuid4()}/logs")
    assert res.status_code == 400
    assert res.json() == {"error": "unknown userId"}


async def test_logs_empty_for_new_user(client, user):
    res = await client.get(f"/api/users/{user['id']}/logs")
    assert res.json() == {
        "username": "fcc_test", "count": 0, "id": user["id"], "log": [],
    }


async def test_add_exercise_accepts_epoch_milliseconds(client, user):
    res = await _add(client, user["id"], "run", 30, 1673740800000)
    assert res.json()["date"] == "Sun Jan 15 2023"


async def test_logs_accept_http_date_bounds(client, logged):
    res = await client.get(
        f"/api/users/{logged['id']}/logs",
        params={"from": "Fri, 20 Jan 2023 00:00:00 GMT"},
    )
    assert [e["description"] for e in res.json()["log"]] == ["second", "third"]
