"""Schedule Routes — listing and classification through FastAPI.

Invariants:
    - /participants/{id}/sessions lists every session naming the participant once
    - /participants/{id}/schedule splits around as_of and orders both halves
    - counterpart reflects the participant's side of each session
    - a store failure reaches the client as 503 STORAGE_ERROR
"""

import pytest

from chessmentor.api.dependencies import get_document_store
from chessmentor.main import app


def _doc(sid, start, student, coach):
    return {
        "id": sid, "studentId": student, "coachId": coach,
        "studentName": f"name-{student}", "coachName": f"name-{coach}",
        "studentAvatar": f"{student}.png", "coachAvatar": f"{coach}.png",
        "startTime": start, "duration": 60, "status": "upcoming",
    }


@pytest.fixture
async def seed_sessions(sql_store):
    for doc in (
        _doc("A", "2024-06-01T10:00:00.000Z", "S1", "C1"),
        _doc("B", "2024-05-01T10:00:00.000Z", "S1", "C2"),
        _doc("C", "2024-05-20T09:00:00.000Z", "C9", "S1"),
        _doc("D", "2024-04-01T09:00:00.000Z", "S1", "C1"),
        _doc("E", "2024-06-02T09:00:00.000Z", "S2", "C1"),
    ):
        await sql_store.put("sessions", doc)


async def test_list_sessions_covers_both_roles(client, seed_sessions):
    res = await client.get("/api/v1/participants/S1/sessions")
    assert res.status_code == 200
    assert sorted(s["id"] for s in res.json()) == ["A", "B", "C", "D"]


async def test_list_sessions_for_stranger_is_empty(client, seed_sessions):
    res = await client.get("/api/v1/participants/nobody/sessions")
    assert res.json() == []


async def test_schedule_classifies_and_orders(client, seed_sessions):
    res = await client.get(
        "/api/v1/participants/S1/schedule",
        params={"as_of": "2024-05-15T00:00:00Z"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["as_of"] == "2024-05-15T00:00:00.000Z"
    assert [e["session"]["id"] for e in body["upcoming"]] == ["C", "A"]
    assert [e["session"]["id"] for e in body["past"]] == ["B", "D"]


async def test_schedule_boundary_is_upcoming(client, seed_sessions):
    res = await client.get(
        "/api/v1/participants/S1/schedule",
        params={"as_of": "2024-06-01T10:00:00Z"},
    )
    assert [e["session"]["id"] for e in res.json()["upcoming"]] == ["A"]


async def test_schedule_counterpart_follows_viewer_side(client, seed_sessions):
    res = await client.get(
        "/api/v1/participants/S1/schedule",
        params={"as_of": "2024-05-15T00:00:00Z"},
    )
    upcoming = {e["session"]["id"]: e for e in res.json()["upcoming"]}

    as_student = upcoming["A"]
    assert as_student["viewer_role"] == "student"
    assert as_student["counterpart"] == {
        "name": "name-C1", "avatar": "C1.png", "label": "Coach",
    }

    as_coach = upcoming["C"]
    assert as_coach["viewer_role"] == "coach"
    assert as_coach["counterpart"]["label"] == "Student"
    assert as_coach["counterpart"]["name"] == "name-C9"


async def test_schedule_defaults_as_of_to_now(client, seed_sessions):
    res = await client.get("/api/v1/participants/S1/schedule")
    body = res.json()
    assert body["upcoming"] == []
    assert len(body["past"]) == 4


async def test_store_failure_is_503_try_again(client, fake_store):
    fake_store.fail_query_fields = {"coachId"}
    app.dependency_overrides[get_document_store] = lambda: fake_store

    res = await client.get("/api/v1/participants/S1/sessions")
    assert res.status_code == 503
    assert res.headers["retry-after"] == "5"
    error = res.json()["error"]
    assert error["code"] == "STORAGE_ERROR"
    assert error["category"] == "storage"
    assert error["message"] == "Storage is unavailable. Please try again later."
