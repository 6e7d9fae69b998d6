"""Tests for admin endpoints."""

from fastapi.testclient import TestClient

from event_photo_picker.api.app import create_app

EVENT = {"eventId": "evt-1", "startTime": 1000, "endTime": 5000}


def test_admin_sessions_requires_token(container) -> None:
    client = TestClient(create_app(container))

    assert client.get("/admin/sessions").status_code == 401
    assert (
        client.get("/admin/sessions", headers={"X-Admin-Token": "wrong"}).status_code
        == 401
    )


def test_admin_sessions_lists_live_sessions(container) -> None:
    client = TestClient(create_app(container))
    session_id = client.post("/picker/sessions", json=EVENT).json()["sessionId"]

    response = client.get("/admin/sessions", headers={"X-Admin-Token": "admin-token"})

    assert response.status_code == 200
    [session] = response.json()["sessions"]
    assert session["sessionId"] == session_id
    assert session["eventId"] == "evt-1"
    assert session["totalCount"] == 2
    assert session["selectedCount"] == 0
