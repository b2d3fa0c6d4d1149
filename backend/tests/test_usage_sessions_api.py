"""Tests for the usage session endpoints."""

import uuid

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from gujlearn.core.config import settings
from gujlearn.models.progress import AppUsageSession

PREFIX = f"{settings.API_PREFIX}/usage-sessions"


def start(client: TestClient, headers: dict[str, str], page_name: str = "dashboard") -> dict:
    response = client.post(PREFIX, json={"page_name": page_name}, headers=headers)
    assert response.status_code == 201
    return response.json()


def test_start_session(client: TestClient, db: Session, auth_headers, owner_id):
    body = start(client, auth_headers)

    assert body["page_visits"] == {"dashboard": 1}
    assert body["activities_completed"] == 0
    assert body["session_end"] is None
    row = db.query(AppUsageSession).one()
    assert str(row.id) == body["id"]
    assert row.user_id == owner_id


def test_start_defaults_to_unknown_page(client: TestClient, auth_headers):
    response = client.post(PREFIX, json={}, headers=auth_headers)

    assert response.status_code == 201
    assert response.json()["page_visits"] == {"unknown": 1}


def test_updates_accumulate_across_requests(client: TestClient, auth_headers):
    session_id = start(client, auth_headers)["id"]

    client.patch(
        f"{PREFIX}/{session_id}",
        json={"page_visits": ["flashcards"], "activities_completed": 1},
        headers=auth_headers,
    )
    response = client.patch(
        f"{PREFIX}/{session_id}",
        json={"page_visits": ["flashcards", "quiz"], "activities_completed": 2},
        headers=auth_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["page_visits"] == {"dashboard": 1, "flashcards": 2, "quiz": 1}
    assert body["activities_completed"] == 3
    assert body["updated_at"] is not None


def test_end_session(client: TestClient, auth_headers):
    session_id = start(client, auth_headers)["id"]

    response = client.post(f"{PREFIX}/{session_id}/end", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["session_end"] is not None


def test_ended_session_cannot_be_updated(client: TestClient, auth_headers):
    session_id = start(client, auth_headers)["id"]
    client.post(f"{PREFIX}/{session_id}/end", headers=auth_headers)

    response = client.patch(f"{PREFIX}/{session_id}", json={"activities_completed": 1}, headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["error_code"] == "USAGE_SESSION_NOT_FOUND"


def test_other_users_session_is_not_found(client: TestClient, auth_headers):
    session_id = start(client, auth_headers)["id"]

    response = client.post(
        f"{PREFIX}/{session_id}/end", headers={"X-User-Id": str(uuid.uuid4())}
    )

    assert response.status_code == 404


def test_negative_activity_count_is_rejected(client: TestClient, auth_headers):
    session_id = start(client, auth_headers)["id"]

    response = client.patch(
        f"{PREFIX}/{session_id}", json={"activities_completed": -1}, headers=auth_headers
    )

    assert response.status_code == 422
