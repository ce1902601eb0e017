"""
HTTP API tests
"""
import logging
from unittest.mock import MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from doordont.core.dependencies import get_goal_service, get_user_service
from doordont.core.exceptions import StorageError
from main import app


@pytest.fixture
def client(goal_service, user_service):
    app.dependency_overrides[get_goal_service] = lambda: goal_service
    app.dependency_overrides[get_user_service] = lambda: user_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def goal_payload():
    return {
        "description": "go to the gym",
        "punishment": "email",
        "initiate": True,
        "frequency": 4,
        "username": "jon@example.com"
    }


def _sign_up(client):
    return client.post("/users/signup", json={"username": "jon@example.com", "password": "pw"})


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_sign_up_and_login(client):
    assert _sign_up(client).status_code == 201
    assert _sign_up(client).status_code == 409

    ok = client.post("/users/login", json={"username": "jon@example.com", "password": "pw"})
    bad = client.post("/users/login", json={"username": "jon@example.com", "password": "nope"})

    assert ok.status_code == 200
    assert ok.json() == {"authenticated": True}
    assert bad.status_code == 401


def test_twitter_handle(client):
    _sign_up(client)

    assert client.put("/users/jon@example.com/twitter", json={"twitter": "jondoe"}).status_code == 200
    response = client.get("/users/jon@example.com/twitter")

    assert response.json()["twitter"] == "jondoe"
    assert client.get("/users/nobody/twitter").status_code == 404


def test_goal_lifecycle(client, goal_payload, evaluation_scheduler):
    _sign_up(client)

    created = client.post("/goals", json=goal_payload)
    assert created.status_code == 201
    goal_id = created.json()["data"]["id"]
    assert evaluation_scheduler.is_scheduled(goal_id)

    for _ in range(3):
        assert client.post(f"/goals/{goal_id}/increment").status_code == 200

    evaluation = client.get(f"/goals/{goal_id}/evaluation").json()
    assert evaluation["counter"] == 3
    assert evaluation["met_goal"] is False

    goals = client.get("/goals", params={"username": "jon@example.com"}).json()
    assert [g["id"] for g in goals] == [goal_id]

    assert client.post(f"/goals/{goal_id}/reset").json()["data"]["counter"] == 0
    assert client.get(f"/goals/{goal_id}").json()["counter"] == 0

    assert client.delete(f"/goals/{goal_id}").status_code == 200
    assert not evaluation_scheduler.is_scheduled(goal_id)
    assert client.get(f"/goals/{goal_id}").status_code == 404


def test_create_goal_validation(client, goal_payload):
    _sign_up(client)

    assert client.post("/goals", json={**goal_payload, "frequency": 0}).status_code == 422
    assert client.post("/goals", json={**goal_payload, "username": "nobody"}).status_code == 404


def test_missing_goal_routes(client):
    assert client.post("/goals/999/increment").status_code == 404
    assert client.delete("/goals/999").status_code == 404
    assert client.get("/goals/999/evaluation").status_code == 404


def test_twitter_handle_of_only_at_sign_rejected(client):
    _sign_up(client)

    assert client.put("/users/jon@example.com/twitter", json={"twitter": "@"}).status_code == 422
    assert client.get("/users/jon@example.com/twitter").json()["twitter"] is None


def test_restore_failure_is_reported_separately_from_start(caplog):
    scheduler = MagicMock()
    scheduler.restore_jobs.side_effect = StorageError("supabase unreachable")

    with patch("main.get_evaluation_scheduler", return_value=scheduler):
        with caplog.at_level(logging.WARNING, logger="main"):
            with TestClient(app):
                pass

    scheduler.start.assert_called_once()
    scheduler.shutdown.assert_called_once()
    messages = [record.getMessage() for record in caplog.records if record.name == "main"]
    assert "Could not restore goal evaluations: supabase unreachable" in messages
    assert not any(message.startswith("Could not start scheduler") for message in messages)
