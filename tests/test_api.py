"""Tests for the HTTP API."""

from datetime import date
from uuid import uuid4

from fastapi.testclient import TestClient

from health_tracker.api.app import create_app
from health_tracker.services import analyzer
from health_tracker.services.recommendations import GENERAL_CARDS, LOW_WATER_CARD
from tests.conftest import USER_ID

METRICS = {"height": 170, "weight": 70, "age": 30, "goal": "maintain"}


def _save_program(client: TestClient, headers: dict[str, str]) -> dict[str, object]:
    preview = client.post("/programs/generate", json=METRICS, headers=headers).json()
    preview.pop("metrics")
    response = client.post("/programs", json=preview, headers=headers)
    assert response.status_code == 201
    return response.json()


def _day_payload(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "date": "2024-05-01",
        "sleep_hours": 8,
        "water_intake": 2.5,
        "actual_calories": 2258,
        "actual_protein": 112,
        "actual_carbs": 254,
        "actual_fat": 75,
    }
    payload.update(overrides)
    return payload


def test_health_endpoint(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_requires_api_token(container) -> None:
    client = TestClient(create_app(container))

    missing = client.post("/programs/generate", json=METRICS)
    wrong = client.post(
        "/programs/generate",
        json=METRICS,
        headers={"X-Api-Token": "nope", "X-User-Id": str(USER_ID)},
    )

    assert missing.status_code == 401
    assert wrong.status_code == 401


def test_requires_user_id(container) -> None:
    client = TestClient(create_app(container))

    missing = client.get("/programs", headers={"X-Api-Token": "api-token"})
    malformed = client.get(
        "/programs", headers={"X-Api-Token": "api-token", "X-User-Id": "someone"}
    )

    assert missing.status_code == 401
    assert malformed.status_code == 422


def test_generate_program_preview(container, auth_headers) -> None:
    client = TestClient(create_app(container))

    response = client.post("/programs/generate", json=METRICS, headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["id"] is None
    assert data["goal"] == "maintain"
    assert data["nutrition"]["calories"] == 2258
    assert data["nutrition"]["protein"] == 112
    assert data["metrics"]["bmr"] == 1612.5
    assert len(data["exercises"]) == 4
    assert data["exercises"][0]["name"] == "Full Body Circuit"
    assert container.program_service.list_programs(USER_ID) == []


def test_generate_rejects_invalid_metrics(container, auth_headers) -> None:
    client = TestClient(create_app(container))

    negative = client.post(
        "/programs/generate", json={**METRICS, "height": -170}, headers=auth_headers
    )
    unknown_goal = client.post(
        "/programs/generate", json={**METRICS, "goal": "bulk"}, headers=auth_headers
    )

    assert negative.status_code == 422
    assert negative.json()["kind"] == "invalid_input"
    assert unknown_goal.status_code == 422
    assert unknown_goal.json()["kind"] == "invalid_input"


def test_generate_rejects_overflowing_metrics(container, auth_headers) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/programs/generate", json={**METRICS, "height": 1e308}, headers=auth_headers
    )

    assert response.status_code == 422
    assert response.json()["kind"] == "invalid_input"


def test_save_list_and_delete_programs(container, auth_headers) -> None:
    client = TestClient(create_app(container))

    saved = _save_program(client, auth_headers)
    listed = client.get("/programs", headers=auth_headers).json()["programs"]

    assert saved["id"] is not None
    assert saved["user_id"] == str(USER_ID)
    assert saved["nutrition"]["calories"] == 2258
    assert [item["id"] for item in listed] == [saved["id"]]

    deleted = client.delete(f"/programs/{saved['id']}", headers=auth_headers)
    missing = client.delete(f"/programs/{saved['id']}", headers=auth_headers)

    assert deleted.status_code == 204
    assert missing.status_code == 404
    assert client.get("/programs", headers=auth_headers).json() == {"programs": []}


def test_log_day_without_program_conflicts(container, auth_headers) -> None:
    client = TestClient(create_app(container))

    response = client.post("/activities", json=_day_payload(), headers=auth_headers)

    assert response.status_code == 409
    assert response.json()["kind"] == "no_program"


def test_log_day_and_fetch(container, auth_headers) -> None:
    client = TestClient(create_app(container))
    program = _save_program(client, auth_headers)

    created = client.post(
        "/activities",
        json=_day_payload(actual_calories=1500, sleep_hours=6),
        headers=auth_headers,
    )

    assert created.status_code == 201
    log = created.json()
    assert log["fitness_program_id"] == program["id"]
    assert log["target_calories"] == 2258
    assert log["calorie_achievement"] == 66
    assert analyzer.CALORIES_LOW in log["recommendations"]
    assert analyzer.SLEEP_LOW in log["recommendations"]

    day = client.get("/activities/2024-05-01", headers=auth_headers)
    logs = client.get("/activities", headers=auth_headers).json()["logs"]
    missing = client.get("/activities/2024-01-01", headers=auth_headers)

    assert day.status_code == 200
    assert day.json()["activity"]["sleep_hours"] == 6
    assert day.json()["log"]["id"] == log["id"]
    assert [item["date"] for item in logs] == ["2024-05-01"]
    assert missing.status_code == 404


def test_log_day_rejects_out_of_range_sleep(container, auth_headers) -> None:
    client = TestClient(create_app(container))
    _save_program(client, auth_headers)

    response = client.post(
        "/activities", json=_day_payload(sleep_hours=25), headers=auth_headers
    )

    assert response.status_code == 422
    assert response.json()["kind"] == "invalid_input"


def test_appointments_crud(container, auth_headers) -> None:
    client = TestClient(create_app(container))

    later = client.post(
        "/appointments",
        json={"date": "2099-02-01", "time": "10:00:00", "description": "Checkup"},
        headers=auth_headers,
    )
    sooner = client.post(
        "/appointments",
        json={"date": "2099-01-15", "time": "09:30:00", "description": "Dietitian"},
        headers=auth_headers,
    )
    listed = client.get("/appointments", headers=auth_headers).json()["appointments"]

    assert later.status_code == 201
    assert [item["description"] for item in listed] == ["Dietitian", "Checkup"]
    assert listed[0]["time"] == "09:30:00"

    deleted = client.delete(
        f"/appointments/{sooner.json()['id']}", headers=auth_headers
    )
    unknown = client.delete(f"/appointments/{uuid4()}", headers=auth_headers)

    assert deleted.status_code == 204
    assert unknown.status_code == 404
    remaining = client.get("/appointments", headers=auth_headers).json()
    assert [item["description"] for item in remaining["appointments"]] == ["Checkup"]


def test_refresh_recommendations(container, auth_headers) -> None:
    client = TestClient(create_app(container))
    _save_program(client, auth_headers)
    client.post("/activities", json=_day_payload(water_intake=1), headers=auth_headers)

    refreshed = client.post("/recommendations/refresh", headers=auth_headers)
    listed = client.get("/recommendations", headers=auth_headers)

    assert refreshed.status_code == 200
    titles = [card["title"] for card in refreshed.json()["recommendations"]]
    assert titles == [card.title for card in GENERAL_CARDS] + [LOW_WATER_CARD.title]
    assert listed.json() == refreshed.json()


def test_dashboard_summary(container, auth_headers) -> None:
    client = TestClient(create_app(container))
    _save_program(client, auth_headers)
    client.post("/activities", json=_day_payload(), headers=auth_headers)
    client.post(
        "/activities",
        json=_day_payload(date="2024-05-02", sleep_hours=7),
        headers=auth_headers,
    )
    client.post(
        "/appointments",
        json={"date": "2000-01-01", "time": "08:00:00", "description": "Past"},
        headers=auth_headers,
    )
    client.post(
        "/appointments",
        json={"date": "2099-01-01", "time": "08:00:00", "description": "Future"},
        headers=auth_headers,
    )

    response = client.get("/dashboard", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["activity_count"] == 2
    assert data["appointment_count"] == 2
    assert data["latest_activity"]["date"] == date(2024, 5, 2).isoformat()
    assert [item["description"] for item in data["upcoming_appointments"]] == [
        "Future"
    ]
