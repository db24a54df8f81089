"""Tests for per-user endpoints."""

from uuid import UUID

from fastapi.testclient import TestClient

from health_track.api.app import create_app
from health_track.containers import AppContainer

PROFILE = {
    "age": 30,
    "sex": "male",
    "height_cm": 175,
    "weight_kg": 80,
    "conditions": ["Pre-Diabetic", "hypertension"],
    "goals": ["weight_loss"],
}


def _client_with_profile(container: AppContainer, user_id: UUID) -> TestClient:
    client = TestClient(create_app(container))
    response = client.put(f"/users/{user_id}/profile", json=PROFILE)
    assert response.status_code == 200
    return client


def test_missing_profile_returns_404(container, user_id) -> None:
    client = TestClient(create_app(container))

    assert client.get(f"/users/{user_id}/profile").status_code == 404
    assert client.get(f"/users/{user_id}/plan").status_code == 404
    assert client.get(f"/users/{user_id}/health-score").status_code == 404


def test_save_and_read_profile(container, user_id) -> None:
    client = _client_with_profile(container, user_id)

    response = client.get(f"/users/{user_id}/profile")

    assert response.status_code == 200
    profile = response.json()["profile"]
    assert profile["conditions"] == ["hypertension", "prediabetes"]
    assert profile["goals"] == ["weight_loss"]


def test_plan_endpoints(container, user_id) -> None:
    client = _client_with_profile(container, user_id)

    plan = client.get(f"/users/{user_id}/plan").json()["plan"]
    adjusted = client.post(
        f"/users/{user_id}/plan/adjust",
        json={"reason": "Glucose trending up", "calorie_change": -100},
    ).json()["plan"]

    assert plan["targets"]["calories"] == 1773
    assert plan["suggestions"][3]["name"] == "Apple with Almond Butter"
    assert adjusted["targets"]["calories"] == 1673
    assert adjusted["adjustment"] == {
        "reason": "Glucose trending up",
        "previous_calories": 1773,
        "change": -100,
    }


def test_plan_adjustment_below_zero_is_rejected(container, user_id) -> None:
    client = _client_with_profile(container, user_id)

    response = client.post(
        f"/users/{user_id}/plan/adjust",
        json={"reason": "Typo", "calorie_change": -5000},
    )

    assert response.status_code == 422


def test_reading_endpoints(container, user_id) -> None:
    client = _client_with_profile(container, user_id)

    logged = client.post(
        f"/users/{user_id}/readings",
        json={"kind": "glucose", "value": 240, "context": "After Meal"},
    )
    client.post(f"/users/{user_id}/readings", json={"kind": "steps", "value": 9000})
    latest = client.get(f"/users/{user_id}/readings/latest")

    assert logged.status_code == 200
    assert logged.json() == {"kind": "glucose", "unit": "mg/dL", "status": "High"}
    assert latest.json()["statuses"] == {"glucose": "High", "steps": "Active"}
    assert latest.json()["snapshot_score"] == 50


def test_health_risk_and_forecast_endpoints(container, user_id) -> None:
    client = _client_with_profile(container, user_id)
    for value in (100, 120):
        client.post(
            f"/users/{user_id}/readings", json={"kind": "glucose", "value": value}
        )

    report = client.get(f"/users/{user_id}/health-score")
    risk = client.get(f"/users/{user_id}/risk")
    forecast = client.get(f"/users/{user_id}/forecast")
    trend = client.get(f"/users/{user_id}/glucose-trend")

    assert report.status_code == 200
    assert report.json()["report"]["glucose_readings"] == 2
    assert report.json()["report"]["score"] == 30
    assert risk.json() == {"points": 2, "score": 20, "tier": "Low"}
    assert len(forecast.json()["predictions"]) == 7
    assert forecast.json()["predictions"][0]["predicted_value"] == 110
    assert trend.json() == {"change_pct": 0.0}


def test_meal_and_progress_endpoints(container, user_id) -> None:
    client = _client_with_profile(container, user_id)

    logged = client.post(
        f"/users/{user_id}/meals",
        json={
            "foods": [
                {
                    "name": "Greek Yogurt",
                    "calories": 150,
                    "carbs_g": 8,
                    "protein_g": 15,
                    "fat_g": 4,
                }
            ],
            "logged_at": "2026-03-20T08:15:00+00:00",
        },
    )
    progress = client.get(f"/users/{user_id}/progress")
    check = client.post(
        f"/users/{user_id}/daily-check", params={"today": "2026-03-20"}
    )

    assert logged.status_code == 200
    body = logged.json()
    assert body["meal"]["slot"] == "breakfast"
    assert body["meal"]["meal_score"] == 10
    assert [trophy["id"] for trophy in body["unlocked"]] == ["first_photo"]
    assert progress.json()["state"]["xp"] == 60
    assert progress.json()["level"] == {"level": 1, "current": 60, "needed": 100}
    assert check.json()["state"]["current_streak"] == 1


def test_meal_requires_foods(container, user_id) -> None:
    client = _client_with_profile(container, user_id)

    response = client.post(f"/users/{user_id}/meals", json={"foods": []})

    assert response.status_code == 422
