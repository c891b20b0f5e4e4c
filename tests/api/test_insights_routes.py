"""
Integration tests for correlation and weather pattern endpoints.
"""

import pytest
from datetime import date, timedelta


@pytest.fixture
def seed_correlated_days(create_day_record, correlated_records):
    """Store the correlated scenario in the test database."""
    for record in correlated_records:
        create_day_record(
            date=record.date,
            temperature=record.temperature,
            humidity=record.humidity,
            uv_index=record.uv_index,
            air_quality_index=record.air_quality_index,
            activity_score=record.activity_score,
            step_count=record.step_count,
            screen_time_minutes=record.screen_time_minutes,
            total_media_minutes=record.total_media_minutes,
            places_visited=record.places_visited,
            weather_condition=record.weather_condition
        )


class TestCorrelationsEndpoint:
    """Tests for GET /api/insights/correlations."""

    def test_returns_correlations_and_insights(self, test_client, seed_correlated_days):
        response = test_client.get("/api/insights/correlations")

        assert response.status_code == 200
        data = response.json()
        assert data["record_count"] == 10
        assert len(data["correlations"]) == 7

        first = data["correlations"][0]
        assert first["pair"] == "temperature_activity"
        assert first["coefficient"] > 0.9
        assert first["sample_size"] == 10
        assert first["fallback"] is None

        assert data["insights"][0]["category"] == "temperature"
        assert data["insights"][0]["strength"] == "very_strong"

    def test_insufficient_data_returns_422(self, test_client, create_day_record):
        start = date(2024, 1, 1)
        for i in range(3):
            create_day_record(date=(start + timedelta(days=i)).isoformat(), temperature=10.0)

        response = test_client.get("/api/insights/correlations")

        assert response.status_code == 422
        data = response.json()
        assert data["error"] == "insufficient_data"
        assert data["category"] == "insufficient_data"
        assert data["details"] == {"record_count": 3, "required": 10}
        assert len(data["suggestions"]) > 0


class TestWeatherPatternsEndpoint:
    """Tests for GET /api/insights/weather-patterns."""

    def test_groups_by_condition(self, test_client, seed_correlated_days, create_day_record):
        create_day_record(date="2024-07-01", activity_score=12.0, step_count=800)

        response = test_client.get("/api/insights/weather-patterns")

        assert response.status_code == 200
        data = response.json()
        assert set(data["average_activity_by_condition"]) == {"Sunny", "Cloudy", "Unknown"}
        assert data["average_activity_by_condition"]["Unknown"] == 12.0
        assert data["steps_by_condition"]["Unknown"] == [800.0]

    def test_empty_database(self, test_client):
        response = test_client.get("/api/insights/weather-patterns")

        assert response.status_code == 200
        assert response.json()["average_steps_by_condition"] == {}


class TestHealthEndpoint:

    def test_health(self, test_client):
        response = test_client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestAppLifespan:

    def test_shutdown_stops_analysis_workers(self):
        from fastapi.testclient import TestClient
        from locallife import analysis_service
        from locallife.api import app

        with TestClient(app):
            service = analysis_service.get_analysis_service()

        assert analysis_service._service is None
        with pytest.raises(RuntimeError):
            service.submit_weather_patterns()
