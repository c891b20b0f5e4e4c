"""
Integration tests for year statistics endpoints.
"""


class TestAvailableYears:

    def test_lists_years(self, test_client, create_day_record):
        create_day_record(date="2023-05-01", activity_score=30.0)
        create_day_record(date="2021-05-01", activity_score=30.0)

        response = test_client.get("/api/stats/years")

        assert response.status_code == 200
        assert response.json() == {"years": [2021, 2023]}


class TestYearStatisticsEndpoint:

    def test_leap_year_statistics(self, test_client, create_day_record):
        create_day_record(date="2024-12-30", activity_score=50.0, step_count=6000)
        create_day_record(date="2024-12-31", activity_score=50.0, step_count=6000)

        response = test_client.get("/api/stats/year/2024")

        assert response.status_code == 200
        data = response.json()
        assert data["year"] == 2024
        assert data["total_days"] == 366
        assert data["active_days"] == 2
        assert data["current_streak"] == 2
        assert data["longest_active_streak"] == 2
        assert len(data["seasonal_activity"]) == 4
        assert len(data["day_of_week_activity"]) == 7
        assert set(data["seasons"]) == {"Spring", "Summer", "Fall", "Winter"}
        assert data["seasons"]["Winter"] > 0
        assert "Sunday" in data["days_of_week"]

    def test_year_without_data(self, test_client):
        response = test_client.get("/api/stats/year/2023")

        assert response.status_code == 200
        data = response.json()
        assert data["total_days"] == 365
        assert data["data_available_days"] == 0
        assert data["longest_inactive_streak"] == 365

    def test_last_supported_year(self, test_client, create_day_record):
        create_day_record(date="9999-12-31", activity_score=40.0)

        response = test_client.get("/api/stats/year/9999")

        assert response.status_code == 200
        assert response.json()["total_days"] == 365
        assert response.json()["current_streak"] == 1

    def test_rejects_invalid_year(self, test_client):
        response = test_client.get("/api/stats/year/0")

        assert response.status_code == 422


class TestYearDaysEndpoint:

    def test_zero_filled_map(self, test_client, create_day_record):
        create_day_record(date="2023-08-15", activity_score=44.0, step_count=7000, places_visited=2)

        response = test_client.get("/api/stats/year/2023/days")

        assert response.status_code == 200
        days = response.json()["days"]
        assert len(days) == 365
        assert days["2023-08-15"]["steps"] == 7000
        assert days["2023-08-15"]["places_visited"] == 2
        assert days["2023-01-01"]["activity_score"] == 0.0

    def test_last_supported_year(self, test_client):
        response = test_client.get("/api/stats/year/9999/days")

        assert response.status_code == 200
        assert len(response.json()["days"]) == 365


class TestCompareEndpoint:

    def test_deltas(self, test_client, create_day_record):
        create_day_record(date="2022-03-01", activity_score=365.0, step_count=365000)
        create_day_record(date="2023-03-01", activity_score=730.0, step_count=730000)

        response = test_client.get("/api/stats/compare?year1=2022&year2=2023")

        assert response.status_code == 200
        data = response.json()
        assert data["year1_stats"]["year"] == 2022
        assert data["year2_stats"]["year"] == 2023
        assert abs(data["activity_score_change"] - 1.0) < 1e-9
        assert abs(data["steps_change"] - 1000.0) < 1e-9
        assert data["places_change"] == 0.0

    def test_same_year_rejected(self, test_client):
        response = test_client.get("/api/stats/compare?year1=2023&year2=2023")

        assert response.status_code == 400
        assert response.json()["error"] == "invalid_year_pair"

    def test_missing_year_parameter(self, test_client):
        response = test_client.get("/api/stats/compare?year1=2023")

        assert response.status_code == 422
