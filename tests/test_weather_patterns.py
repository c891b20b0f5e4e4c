"""
Tests for weather condition bucketing.
"""

import pytest

from locallife.records import DailyRecord
from locallife.weather_patterns import (
    UNKNOWN_CONDITION,
    WeatherPatternAnalyzer,
    normalize_condition,
)


class TestNormalizeCondition:

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_missing_is_unknown(self, raw):
        assert normalize_condition(raw) == UNKNOWN_CONDITION

    def test_keeps_label(self):
        assert normalize_condition("Rain") == "Rain"


class TestWeatherPatternAnalyzer:

    @pytest.fixture
    def analyzer(self):
        return WeatherPatternAnalyzer()

    def test_empty_conditions_share_one_bucket(self, analyzer):
        records = [
            DailyRecord(date="2024-05-01", weather_condition="", activity_score=10, step_count=100),
            DailyRecord(date="2024-05-02", weather_condition=None, activity_score=20, step_count=200),
            DailyRecord(date="2024-05-03", activity_score=30, step_count=300),
        ]

        result = analyzer.analyze(records)

        assert list(result.activity_by_condition) == ["Unknown"]
        assert result.activity_by_condition["Unknown"] == (10.0, 20.0, 30.0)
        assert result.average_activity_by_condition["Unknown"] == pytest.approx(20.0)
        assert result.average_steps_by_condition["Unknown"] == pytest.approx(200.0)

    def test_means_include_zero_values(self, analyzer):
        records = [
            DailyRecord(date="2024-05-01", weather_condition="Rain", activity_score=0, step_count=0),
            DailyRecord(date="2024-05-02", weather_condition="Rain", activity_score=40, step_count=6000),
            DailyRecord(date="2024-05-03", weather_condition="Sunny", activity_score=80, step_count=12000),
        ]

        result = analyzer.analyze(records)

        assert result.average_activity_by_condition == {"Rain": 20.0, "Sunny": 80.0}
        assert result.average_steps_by_condition == {"Rain": 3000.0, "Sunny": 12000.0}
        assert result.steps_by_condition["Rain"] == (0.0, 6000.0)

    def test_single_record_bucket(self, analyzer):
        records = [DailyRecord(date="2024-05-01", weather_condition="Snow", activity_score=7.5, step_count=321)]

        result = analyzer.analyze(records)

        assert result.average_activity_by_condition["Snow"] == 7.5
        assert result.average_steps_by_condition["Snow"] == 321.0

    def test_no_records(self, analyzer):
        result = analyzer.analyze([])

        assert result.activity_by_condition == {}
        assert result.average_activity_by_condition == {}

    def test_to_dict(self, analyzer, correlated_records):
        data = analyzer.analyze(correlated_records).to_dict()

        assert set(data["average_activity_by_condition"]) == {"Sunny", "Cloudy"}
        assert isinstance(data["activity_by_condition"]["Sunny"], list)
