"""
LocalLife Daily Records

Immutable input records consumed by the analysis engine.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional

# camelCase names used by the collectors' export format
_CAMEL_ALIASES = {
    'uvIndex': 'uv_index',
    'airQualityIndex': 'air_quality_index',
    'activityScore': 'activity_score',
    'stepCount': 'step_count',
    'screenTimeMinutes': 'screen_time_minutes',
    'totalMediaMinutes': 'total_media_minutes',
    'placesVisited': 'places_visited',
    'weatherCondition': 'weather_condition',
}

_FLOAT_FIELDS = ('temperature', 'humidity', 'activity_score')
_INT_FIELDS = (
    'uv_index', 'air_quality_index', 'step_count',
    'screen_time_minutes', 'total_media_minutes', 'places_visited',
)


@dataclass(frozen=True)
class DailyRecord:
    """
    One calendar day of measurements.

    Zero (and NaN for the real-valued readings) marks a missing
    environmental value. Counters are non-negative.
    """
    date: str  # YYYY-MM-DD
    temperature: float = 0.0
    humidity: float = 0.0
    uv_index: int = 0
    air_quality_index: int = 0
    activity_score: float = 0.0
    step_count: int = 0
    screen_time_minutes: int = 0
    total_media_minutes: int = 0
    places_visited: int = 0
    weather_condition: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DailyRecord":
        """Build a record from a snake_case or camelCase mapping."""
        values: Dict[str, Any] = {}
        for key, value in data.items():
            values[_CAMEL_ALIASES.get(key, key)] = value

        if not values.get('date'):
            raise ValueError("Daily record requires a date")

        kwargs: Dict[str, Any] = {
            'date': str(values['date']),
            'weather_condition': values.get('weather_condition'),
        }
        for name in _FLOAT_FIELDS:
            raw = values.get(name)
            kwargs[name] = float(raw) if raw is not None else 0.0
        for name in _INT_FIELDS:
            raw = values.get(name)
            kwargs[name] = int(raw) if raw is not None else 0

        return cls(**kwargs)

    @classmethod
    def from_row(cls, row: Any) -> "DailyRecord":
        """Build a record from a ``day_records`` ORM row."""
        return cls.from_dict({
            'date': row.date,
            'temperature': row.temperature,
            'humidity': row.humidity,
            'uv_index': row.uv_index,
            'air_quality_index': row.air_quality_index,
            'activity_score': row.activity_score,
            'step_count': row.step_count,
            'screen_time_minutes': row.screen_time_minutes,
            'total_media_minutes': row.total_media_minutes,
            'places_visited': row.places_visited,
            'weather_condition': row.weather_condition,
        })

    def to_dict(self) -> Dict[str, Any]:
        return {
            'date': self.date,
            'temperature': self.temperature,
            'humidity': self.humidity,
            'uvIndex': self.uv_index,
            'airQualityIndex': self.air_quality_index,
            'activityScore': self.activity_score,
            'stepCount': self.step_count,
            'screenTimeMinutes': self.screen_time_minutes,
            'totalMediaMinutes': self.total_media_minutes,
            'placesVisited': self.places_visited,
            'weatherCondition': self.weather_condition,
        }


class Attribute(str, Enum):
    """Numeric record fields that can be correlated."""
    TEMPERATURE = "temperature"
    HUMIDITY = "humidity"
    UV_INDEX = "uv_index"
    AIR_QUALITY_INDEX = "air_quality_index"
    ACTIVITY_SCORE = "activity_score"
    STEP_COUNT = "step_count"
    SCREEN_TIME_MINUTES = "screen_time_minutes"
    TOTAL_MEDIA_MINUTES = "total_media_minutes"
    PLACES_VISITED = "places_visited"

    def extract(self, record: DailyRecord) -> float:
        return float(getattr(record, self.value))
