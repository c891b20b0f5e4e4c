"""
LocalLife API Schemas

Pydantic models for API responses.
Includes OpenAPI documentation via Field descriptions.
"""

from typing import Optional, List, Dict
from pydantic import BaseModel, Field

from .errors import ErrorKind


# === Health Schemas ===

class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str = Field(..., description="Overall system status")
    version: str = Field(..., description="API version", examples=["0.1.0"])
    timestamp: str = Field(..., description="ISO 8601 timestamp")


# === Correlation Schemas ===

class PairCorrelationResponse(BaseModel):
    """Coefficient for one attribute pair."""
    pair: str = Field(..., description="Pair id", examples=["temperature_activity"])
    x: str = Field(..., description="First attribute")
    y: str = Field(..., description="Second attribute")
    coefficient: float = Field(..., ge=-1, le=1, description="Population Pearson r")
    sample_size: int = Field(..., ge=0, description="Days left after dropping zero/NaN values")
    p_value: Optional[float] = Field(None, description="Two-sided p-value, null when r is a 0.0 fallback")
    fallback: Optional[ErrorKind] = Field(None, description="insufficient_pair_samples or zero_variance when r is a 0.0 fallback")

    class Config:
        from_attributes = True


class InsightResponse(BaseModel):
    """Threshold-gated interpretation of one correlation."""
    title: str = Field(..., description="Insight title")
    description: str = Field(..., description="Human-readable finding with evidence")
    category: str = Field(..., description="Category: temperature, uv, air_quality, screen_weather, media_weather")
    correlation: float = Field(..., ge=-1, le=1, description="Signed coefficient")
    strength: str = Field(..., description="weak, moderate, strong or very_strong")


class CorrelationAnalysisResponse(BaseModel):
    """All pair correlations plus generated insights."""
    record_count: int = Field(..., description="Number of daily records analyzed")
    correlations: List[PairCorrelationResponse]
    insights: List[InsightResponse]

    class Config:
        json_schema_extra = {
            "example": {
                "record_count": 120,
                "correlations": [{
                    "pair": "temperature_activity",
                    "x": "temperature",
                    "y": "activity_score",
                    "coefficient": 0.62,
                    "sample_size": 97,
                    "p_value": 0.0001
                }],
                "insights": [{
                    "title": "Temperature Impact",
                    "description": "Warmer temperatures correlate with higher activity levels (r=0.62, n=97)",
                    "category": "temperature",
                    "correlation": 0.62,
                    "strength": "strong"
                }]
            }
        }


class WeatherPatternResponse(BaseModel):
    """Activity and steps grouped by weather condition."""
    activity_by_condition: Dict[str, List[float]]
    steps_by_condition: Dict[str, List[float]]
    average_activity_by_condition: Dict[str, float]
    average_steps_by_condition: Dict[str, float]


# === Year Schemas ===

class YearStatisticsResponse(BaseModel):
    """Aggregates for one calendar year."""
    year: int
    total_days: int = Field(..., description="365 or 366")
    data_available_days: int
    active_days: int
    data_percentage: float = Field(..., ge=0, le=100)

    average_activity_score: float
    average_steps: float
    average_places: float
    average_screen_time: float
    average_media_time: float

    max_activity_score: float
    max_steps: int
    max_places: int
    max_screen_time: int
    max_media_time: int

    longest_active_streak: int
    longest_inactive_streak: int
    current_streak: int = Field(..., description="Active run ending on the last day of the year")

    seasonal_activity: List[float] = Field(..., description="Spring, Summer, Fall, Winter")
    day_of_week_activity: List[float] = Field(..., description="Sunday through Saturday")
    seasons: Dict[str, float] = Field(default_factory=dict, description="Seasonal averages by name")
    days_of_week: Dict[str, float] = Field(default_factory=dict, description="Weekday averages by name")
    skipped_dates: List[str] = Field(default_factory=list, description="Dates left out of calendar buckets")


class DayDataResponse(BaseModel):
    """One day of the year map."""
    activity_score: float
    steps: int
    places_visited: int
    screen_time_minutes: int
    media_minutes: int

    class Config:
        from_attributes = True


class YearDaysResponse(BaseModel):
    """Zero-filled map of every date in a year."""
    year: int
    days: Dict[str, DayDataResponse]


class YearComparisonResponse(BaseModel):
    """Two years side by side with per-day average deltas."""
    year1_stats: YearStatisticsResponse
    year2_stats: YearStatisticsResponse
    activity_score_change: float
    steps_change: float
    places_change: float
    screen_time_change: float
    media_time_change: float


class AvailableYearsResponse(BaseModel):
    """Years that have at least one daily record."""
    years: List[int]
