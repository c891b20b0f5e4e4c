"""
LocalLife Analysis Results

Immutable result objects produced fresh by every analysis run.
"""

from dataclasses import dataclass, asdict, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .errors import ErrorKind


@dataclass(frozen=True)
class PairCorrelation:
    """Correlation of one attribute pair across the filtered records."""
    pair: str
    x: str
    y: str
    coefficient: float  # -1 to 1
    sample_size: int  # pairs left after dropping NaN/zero values
    p_value: Optional[float] = None  # None when the coefficient is a 0.0 fallback
    fallback: Optional[ErrorKind] = None  # why the coefficient fell back to 0.0

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['fallback'] = self.fallback.value if self.fallback else None
        return data


class InsightStrength(str, Enum):
    """Strength of a correlation by absolute coefficient."""
    WEAK = "weak"
    MODERATE = "moderate"
    STRONG = "strong"
    VERY_STRONG = "very_strong"

    @classmethod
    def from_coefficient(cls, coefficient: float) -> "InsightStrength":
        magnitude = abs(coefficient)
        if magnitude < 0.3:
            return cls.WEAK
        if magnitude < 0.5:
            return cls.MODERATE
        if magnitude < 0.7:
            return cls.STRONG
        return cls.VERY_STRONG


@dataclass(frozen=True)
class Insight:
    """Human-readable interpretation of one correlation."""
    title: str
    description: str
    category: str
    correlation: float
    strength: InsightStrength

    def to_dict(self) -> Dict[str, Any]:
        return {
            'title': self.title,
            'description': self.description,
            'category': self.category,
            'correlation': self.correlation,
            'strength': self.strength.value,
        }


@dataclass(frozen=True)
class CorrelationResult:
    """Coefficients for every fixed attribute pair, plus insights."""
    correlations: Tuple[PairCorrelation, ...]
    record_count: int
    insights: Tuple[Insight, ...] = ()

    def get(self, pair: str) -> PairCorrelation:
        for correlation in self.correlations:
            if correlation.pair == pair:
                return correlation
        raise KeyError(pair)

    def coefficient(self, pair: str) -> float:
        return self.get(pair).coefficient

    def to_dict(self) -> Dict[str, Any]:
        return {
            'record_count': self.record_count,
            'correlations': [c.to_dict() for c in self.correlations],
            'insights': [i.to_dict() for i in self.insights],
        }


@dataclass(frozen=True)
class WeatherPatternResult:
    """Activity and step values grouped by weather condition."""
    activity_by_condition: Dict[str, Tuple[float, ...]]
    steps_by_condition: Dict[str, Tuple[float, ...]]
    average_activity_by_condition: Dict[str, float]
    average_steps_by_condition: Dict[str, float]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'activity_by_condition': {k: list(v) for k, v in self.activity_by_condition.items()},
            'steps_by_condition': {k: list(v) for k, v in self.steps_by_condition.items()},
            'average_activity_by_condition': dict(self.average_activity_by_condition),
            'average_steps_by_condition': dict(self.average_steps_by_condition),
        }


@dataclass(frozen=True)
class DayData:
    """One day of the year map; all zeros for days without a record."""
    activity_score: float = 0.0
    steps: int = 0
    places_visited: int = 0
    screen_time_minutes: int = 0
    media_minutes: int = 0

    @property
    def has_data(self) -> bool:
        return (
            self.activity_score > 0
            or self.steps > 0
            or self.places_visited > 0
            or self.screen_time_minutes > 0
            or self.media_minutes > 0
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class YearStatistics:
    """Aggregates, streaks and calendar buckets for one calendar year."""
    year: int
    total_days: int = 0
    data_available_days: int = 0
    active_days: int = 0
    data_percentage: float = 0.0

    average_activity_score: float = 0.0
    average_steps: float = 0.0
    average_places: float = 0.0
    average_screen_time: float = 0.0
    average_media_time: float = 0.0

    max_activity_score: float = 0.0
    max_steps: int = 0
    max_places: int = 0
    max_screen_time: int = 0
    max_media_time: int = 0

    longest_active_streak: int = 0
    longest_inactive_streak: int = 0
    current_streak: int = 0

    # Spring, Summer, Fall, Winter
    seasonal_activity: Tuple[float, ...] = (0.0,) * 4
    # Sunday .. Saturday
    day_of_week_activity: Tuple[float, ...] = (0.0,) * 7

    skipped_dates: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['seasonal_activity'] = list(self.seasonal_activity)
        data['day_of_week_activity'] = list(self.day_of_week_activity)
        data['skipped_dates'] = list(self.skipped_dates)
        return data


@dataclass(frozen=True)
class YearComparisonResult:
    """Statistics for two years and the per-day average deltas between them."""
    year1_stats: YearStatistics
    year2_stats: YearStatistics

    @property
    def activity_score_change(self) -> float:
        return self.year2_stats.average_activity_score - self.year1_stats.average_activity_score

    @property
    def steps_change(self) -> float:
        return self.year2_stats.average_steps - self.year1_stats.average_steps

    @property
    def places_change(self) -> float:
        return self.year2_stats.average_places - self.year1_stats.average_places

    @property
    def screen_time_change(self) -> float:
        return self.year2_stats.average_screen_time - self.year1_stats.average_screen_time

    @property
    def media_time_change(self) -> float:
        return self.year2_stats.average_media_time - self.year1_stats.average_media_time

    def to_dict(self) -> Dict[str, Any]:
        return {
            'year1_stats': self.year1_stats.to_dict(),
            'year2_stats': self.year2_stats.to_dict(),
            'activity_score_change': self.activity_score_change,
            'steps_change': self.steps_change,
            'places_change': self.places_change,
            'screen_time_change': self.screen_time_change,
            'media_time_change': self.media_time_change,
        }
