"""
LocalLife Year Aggregation

Calendar-year view of the daily records:
- Zero-filled map covering every date of the year
- Totals, per-day averages and maxima
- Active and inactive streaks
- Seasonal and day-of-week activity averages
- Year-over-year comparison
"""

import calendar
import logging
from datetime import date, datetime, timedelta
from typing import Dict, Iterable, List, Optional

import numpy as np

from .records import DailyRecord
from .results import DayData, YearComparisonResult, YearStatistics

logger = logging.getLogger(__name__)

SEASON_NAMES = ["Spring", "Summer", "Fall", "Winter"]
DAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]


def days_in_year(year: int) -> int:
    return 366 if calendar.isleap(year) else 365


def season_index(month: int) -> int:
    """Northern-Hemisphere season for a month (1-12): 0=Spring .. 3=Winter."""
    if 3 <= month <= 5:
        return 0
    if 6 <= month <= 8:
        return 1
    if 9 <= month <= 11:
        return 2
    return 3


def day_of_week_index(day: date) -> int:
    """0=Sunday .. 6=Saturday."""
    return day.isoweekday() % 7


class YearAggregator:
    """Builds per-year statistics from a snapshot of daily records."""

    # A day counts as active above either threshold
    ACTIVE_SCORE_THRESHOLD = 20
    ACTIVE_STEPS_THRESHOLD = 1000

    def build_year_map(
        self,
        records: Iterable[DailyRecord],
        year: int
    ) -> Dict[str, DayData]:
        """
        Map every date of the year to its day data.

        Dates without a record get an all-zero entry, so the map always
        covers the full calendar year.
        """
        prefix = f"{year:04d}-"
        year_map: Dict[str, DayData] = {}

        for record in records:
            if record.date.startswith(prefix):
                year_map[record.date] = DayData(
                    activity_score=record.activity_score,
                    steps=record.step_count,
                    places_visited=record.places_visited,
                    screen_time_minutes=record.screen_time_minutes,
                    media_minutes=record.total_media_minutes
                )

        first_day = date(year, 1, 1)
        for offset in range(days_in_year(year)):
            day = first_day + timedelta(days=offset)
            year_map.setdefault(day.isoformat(), DayData())

        return dict(sorted(year_map.items()))

    def aggregate(self, records: Iterable[DailyRecord], year: int) -> YearStatistics:
        """Build the year map and compute its statistics."""
        return self.calculate_statistics(self.build_year_map(records, year), year)

    def calculate_statistics(
        self,
        year_map: Dict[str, DayData],
        year: int
    ) -> YearStatistics:
        """Compute aggregates, streaks and calendar buckets for a year map."""
        if not year_map:
            return YearStatistics(year=year)

        days = list(year_map.values())
        # Calendar length, even if a malformed date added an extra key
        total_days = days_in_year(year)

        activity = np.array([d.activity_score for d in days], dtype=float)
        steps = np.array([d.steps for d in days], dtype=np.int64)
        places = np.array([d.places_visited for d in days], dtype=np.int64)
        screen_time = np.array([d.screen_time_minutes for d in days], dtype=np.int64)
        media = np.array([d.media_minutes for d in days], dtype=np.int64)

        data_available_days = sum(1 for d in days if d.has_data)
        active_days = sum(1 for d in days if self.is_active(d))

        longest_active, longest_inactive, current = self._calculate_streaks(year_map)
        seasonal, day_of_week, skipped = self._calculate_calendar_buckets(year_map)

        return YearStatistics(
            year=year,
            total_days=total_days,
            data_available_days=data_available_days,
            active_days=active_days,
            data_percentage=min(100.0, data_available_days / total_days * 100.0),
            # Averages are per calendar day, so missing days pull them down
            average_activity_score=float(activity.sum()) / total_days,
            average_steps=int(steps.sum()) / total_days,
            average_places=int(places.sum()) / total_days,
            average_screen_time=int(screen_time.sum()) / total_days,
            average_media_time=int(media.sum()) / total_days,
            max_activity_score=max(0.0, float(activity.max())),
            max_steps=max(0, int(steps.max())),
            max_places=max(0, int(places.max())),
            max_screen_time=max(0, int(screen_time.max())),
            max_media_time=max(0, int(media.max())),
            longest_active_streak=longest_active,
            longest_inactive_streak=longest_inactive,
            current_streak=current,
            seasonal_activity=seasonal,
            day_of_week_activity=day_of_week,
            skipped_dates=skipped
        )

    def is_active(self, day: DayData) -> bool:
        return (
            day.activity_score > self.ACTIVE_SCORE_THRESHOLD
            or day.steps > self.ACTIVE_STEPS_THRESHOLD
        )

    def _calculate_streaks(self, year_map: Dict[str, DayData]):
        """
        Single ascending pass over the dates.

        The trailing active run is reported as the current streak; it
        ends at the last date of the year, not today.
        """
        current_active = 0
        longest_active = 0
        current_inactive = 0
        longest_inactive = 0

        for key in sorted(year_map):
            if self.is_active(year_map[key]):
                current_active += 1
                current_inactive = 0
                longest_active = max(longest_active, current_active)
            else:
                current_inactive += 1
                current_active = 0
                longest_inactive = max(longest_inactive, current_inactive)

        return longest_active, longest_inactive, current_active

    def _calculate_calendar_buckets(self, year_map: Dict[str, DayData]):
        """Mean activity score per season and per weekday."""
        seasonal: List[List[float]] = [[] for _ in range(4)]
        weekdays: List[List[float]] = [[] for _ in range(7)]
        skipped: List[str] = []

        for key, day_data in year_map.items():
            try:
                day = datetime.strptime(key, "%Y-%m-%d").date()
            except ValueError:
                logger.warning("Skipping unparseable date %r in seasonal/day-of-week analysis", key)
                skipped.append(key)
                continue

            seasonal[season_index(day.month)].append(day_data.activity_score)
            weekdays[day_of_week_index(day)].append(day_data.activity_score)

        return (
            tuple(float(np.mean(v)) if v else 0.0 for v in seasonal),
            tuple(float(np.mean(v)) if v else 0.0 for v in weekdays),
            tuple(skipped),
        )

    def available_years(self, records: Iterable[DailyRecord]) -> List[int]:
        """Sorted distinct years that have at least one record."""
        years = set()
        for record in records:
            try:
                years.add(int(record.date[:4]))
            except ValueError:
                logger.warning("Cannot parse year from date %r", record.date)
        return sorted(years)


class YearComparator:
    """Aggregates two years independently and exposes their deltas."""

    def __init__(self, aggregator: Optional[YearAggregator] = None):
        self.aggregator = aggregator or YearAggregator()

    def compare(
        self,
        records: Iterable[DailyRecord],
        year1: int,
        year2: int
    ) -> YearComparisonResult:
        records = list(records)
        return YearComparisonResult(
            year1_stats=self.aggregator.aggregate(records, year1),
            year2_stats=self.aggregator.aggregate(records, year2)
        )
