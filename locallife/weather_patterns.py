"""
LocalLife Weather Patterns

Average activity and steps per weather condition.
"""

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Optional

import numpy as np

from .records import DailyRecord
from .results import WeatherPatternResult

logger = logging.getLogger(__name__)

UNKNOWN_CONDITION = "Unknown"


def normalize_condition(condition: Optional[str]) -> str:
    """Missing or blank weather labels fall into the "Unknown" bucket."""
    if condition is None or not condition.strip():
        return UNKNOWN_CONDITION
    return condition


class WeatherPatternAnalyzer:
    """
    Buckets records by weather condition.

    Unlike the correlation engine, zero values are kept: these are
    plain exposure averages over every record in the bucket.
    """

    def analyze(self, records: Iterable[DailyRecord]) -> WeatherPatternResult:
        activity_by_condition: Dict[str, List[float]] = defaultdict(list)
        steps_by_condition: Dict[str, List[float]] = defaultdict(list)

        for record in records:
            condition = normalize_condition(record.weather_condition)
            activity_by_condition[condition].append(float(record.activity_score))
            steps_by_condition[condition].append(float(record.step_count))

        logger.debug("Grouped records into %d weather conditions", len(activity_by_condition))

        return WeatherPatternResult(
            activity_by_condition={k: tuple(v) for k, v in activity_by_condition.items()},
            steps_by_condition={k: tuple(v) for k, v in steps_by_condition.items()},
            average_activity_by_condition={
                k: float(np.mean(v)) for k, v in activity_by_condition.items()
            },
            average_steps_by_condition={
                k: float(np.mean(v)) for k, v in steps_by_condition.items()
            },
        )
