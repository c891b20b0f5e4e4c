"""
LocalLife Correlation Engine

Population Pearson correlation between environmental and behavioral
attributes of the daily records:
- Zero and NaN values are treated as "no data" and dropped pairwise
- Degenerate inputs (too few pairs, no variance) yield a neutral 0.0
- Two-sided p-values from scipy's pearsonr
"""

import logging
import math
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np
from scipy.stats import pearsonr

from .errors import ErrorKind, InsufficientDataError
from .records import Attribute, DailyRecord
from .results import CorrelationResult, PairCorrelation

logger = logging.getLogger(__name__)

# Minimum records for a correlation run
MIN_RECORDS = 10

# Minimum valid pairs for one coefficient
MIN_PAIR_SAMPLES = 5


class CorrelationPair(str, Enum):
    """The attribute pairs evaluated on every run, in evaluation order."""
    TEMPERATURE_ACTIVITY = "temperature_activity"
    TEMPERATURE_STEPS = "temperature_steps"
    HUMIDITY_ACTIVITY = "humidity_activity"
    UV_ACTIVITY = "uv_activity"
    AIR_QUALITY_ACTIVITY = "air_quality_activity"
    TEMPERATURE_SCREEN_TIME = "temperature_screen_time"
    TEMPERATURE_MEDIA = "temperature_media"


CORRELATION_PAIRS: List[Tuple[CorrelationPair, Attribute, Attribute]] = [
    (CorrelationPair.TEMPERATURE_ACTIVITY, Attribute.TEMPERATURE, Attribute.ACTIVITY_SCORE),
    (CorrelationPair.TEMPERATURE_STEPS, Attribute.TEMPERATURE, Attribute.STEP_COUNT),
    (CorrelationPair.HUMIDITY_ACTIVITY, Attribute.HUMIDITY, Attribute.ACTIVITY_SCORE),
    (CorrelationPair.UV_ACTIVITY, Attribute.UV_INDEX, Attribute.ACTIVITY_SCORE),
    (CorrelationPair.AIR_QUALITY_ACTIVITY, Attribute.AIR_QUALITY_INDEX, Attribute.ACTIVITY_SCORE),
    (CorrelationPair.TEMPERATURE_SCREEN_TIME, Attribute.TEMPERATURE, Attribute.SCREEN_TIME_MINUTES),
    (CorrelationPair.TEMPERATURE_MEDIA, Attribute.TEMPERATURE, Attribute.TOTAL_MEDIA_MINUTES),
]


def paired_values(
    records: Iterable[DailyRecord],
    x: Attribute,
    y: Attribute
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Extract two parallel sequences, dropping records where either
    value is NaN or exactly zero.

    Zero is the "no data" sentinel, so genuine zero-step or
    zero-screen-time days are dropped as well.
    """
    records = list(records)
    xs = np.array([x.extract(r) for r in records], dtype=float)
    ys = np.array([y.extract(r) for r in records], dtype=float)

    mask = ~(np.isnan(xs) | np.isnan(ys)) & (xs != 0) & (ys != 0)
    return xs[mask], ys[mask]


def pearson(xs: Sequence[float], ys: Sequence[float]) -> float:
    """
    Population Pearson correlation coefficient.

    Returns 0.0 when either sequence has no variance.
    """
    x = np.asarray(xs, dtype=float)
    y = np.asarray(ys, dtype=float)

    if x.shape != y.shape:
        raise ValueError(f"Sequences differ in length: {x.size} != {y.size}")
    if x.size < 2:
        return 0.0

    # Constant input: the mean may not reproduce the value exactly,
    # which would leave tiny non-zero deviations behind
    if np.all(x == x[0]) or np.all(y == y[0]):
        return 0.0

    dx = x - x.mean()
    dy = y - y.mean()

    denominator = math.sqrt(float(np.sum(dx * dx)) * float(np.sum(dy * dy)))
    if denominator == 0:
        return 0.0

    r = float(np.sum(dx * dy)) / denominator
    return max(-1.0, min(1.0, r))


def correlate(
    records: Iterable[DailyRecord],
    x: Attribute,
    y: Attribute,
    pair: Optional[str] = None
) -> PairCorrelation:
    """Correlate two attributes across the records."""
    xs, ys = paired_values(records, x, y)
    name = pair or f"{x.value}_{y.value}"
    sample_size = int(xs.size)

    if sample_size < MIN_PAIR_SAMPLES:
        logger.debug(
            "Only %d valid pairs for %s (need %d), using 0.0",
            sample_size, name, MIN_PAIR_SAMPLES
        )
        return PairCorrelation(
            pair=name, x=x.value, y=y.value,
            coefficient=0.0, sample_size=sample_size,
            fallback=ErrorKind.INSUFFICIENT_PAIR_SAMPLES
        )

    if np.all(xs == xs[0]) or np.all(ys == ys[0]):
        logger.debug("Zero variance for %s, using 0.0", name)
        return PairCorrelation(
            pair=name, x=x.value, y=y.value,
            coefficient=0.0, sample_size=sample_size,
            fallback=ErrorKind.ZERO_VARIANCE
        )

    coefficient = pearson(xs, ys)
    _, p = pearsonr(xs, ys)
    return PairCorrelation(
        pair=name,
        x=x.value,
        y=y.value,
        coefficient=coefficient,
        sample_size=sample_size,
        p_value=float(p)
    )


class CorrelationEngine:
    """
    Correlates the fixed attribute pairs across a snapshot of records.

    Holds no state between runs; one instance can serve concurrent
    analyses.
    """

    MIN_RECORDS = MIN_RECORDS
    MIN_PAIR_SAMPLES = MIN_PAIR_SAMPLES

    def __init__(self, insight_generator=None):
        self.insight_generator = insight_generator

    def analyze(self, records: Iterable[DailyRecord]) -> CorrelationResult:
        """
        Compute every pair's coefficient.

        Raises:
            InsufficientDataError: fewer than MIN_RECORDS records
        """
        records = list(records)

        if len(records) < self.MIN_RECORDS:
            raise InsufficientDataError(len(records), self.MIN_RECORDS)

        correlations = tuple(
            correlate(records, x, y, pair=pair.value)
            for pair, x, y in CORRELATION_PAIRS
        )

        result = CorrelationResult(
            correlations=correlations,
            record_count=len(records)
        )

        if self.insight_generator is not None:
            insights = self.insight_generator.generate_insights(result)
            result = CorrelationResult(
                correlations=correlations,
                record_count=len(records),
                insights=tuple(insights)
            )

        logger.info(
            "Correlated %d pairs over %d records, %d insights",
            len(correlations), len(records), len(result.insights)
        )
        return result
