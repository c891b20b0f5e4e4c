"""
LocalLife Analysis Service

Entry points for every analysis. Each run takes one snapshot of the
injected data source, computes on a worker thread and resolves a future
with a success-or-failure outcome.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from .config import settings
from .correlation_engine import CorrelationEngine
from .data_source import DataSource, DatabaseDataSource
from .database import SessionLocal
from .errors import ErrorKind, LocalLifeError
from .insight_generator import InsightGenerator
from .records import DailyRecord
from .results import (
    CorrelationResult,
    DayData,
    WeatherPatternResult,
    YearComparisonResult,
    YearStatistics,
)
from .weather_patterns import WeatherPatternAnalyzer
from .year_aggregator import YearAggregator, YearComparator

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class AnalysisFailure:
    """Why an analysis run produced no result."""
    message: str
    kind: ErrorKind
    details: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class AnalysisOutcome(Generic[T]):
    """Either a result or a failure, never both."""
    result: Optional[T] = None
    error: Optional[AnalysisFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, result: T) -> "AnalysisOutcome[T]":
        return cls(result=result)

    @classmethod
    def failure(
        cls,
        message: str,
        kind: ErrorKind,
        details: Optional[Dict[str, Any]] = None
    ) -> "AnalysisOutcome[T]":
        return cls(error=AnalysisFailure(message=message, kind=kind, details=details or {}))

    def to_dict(self) -> Dict[str, Any]:
        if self.ok:
            return {'ok': True, 'result': self.result.to_dict()}
        return {
            'ok': False,
            'error': {
                'message': self.error.message,
                'kind': self.error.kind.value,
                'details': dict(self.error.details)
            }
        }


class AnalysisService:
    """
    Runs analyses against a data source.

    Usage:
        with AnalysisService(InMemoryDataSource(records)) as service:
            outcome = service.submit_year_statistics(2024).result()
    """

    def __init__(
        self,
        data_source: DataSource,
        max_workers: Optional[int] = None,
        correlation_engine: Optional[CorrelationEngine] = None,
        weather_analyzer: Optional[WeatherPatternAnalyzer] = None,
        year_aggregator: Optional[YearAggregator] = None
    ):
        self.data_source = data_source
        self.correlation_engine = correlation_engine or CorrelationEngine(InsightGenerator())
        self.weather_analyzer = weather_analyzer or WeatherPatternAnalyzer()
        self.year_aggregator = year_aggregator or YearAggregator()
        self.year_comparator = YearComparator(self.year_aggregator)
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers or settings.analysis_max_workers,
            thread_name_prefix="locallife-analysis"
        )

    def __enter__(self) -> "AnalysisService":
        return self

    def __exit__(self, *exc_info) -> None:
        self.shutdown()

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    # === Synchronous runs ===

    def run_correlation_analysis(self) -> AnalysisOutcome[CorrelationResult]:
        return self._run(
            "Correlation analysis",
            lambda: self.correlation_engine.analyze(self._snapshot())
        )

    def run_weather_patterns(self) -> AnalysisOutcome[WeatherPatternResult]:
        return self._run(
            "Weather pattern analysis",
            lambda: self.weather_analyzer.analyze(self._snapshot())
        )

    def run_year_statistics(self, year: int) -> AnalysisOutcome[YearStatistics]:
        return self._run(
            f"Year {year} aggregation",
            lambda: self.year_aggregator.aggregate(self._snapshot(), year)
        )

    def run_year_comparison(self, year1: int, year2: int) -> AnalysisOutcome[YearComparisonResult]:
        return self._run(
            f"Year comparison {year1}/{year2}",
            lambda: self.year_comparator.compare(self._snapshot(), year1, year2)
        )

    def run_available_years(self) -> AnalysisOutcome[List[int]]:
        return self._run(
            "Available years lookup",
            lambda: self.year_aggregator.available_years(self._snapshot())
        )

    def run_year_map(self, year: int) -> AnalysisOutcome[Dict[str, DayData]]:
        return self._run(
            f"Year {year} map",
            lambda: self.year_aggregator.build_year_map(self._snapshot(), year)
        )

    # === Asynchronous runs ===

    def submit_correlation_analysis(self) -> "Future[AnalysisOutcome[CorrelationResult]]":
        return self._executor.submit(self.run_correlation_analysis)

    def submit_weather_patterns(self) -> "Future[AnalysisOutcome[WeatherPatternResult]]":
        return self._executor.submit(self.run_weather_patterns)

    def submit_year_statistics(self, year: int) -> "Future[AnalysisOutcome[YearStatistics]]":
        return self._executor.submit(self.run_year_statistics, year)

    def submit_year_comparison(
        self,
        year1: int,
        year2: int
    ) -> "Future[AnalysisOutcome[YearComparisonResult]]":
        return self._executor.submit(self.run_year_comparison, year1, year2)

    def submit_available_years(self) -> "Future[AnalysisOutcome[List[int]]]":
        return self._executor.submit(self.run_available_years)

    def submit_year_map(self, year: int) -> "Future[AnalysisOutcome[Dict[str, DayData]]]":
        return self._executor.submit(self.run_year_map, year)

    # === Helpers ===

    def _snapshot(self) -> List[DailyRecord]:
        return list(self.data_source.fetch_all())

    def _run(self, name: str, compute: Callable[[], T]) -> AnalysisOutcome[T]:
        try:
            return AnalysisOutcome.success(compute())
        except LocalLifeError as e:
            logger.info("%s failed: %s", name, e.message)
            return AnalysisOutcome.failure(e.message, e.kind, e.details)
        except Exception as e:
            logger.exception("Error during %s", name)
            return AnalysisOutcome.failure(f"{name} failed: {e}", ErrorKind.INTERNAL)


# Service instance used by the API
_service: Optional[AnalysisService] = None


def get_analysis_service() -> AnalysisService:
    """Get or create the database-backed analysis service."""
    global _service
    if _service is None:
        _service = AnalysisService(DatabaseDataSource(SessionLocal))
    return _service


def shutdown_analysis_service() -> None:
    """Stop the API service's worker threads, if it was started."""
    global _service
    if _service is not None:
        _service.shutdown()
        _service = None
