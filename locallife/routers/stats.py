"""
Year statistics and year-over-year comparison endpoints.
"""

import asyncio

from fastapi import APIRouter, Depends, Path, Query

from ..analysis_service import AnalysisService, get_analysis_service
from ..errors import LocalLifeException
from ..results import YearStatistics
from ..schemas import (
    AvailableYearsResponse,
    DayDataResponse,
    YearComparisonResponse,
    YearDaysResponse,
    YearStatisticsResponse,
)
from ..year_aggregator import DAY_NAMES, SEASON_NAMES

router = APIRouter(prefix="/api/stats", tags=["stats"])


def _statistics_response(stats: YearStatistics) -> YearStatisticsResponse:
    return YearStatisticsResponse(
        **stats.to_dict(),
        seasons=dict(zip(SEASON_NAMES, stats.seasonal_activity)),
        days_of_week=dict(zip(DAY_NAMES, stats.day_of_week_activity))
    )


@router.get("/years", response_model=AvailableYearsResponse)
async def get_available_years(
    service: AnalysisService = Depends(get_analysis_service)
):
    """List years with at least one daily record."""
    outcome = await asyncio.wrap_future(service.submit_available_years())

    if not outcome.ok:
        raise LocalLifeException.internal_error(outcome.error.message)

    return AvailableYearsResponse(years=outcome.result)


@router.get("/year/{year}", response_model=YearStatisticsResponse)
async def get_year_statistics(
    year: int = Path(..., ge=1, le=9999, description="Calendar year"),
    service: AnalysisService = Depends(get_analysis_service)
):
    """
    Statistics for a calendar year.

    Days without records count as zero, so averages are per calendar day.
    """
    outcome = await asyncio.wrap_future(service.submit_year_statistics(year))

    if not outcome.ok:
        raise LocalLifeException.internal_error(outcome.error.message)

    return _statistics_response(outcome.result)


@router.get("/year/{year}/days", response_model=YearDaysResponse)
async def get_year_days(
    year: int = Path(..., ge=1, le=9999, description="Calendar year"),
    service: AnalysisService = Depends(get_analysis_service)
):
    """Every date of the year with its day data, zero-filled."""
    outcome = await asyncio.wrap_future(service.submit_year_map(year))

    if not outcome.ok:
        raise LocalLifeException.internal_error(outcome.error.message)

    return YearDaysResponse(
        year=year,
        days={
            key: DayDataResponse.model_validate(day)
            for key, day in outcome.result.items()
        }
    )


@router.get("/compare", response_model=YearComparisonResponse)
async def compare_years(
    year1: int = Query(..., ge=1, le=9999, description="Baseline year"),
    year2: int = Query(..., ge=1, le=9999, description="Year compared to the baseline"),
    service: AnalysisService = Depends(get_analysis_service)
):
    """Compare two years; deltas are year2 minus year1."""
    if year1 == year2:
        raise LocalLifeException.invalid_year_pair(year1, year2)

    outcome = await asyncio.wrap_future(service.submit_year_comparison(year1, year2))

    if not outcome.ok:
        raise LocalLifeException.internal_error(outcome.error.message)

    comparison = outcome.result
    return YearComparisonResponse(
        year1_stats=_statistics_response(comparison.year1_stats),
        year2_stats=_statistics_response(comparison.year2_stats),
        activity_score_change=comparison.activity_score_change,
        steps_change=comparison.steps_change,
        places_change=comparison.places_change,
        screen_time_change=comparison.screen_time_change,
        media_time_change=comparison.media_time_change
    )
