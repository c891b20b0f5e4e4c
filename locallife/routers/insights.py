"""
Correlation insight and weather pattern endpoints.
"""

import asyncio

from fastapi import APIRouter, Depends

from ..analysis_service import AnalysisService, get_analysis_service
from ..errors import ErrorKind, LocalLifeException
from ..schemas import (
    CorrelationAnalysisResponse,
    PairCorrelationResponse,
    InsightResponse,
    WeatherPatternResponse,
)

router = APIRouter(prefix="/api/insights", tags=["insights"])


@router.get("/correlations", response_model=CorrelationAnalysisResponse)
async def get_correlations(
    service: AnalysisService = Depends(get_analysis_service)
):
    """
    Correlate weather with activity, screen time and media use.

    Needs at least 10 days of records; returns 422 otherwise.
    """
    outcome = await asyncio.wrap_future(service.submit_correlation_analysis())

    if not outcome.ok:
        if outcome.error.kind == ErrorKind.INSUFFICIENT_DATA:
            raise LocalLifeException.insufficient_data(**outcome.error.details)
        raise LocalLifeException.internal_error(outcome.error.message)

    result = outcome.result
    return CorrelationAnalysisResponse(
        record_count=result.record_count,
        correlations=[
            PairCorrelationResponse.model_validate(c)
            for c in result.correlations
        ],
        insights=[
            InsightResponse(**i.to_dict())
            for i in result.insights
        ]
    )


@router.get("/weather-patterns", response_model=WeatherPatternResponse)
async def get_weather_patterns(
    service: AnalysisService = Depends(get_analysis_service)
):
    """Average activity and steps for each weather condition."""
    outcome = await asyncio.wrap_future(service.submit_weather_patterns())

    if not outcome.ok:
        raise LocalLifeException.internal_error(outcome.error.message)

    return WeatherPatternResponse(**outcome.result.to_dict())
