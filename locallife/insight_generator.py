"""
LocalLife Insight Generator

Turns correlation coefficients into human-readable insights. Each pair
has its own significance threshold and pair-specific wording for the
two directions.
"""

from dataclasses import dataclass
from typing import List

from .correlation_engine import CorrelationPair
from .results import CorrelationResult, Insight, InsightStrength


@dataclass(frozen=True)
class InsightRule:
    """Threshold and wording for one correlation pair."""
    pair: CorrelationPair
    threshold: float  # coefficient magnitude must exceed this
    title: str
    category: str
    positive: str
    negative: str


# Evaluation order is the output order
INSIGHT_RULES: List[InsightRule] = [
    InsightRule(
        pair=CorrelationPair.TEMPERATURE_ACTIVITY,
        threshold=0.30,
        title="Temperature Impact",
        category="temperature",
        positive="Warmer temperatures correlate with higher activity levels",
        negative="Warmer temperatures correlate with lower activity levels",
    ),
    InsightRule(
        pair=CorrelationPair.UV_ACTIVITY,
        threshold=0.25,
        title="UV Index Effect",
        category="uv",
        positive="Higher UV levels tend to increase your activity",
        negative="Higher UV levels tend to decrease your activity",
    ),
    InsightRule(
        pair=CorrelationPair.AIR_QUALITY_ACTIVITY,
        threshold=0.20,
        title="Air Quality Impact",
        category="air_quality",
        # A higher index means worse air
        positive="Worse air quality correlates with higher activity",
        negative="Better air quality correlates with higher activity",
    ),
    InsightRule(
        pair=CorrelationPair.TEMPERATURE_SCREEN_TIME,
        threshold=0.25,
        title="Weather & Screen Time",
        category="screen_weather",
        positive="You tend to use screens more during warmer weather",
        negative="You tend to use screens less during colder weather",
    ),
    InsightRule(
        pair=CorrelationPair.TEMPERATURE_MEDIA,
        threshold=0.25,
        title="Weather & Media",
        category="media_weather",
        positive="You consume more media during warmer weather",
        negative="You consume less media during colder weather",
    ),
]


class InsightGenerator:
    """Applies the per-pair rules to a correlation result."""

    def __init__(self, rules: List[InsightRule] = None):
        self.rules = rules if rules is not None else INSIGHT_RULES

    def generate_insights(self, result: CorrelationResult) -> List[Insight]:
        """Insights for every pair above its threshold, in rule order."""
        insights = []

        for rule in self.rules:
            correlation = result.get(rule.pair.value)
            coefficient = correlation.coefficient

            if abs(coefficient) <= rule.threshold:
                continue

            text = rule.positive if coefficient > 0 else rule.negative
            insights.append(Insight(
                title=rule.title,
                description=f"{text} (r={coefficient:.2f}, n={correlation.sample_size})",
                category=rule.category,
                correlation=coefficient,
                strength=InsightStrength.from_coefficient(coefficient)
            ))

        return insights
