"""
Scenario generation from indicator and timeframe-conflict state.

Every narrative is an "IF <conditions>, THEN <qualified outcome>" statement
assembled from fixed fragments. Nothing here predicts which scenario will
play out.
"""

from ..logging.config import get_logger
from ..metrics.labels import (
    DISTRIBUTION,
    ELEVATED,
    INCREASING,
    MODERATE,
    NEGATIVE,
    OVERBOUGHT,
    OVERSOLD,
    POSITIVE,
    STRONG,
)
from ..models.analysis import ScenarioBundle, TimeframeConflict
from ..models.indicators import IndicatorSet, Trend

logger = get_logger(__name__)

FALLBACK_TRIGGER = "Significant change in trend direction or momentum"

# Moving-average break and RSI divergence pair for each known trend direction
TREND_TRIGGERS = {
    Trend.UPWARD: (
        "Break below 50-day moving average with expanding volume",
        "RSI divergence forming lower highs while price makes higher highs",
    ),
    Trend.DOWNWARD: (
        "Break above 50-day moving average with expanding volume",
        "RSI divergence forming higher lows while price makes lower lows",
    ),
}
VOLATILITY_SPIKE_TRIGGER = "Volatility spike beyond recent range"
DISTRIBUTION_TRIGGER = "Sustained distribution pattern lasting more than 2 weeks"
CONFLICT_RESOLUTION_TRIGGER = "Weekly timeframe confirms daily direction (conflict resolution)"


def _conditional(condition: str, outcome: str, qualifiers: list[str]) -> str:
    return " ".join([f"IF {condition}, THEN {outcome}."] + qualifiers)


def bullish_scenario(daily: IndicatorSet) -> str:
    qualifiers = []
    if daily.overall_trend is Trend.UPWARD:
        if daily.momentum in (POSITIVE, OVERBOUGHT):
            qualifiers.append("Positive momentum supports continuation.")
        if daily.trend_strength in (STRONG, MODERATE):
            qualifiers.append("Trend structure remains intact.")
        return _conditional(
            "uptrend persists AND volume confirms direction",
            "bullish momentum may continue",
            qualifiers,
        )
    if daily.overall_trend is Trend.DOWNWARD:
        return _conditional(
            "price reclaims short-term moving averages AND volume expands on up moves",
            "a reversal setup may develop",
            qualifiers,
        )
    return _conditional(
        "consolidation resolves to the upside with expanding volume",
        "bullish bias may emerge",
        qualifiers,
    )


def bearish_scenario(daily: IndicatorSet) -> str:
    qualifiers = []
    if daily.overall_trend is Trend.DOWNWARD:
        if daily.momentum in (NEGATIVE, OVERSOLD):
            qualifiers.append("Negative momentum supports continuation.")
        return _conditional(
            "downtrend persists AND selling pressure continues",
            "bearish momentum may extend",
            qualifiers,
        )
    if daily.overall_trend is Trend.UPWARD:
        if daily.volume_behavior == DISTRIBUTION:
            qualifiers.append("Current distribution pattern warrants caution.")
        return _conditional(
            "price breaks below key support AND volume expands on down moves",
            "a reversal setup may develop",
            qualifiers,
        )
    return _conditional(
        "consolidation breaks down with expanding volume",
        "bearish bias may emerge",
        qualifiers,
    )


def neutral_scenario(daily: IndicatorSet, conflict: TimeframeConflict) -> str:
    """First match wins: conflict, then high volatility, then the quiet default."""
    if conflict.exists:
        return _conditional(
            "timeframe conflict persists AND signals remain mixed",
            "range-bound action is more likely",
            [],
        )
    if daily.volatility in (INCREASING, ELEVATED):
        return _conditional(
            "volatility remains elevated AND direction is unclear",
            "choppy conditions may persist",
            [],
        )
    return _conditional(
        "neither bulls nor bears gain control AND volume remains muted",
        "sideways drift continues",
        [],
    )


def invalidation_triggers(daily: IndicatorSet, conflict: TimeframeConflict) -> tuple[str, ...]:
    """Ordered triggers; falls back to a single generic trigger so the list is never empty."""
    triggers = list(TREND_TRIGGERS.get(daily.overall_trend, ()))

    if daily.volatility == INCREASING:
        triggers.append(VOLATILITY_SPIKE_TRIGGER)

    if daily.volume_behavior == DISTRIBUTION:
        triggers.append(DISTRIBUTION_TRIGGER)

    if conflict.exists:
        triggers.append(CONFLICT_RESOLUTION_TRIGGER)

    if not triggers:
        triggers.append(FALLBACK_TRIGGER)

    return tuple(triggers)


def generate_scenarios(
    daily: IndicatorSet,
    weekly: IndicatorSet,
    conflict: TimeframeConflict,
) -> ScenarioBundle:
    """
    Build the scenario bundle for a request.

    Args:
        daily: Daily indicator snapshot (drives every narrative)
        weekly: Weekly indicator snapshot (enters through ``conflict``)
        conflict: Daily-vs-weekly conflict state

    Returns:
        ScenarioBundle with three conditional narratives and a non-empty
        trigger list
    """
    bundle = ScenarioBundle(
        bullish=bullish_scenario(daily),
        bearish=bearish_scenario(daily),
        neutral=neutral_scenario(daily, conflict),
        invalidation_triggers=invalidation_triggers(daily, conflict),
    )

    logger.debug(
        "Generated scenarios",
        daily_trend=daily.overall_trend.value,
        weekly_trend=weekly.overall_trend.value,
        conflict=conflict.exists,
        triggers=len(bundle.invalidation_triggers),
    )
    return bundle
