"""
Multi-timeframe analysis module.

Weekly aggregation of daily bars, per-timeframe directional profiles and
daily-vs-weekly conflict detection.
"""

from .aggregator import aggregate_to_weekly
from .analyzer import TimeframeAnalyzer, analyze_timeframe, detect_conflict

__all__ = ["aggregate_to_weekly", "TimeframeAnalyzer", "analyze_timeframe", "detect_conflict"]
