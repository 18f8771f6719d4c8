#!/usr/bin/env python3
"""
Basic Usage Example - market-lens analysis pipeline

This script demonstrates the basic usage of the analysis engine with a
synthetic daily price history. It shows how to:
- Build a daily series from bar records
- Run the pipeline for a symbol
- Inspect the summary, timeframe profiles and scenarios
- Produce the interpreter messages and parse a response

Run: python examples/basic_usage.py
"""

import random
from datetime import date, timedelta
from typing import Any, Dict, List

from market_lens.data.parsers import parse_bars
from market_lens.engine import MarketAnalysisEngine
from market_lens.errors import DataQualityError, ValidationFailureError
from market_lens.interpretation import build_messages, format_summary_text, parse_interpretation
from market_lens.logging import configure_logging


def create_price_history(days: int, start_price: float = 400.0, drift: float = 0.0008,
                         seed: int = 42) -> List[Dict[str, Any]]:
    """Create a random-walk daily history as bar records."""
    rng = random.Random(seed)
    records = []
    close = start_price
    start = date(2023, 1, 2)

    for i in range(days):
        open_price = close
        close = round(open_price * (1 + drift + rng.gauss(0, 0.01)), 2)
        high = round(max(open_price, close) * (1 + abs(rng.gauss(0, 0.004))), 2)
        low = round(min(open_price, close) * (1 - abs(rng.gauss(0, 0.004))), 2)
        records.append({
            "date": (start + timedelta(days=i)).isoformat(),
            "open": open_price,
            "high": high,
            "low": low,
            "close": close,
            "volume": rng.randint(50_000_000, 90_000_000),
        })

    return records


def print_section(title: str) -> None:
    print(f"\n{'=' * 60}")
    print(title)
    print('=' * 60)


def main():
    """Run the pipeline once and show each output."""
    configure_logging(level="WARNING")

    print("🚀 market-lens - Basic Usage Example")

    series = parse_bars(create_price_history(320))
    print(f"📈 Loaded {len(series)} daily bars ({series[0].date} to {series.last.date})")

    engine = MarketAnalysisEngine()
    try:
        result = engine.analyze(series, "SPY")
    except (DataQualityError, ValidationFailureError) as e:
        print(f"❌ Analysis rejected: {e}")
        return

    print_section("📋 Structured summary")
    print(format_summary_text(result.summary, "SPY"))

    print_section("🕐 Timeframes")
    timeframes = result.summary.timeframes
    for name, profile in (("Daily", timeframes.daily), ("Weekly", timeframes.weekly)):
        print(f"{name:7} bias={profile.directional_bias.value:8} confidence={profile.confidence.value:12} "
              f"maturity={profile.trend_maturity}")
    print(f"Conflict: {timeframes.conflict.exists} - {timeframes.conflict.description}")

    print_section("🔀 Scenarios")
    print(f"Bullish: {result.scenarios.bullish}")
    print(f"Bearish: {result.scenarios.bearish}")
    print(f"Neutral: {result.scenarios.neutral}")
    for trigger in result.scenarios.invalidation_triggers:
        print(f"  • {trigger}")

    print_section("✅ Validation")
    print(f"{result.validation.unknown_count}/{result.validation.total_fields} fields unknown "
          f"({result.validation.unknown_percentage}%)")

    messages = build_messages(result.summary, result.scenarios)
    print(f"\n🤖 Interpreter request: {len(messages)} messages, "
          f"{len(messages[1]['content'])} characters of payload")

    sample_response = "DIRECTIONAL BIAS\nNeutral\n\nCONFIDENCE LEVEL\nLow"
    parsed = parse_interpretation(sample_response)
    print(f"🧾 Parsed sample response: bias={parsed['directionalBias']} "
          f"confidence={parsed['confidenceLevel']} regime={parsed['marketRegime']}")


if __name__ == "__main__":
    main()
