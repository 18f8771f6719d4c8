"""
Data models and contracts module.

Immutable value objects produced by each pipeline stage: indicator
snapshots, timeframe profiles, scenarios, summaries and validation results.
"""
