"""
Scenario engine module.

Conditional bullish, bearish and neutral narratives plus invalidation
triggers, composed from a fixed decision table over indicator labels.
"""

from .generator import generate_scenarios

__all__ = ["generate_scenarios"]
