"""
Validation gate module.

Counts unresolved tracked summary fields and rejects summaries that are
too incomplete to interpret.
"""

from .gate import count_unknown_fields, enforce, validate_summary

__all__ = ["count_unknown_fields", "enforce", "validate_summary"]
