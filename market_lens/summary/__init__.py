"""
Structured summary module.

The tracked-field schema, summary construction, notes and safe
default-filling.
"""

from .builder import apply_safe_defaults, build_notes, build_summary
from .schema import SUMMARY_SCHEMA, summary_to_dict

__all__ = ["SUMMARY_SCHEMA", "apply_safe_defaults", "build_notes", "build_summary", "summary_to_dict"]
