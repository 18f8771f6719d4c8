"""
Analysis failure classifications.

These exceptions represent a request whose derived summary must not be
handed to the interpreter. They are final for the request; retrying a
deterministic computation over the same series changes nothing.
"""

from typing import Optional, Dict, Any, Sequence


class AnalysisFailureError(Exception):
    """Base class for requests rejected by the pipeline."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class ValidationFailureError(AnalysisFailureError):
    """Too many tracked summary fields remain unresolved after default-filling."""

    def __init__(self, message: str, unknown_count: int = 0, total_fields: int = 0,
                 unknown_percentage: float = 0.0,
                 unknown_fields: Optional[Sequence[str]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.unknown_count = unknown_count
        self.total_fields = total_fields
        self.unknown_percentage = unknown_percentage
        self.unknown_fields = list(unknown_fields or [])

    @property
    def unknown_fraction(self) -> float:
        """Fraction of tracked fields that remained unresolved."""
        if not self.total_fields:
            return 0.0
        return self.unknown_count / self.total_fields
