"""
Error classification system for the analysis pipeline.

Data quality errors describe problems with the input series; analysis
failures describe a request that cannot be handed to the interpreter.
An indeterminate signal is not an error: it is carried as the "Unknown"
label through default-filling and the validation gate.
"""

from .data_quality import (
    DataQualityError,
    TemporalDataError,
    MissingDataError,
    MalformedDataError,
    InsufficientDataError,
)
from .analysis_failures import (
    AnalysisFailureError,
    ValidationFailureError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "TemporalDataError",
    "MissingDataError",
    "MalformedDataError",
    "InsufficientDataError",
    # Analysis Failures
    "AnalysisFailureError",
    "ValidationFailureError",
]
