"""
Data-sufficiency gate for structured summaries.

The gate runs after default-filling. A summary whose fraction of unresolved
tracked fields exceeds the configured ratio must not reach the interpreter.
"""

from ..errors import ValidationFailureError
from ..logging.config import get_gate_logger, log_gate_decision
from ..models.indicators import NOT_AVAILABLE, UNKNOWN
from ..models.summary import StructuredSummary, ValidationResult
from ..summary.schema import SUMMARY_SCHEMA, TOTAL_TRACKED_FIELDS, get_field

gate_logger = get_gate_logger(__name__)

GATE_NAME = "data_sufficiency"
DEFAULT_MAX_UNKNOWN_RATIO = 0.30


def is_unresolved(value) -> bool:
    """Unknown, N/A and empty values all count as unresolved."""
    return not value or value in (UNKNOWN, NOT_AVAILABLE)


def unknown_field_paths(summary: StructuredSummary) -> tuple[str, ...]:
    return tuple(field.path for field in SUMMARY_SCHEMA if is_unresolved(get_field(summary, field)))


def count_unknown_fields(summary: StructuredSummary) -> int:
    """Number of tracked fields that are unresolved."""
    return len(unknown_field_paths(summary))


def validate_summary(
    summary: StructuredSummary,
    max_unknown_ratio: float = DEFAULT_MAX_UNKNOWN_RATIO,
    symbol: str = "",
) -> ValidationResult:
    """
    Evaluate the data-sufficiency gate.

    Args:
        summary: Summary after default-filling
        max_unknown_ratio: Largest acceptable unresolved fraction (inclusive)
        symbol: Symbol or context label, used for logging only

    Returns:
        ValidationResult; ``unknown_percentage`` is rounded to one decimal
    """
    unknown = unknown_field_paths(summary)
    unknown_count = len(unknown)
    is_valid = unknown_count / TOTAL_TRACKED_FIELDS <= max_unknown_ratio
    percentage = round(unknown_count / TOTAL_TRACKED_FIELDS * 100, 1)

    result = ValidationResult(
        is_valid=is_valid,
        unknown_count=unknown_count,
        unknown_percentage=percentage,
        total_fields=TOTAL_TRACKED_FIELDS,
        unknown_fields=unknown,
    )

    log_gate_decision(
        gate_logger,
        gate_name=GATE_NAME,
        passed=is_valid,
        symbol=symbol,
        reason=f"{unknown_count}/{TOTAL_TRACKED_FIELDS} unknown fields ({percentage}%)",
        context={"unknown_fields": list(unknown), "max_unknown_ratio": max_unknown_ratio},
    )
    return result


def enforce(result: ValidationResult) -> ValidationResult:
    """
    Reject a failed validation result.

    Raises:
        ValidationFailureError: If the result is not valid
    """
    if not result.is_valid:
        raise ValidationFailureError(
            f"Insufficient data for interpretation: {result.unknown_count} of "
            f"{result.total_fields} fields unknown ({result.unknown_percentage}%)",
            unknown_count=result.unknown_count,
            total_fields=result.total_fields,
            unknown_percentage=result.unknown_percentage,
            unknown_fields=result.unknown_fields,
        )
    return result
