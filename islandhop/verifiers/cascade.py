"""Cascading error filtering and report formatting for validation errors."""

from typing import List, Set

from .models import ValidationError, ValidationResult


# Cascade level constants
FATAL = 0  # Level file errors - nothing downstream is meaningful
SHAPE = 1  # Island smaller than the minimum
PLACEMENT = 2  # Start or junction off an island or on its edge
BRIDGE = 3  # Gap, overshoot and tolerance errors


def filter_cascading_errors(
    errors: List[ValidationError],
    max_errors: int = 5
) -> List[ValidationError]:
    """
    Filter out cascading errors based on hierarchy.

    Filtering rules:
    - Level 0 (FATAL) present → Show ONLY Level 0 errors
    - Otherwise → Show everything except bridge errors on spans whose
      junction already has a placement error

    Args:
        errors: List of validation errors to filter
        max_errors: Maximum number of errors to return (default 5)

    Returns:
        Filtered list of errors, limited to max_errors
    """
    if not errors:
        return errors

    fatal = [e for e in errors if e.cascade_level == FATAL]
    if fatal:
        result = fatal
    else:
        misplaced: Set[int] = {
            e.span_index for e in errors
            if e.cascade_level == PLACEMENT and e.span_index is not None
        }
        result = [
            e for e in errors
            if not (e.cascade_level == BRIDGE and e.span_index in misplaced)
        ]

    # Limit to max_errors to keep reports readable; the summary needs one slot
    max_errors = max(max_errors, 1)
    if len(result) > max_errors:
        kept = result[:max_errors - 1]
        num_hidden = len(result) - len(kept)

        kept.append(ValidationError(
            code="ADDITIONAL_ERRORS",
            message=f"... and {num_hidden} more error{'s' if num_hidden > 1 else ''}. Fix the above first.",
            cascade_level=result[0].cascade_level
        ))
        return kept

    return result


def format_result(
    result: ValidationResult,
    label: str = "Validation",
    max_errors: int = 5
) -> List[str]:
    """Human-readable report lines for a validation result."""
    lines = [f"=== {label} ==="]

    if result.valid:
        lines.append("✓ All checks passed!")
        return lines

    lines.append(f"✗ Found {len(result.errors)} error(s):")
    for error in filter_cascading_errors(result.errors, max_errors=max_errors):
        lines.append(f"  - {error}")

    return lines
