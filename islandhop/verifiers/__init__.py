"""Course and island validation for islandhop."""

from .verify import (
    validate,
    validate_island_shapes,
    validate_course_against_islands,
    validate_bridges,
)
from .models import ValidationError, ValidationResult
from .ranges import (
    calculate_bridge_range,
    IMMEDIATE_CORNER_DISTANCE,
    IMMEDIATE_CORNER_MARGIN,
    OPEN_LANDING_MARGIN,
)
from .parsing import parse_level, parse_moves, parse_islands
from .cascade import filter_cascading_errors, format_result
from ..course.geometry import find_island_at, is_interior

__all__ = [
    # Main validation
    "validate",
    "validate_island_shapes",
    "validate_course_against_islands",
    "validate_bridges",
    # Models
    "ValidationError",
    "ValidationResult",
    # Bridge ranges
    "calculate_bridge_range",
    "IMMEDIATE_CORNER_DISTANCE",
    "IMMEDIATE_CORNER_MARGIN",
    "OPEN_LANDING_MARGIN",
    # Island lookup
    "find_island_at",
    "is_interior",
    # Parsing
    "parse_level",
    "parse_moves",
    "parse_islands",
    # Reporting
    "filter_cascading_errors",
    "format_result",
]
