"""
Course validation against an island layout.

Validates:
1. Island shapes (every island at least 2x2)
2. Placement (start point and every junction in an island interior)
3. Bridges (gap of at least one unit, longest safe bridge lands on the next
   island, tolerance window of at least one unit)

Every check runs; errors accumulate so one pass reports every defect.
"""

from typing import List, Sequence

from ..course.course import Course, bridges as derive_bridges, span_details
from ..course.geometry import crossing_edges, find_island_at, is_interior, travel_sign
from ..course.models import Island
from .cascade import SHAPE, PLACEMENT, BRIDGE
from .models import ValidationError, ValidationResult


MIN_ISLAND_SIZE = 2
MIN_BRIDGE_GAP = 1.0
MIN_BRIDGE_TOLERANCE = 1.0


def validate_island_shapes(islands: Sequence[Island]) -> List[ValidationError]:
    """Each island must be at least 2x2."""
    errors: List[ValidationError] = []

    for index, island in enumerate(islands):
        if island.width < MIN_ISLAND_SIZE:
            errors.append(ValidationError(
                code="ISLAND_TOO_NARROW",
                message=f"Island width {island.width} is less than minimum {MIN_ISLAND_SIZE} columns",
                island_index=index,
                cascade_level=SHAPE
            ))

        if island.height < MIN_ISLAND_SIZE:
            errors.append(ValidationError(
                code="ISLAND_TOO_SHORT",
                message=f"Island height {island.height} is less than minimum {MIN_ISLAND_SIZE} rows",
                island_index=index,
                cascade_level=SHAPE
            ))

    return errors


def validate_bridges(course: Course, islands: Sequence[Island]) -> List[ValidationError]:
    """Check the safe range of every bridge the course needs."""
    errors: List[ValidationError] = []

    for bridge in derive_bridges(course, islands):
        span_range = bridge.calculate_range(islands)
        axis = bridge.axis
        sign = travel_sign(bridge.start_pos, bridge.end_pos, axis)
        next_island = islands[bridge.end_island]
        exit_edge, _, _ = crossing_edges(axis, sign, islands[bridge.start_island], next_island)

        # Gap must be wide enough to be a real crossing
        if span_range.min_safe < MIN_BRIDGE_GAP:
            errors.append(ValidationError(
                code="GAP_TOO_SMALL",
                message=(
                    f"Gap too small: minimum safe bridge size {span_range.min_safe:.2f} "
                    f"is less than {MIN_BRIDGE_GAP:g} unit"
                ),
                span_index=bridge.span_index,
                cascade_level=BRIDGE
            ))

        # Longest safe bridge must still land on the next island
        max_bridge_end = exit_edge + sign * span_range.max_safe
        low, high = next_island.low(axis), next_island.high(axis)
        if max_bridge_end < low or max_bridge_end > high:
            errors.append(ValidationError(
                code="BRIDGE_OVERSHOOT",
                message=(
                    f"Maximum bridge size {span_range.max_safe:.2f} extends to {axis.value} "
                    f"{max_bridge_end:.2f}, which is outside next island ({axis.value}s {low:g}-{high:g})"
                ),
                span_index=bridge.span_index,
                cascade_level=BRIDGE
            ))

        # Player needs a usable window between too short and too long
        if span_range.tolerance < MIN_BRIDGE_TOLERANCE:
            errors.append(ValidationError(
                code="TOLERANCE_TOO_SMALL",
                message=(
                    f"Bridge tolerance {span_range.tolerance:.2f} is less than {MIN_BRIDGE_TOLERANCE:g} unit "
                    f"(min: {span_range.min_safe:.2f}, max: {span_range.max_safe:.2f})"
                ),
                span_index=bridge.span_index,
                cascade_level=BRIDGE
            ))

    return errors


def validate_course_against_islands(course: Course, islands: Sequence[Island]) -> List[ValidationError]:
    """Validate start placement, every junction, then every bridge."""
    errors: List[ValidationError] = []
    start = course.start
    where = f"({start.row:g},{start.col:g})"

    start_island = find_island_at(start, islands)
    if start_island is None:
        errors.append(ValidationError(
            code="START_OFF_ISLAND",
            message=f"Start location {where} is not on any island",
            cascade_level=PLACEMENT
        ))
    elif not is_interior(start, islands[start_island]):
        errors.append(ValidationError(
            code="START_NOT_INTERIOR",
            message=f"Start location {where} is not in island interior (must be 1+ units from edges)",
            island_index=start_island,
            cascade_level=PLACEMENT
        ))

    for detail in span_details(course):
        junction = detail.end_pos
        where = f"({junction.row:g},{junction.col:g})"
        island_index = find_island_at(junction, islands)

        if island_index is None:
            errors.append(ValidationError(
                code="JUNCTION_OFF_ISLAND",
                message=f"Junction at {where} is not on any island",
                span_index=detail.index,
                cascade_level=PLACEMENT
            ))
        elif not is_interior(junction, islands[island_index]):
            errors.append(ValidationError(
                code="JUNCTION_NOT_INTERIOR",
                message=f"Junction at {where} is not in island interior (must be 1+ units from edges)",
                span_index=detail.index,
                island_index=island_index,
                cascade_level=PLACEMENT
            ))

    errors.extend(validate_bridges(course, islands))

    return errors


def validate(course: Course, islands: Sequence[Island]) -> ValidationResult:
    """
    Main validation function: checks a course against its island layout.

    Returns a ValidationResult with:
    - valid: True if the level passes all checks
    - errors: Every defect found, island shapes first
    - bridges: The bridges the course needs
    - ranges: Safe length range of each bridge
    """
    all_errors: List[ValidationError] = []

    all_errors.extend(validate_island_shapes(islands))
    all_errors.extend(validate_course_against_islands(course, islands))

    level_bridges = derive_bridges(course, islands)

    return ValidationResult(
        valid=len(all_errors) == 0,
        errors=all_errors,
        bridges=level_bridges,
        ranges=[bridge.calculate_range(islands) for bridge in level_bridges],
    )
