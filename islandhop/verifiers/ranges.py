"""Safe bridge length calculation."""

import math
from typing import Optional

from ..course.models import Axis, BridgeRange, Island, JunctionType, Point
from ..course.geometry import coordinate, crossing_edges, travel_sign


# Gameplay tuning. These values are load-bearing for existing levels.
IMMEDIATE_CORNER_DISTANCE = 1.0  # turn this far past the entry edge caps the bridge
IMMEDIATE_CORNER_MARGIN = 1.5  # extra length allowed before an immediate corner
OPEN_LANDING_MARGIN = 10.0  # extra length allowed for straight or distant landings


def is_immediate_corner(
    end_pos: Point,
    axis: Axis,
    entry_edge: float,
    junction: Optional[JunctionType],
) -> bool:
    """True when the span turns exactly one corner distance past the entry edge."""
    if junction != JunctionType.TURN:
        return False
    distance = abs(coordinate(end_pos, axis) - entry_edge)
    return math.isclose(distance, IMMEDIATE_CORNER_DISTANCE, abs_tol=1e-9)


def calculate_bridge_range(
    start_pos: Point,
    end_pos: Point,
    axis: Axis,
    start_island: Island,
    end_island: Island,
    junction: Optional[JunctionType] = None,
) -> BridgeRange:
    """
    Calculate the safe bridge length range for a span.

    The minimum is the exact gap between the exit edge of the start island and
    the entry edge of the end island. The maximum is tight only when the span
    turns immediately after landing; otherwise the player gets a generous
    margin. Either way the bridge never has to reach past the far edge of the
    end island.

    Args:
        start_pos: Start of the span
        end_pos: End of the span (the junction)
        axis: Travel axis of the span
        start_island: Island the span departs from
        end_island: Island the span lands on
        junction: Junction type at end_pos, None at the course terminus

    Returns:
        BridgeRange with min_safe, max_safe and needs_bridge
    """
    if start_island == end_island:
        return BridgeRange(min_safe=0.0, max_safe=0.0, needs_bridge=False)

    sign = travel_sign(start_pos, end_pos, axis)
    exit_edge, entry_edge, far_edge = crossing_edges(axis, sign, start_island, end_island)

    min_safe = abs(entry_edge - exit_edge)

    if is_immediate_corner(end_pos, axis, entry_edge, junction):
        max_safe = min_safe + IMMEDIATE_CORNER_MARGIN
    else:
        max_safe = min_safe + OPEN_LANDING_MARGIN

    # Cap at the landing island's far edge. Without it the open margin
    # overshoots every island under ten units and the example level fails.
    landing_reach = sign * (far_edge - exit_edge)
    max_safe = max(min_safe, min(max_safe, landing_reach))

    return BridgeRange(min_safe=min_safe, max_safe=max_safe, needs_bridge=True)
