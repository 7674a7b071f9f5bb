"""Point/rectangle tests and axis helpers."""

from typing import Optional, Sequence, Tuple

from .models import Axis, Island, Point


def coordinate(point: Point, axis: Axis) -> float:
    """Component of a point along the axis."""
    return point.row if axis == Axis.ROW else point.col


def with_coordinate(point: Point, axis: Axis, value: float) -> Point:
    """Copy of the point with its component along the axis replaced."""
    if axis == Axis.ROW:
        return Point(value, point.col)
    return Point(point.row, value)


def travel_sign(start: Point, end: Point, axis: Axis) -> int:
    """+1 when end lies at or past start along the axis, -1 otherwise."""
    return 1 if coordinate(end, axis) >= coordinate(start, axis) else -1


def contains(point: Point, island: Island) -> bool:
    """Inclusive containment: points on the boundary belong to the island."""
    return (
        island.row <= point.row <= island.max_row
        and island.col <= point.col <= island.max_col
    )


def is_interior(point: Point, island: Island) -> bool:
    """Strict containment: the point lies off every edge of the island."""
    return (
        island.row < point.row < island.max_row
        and island.col < point.col < island.max_col
    )


def find_island_at(point: Point, islands: Sequence[Island]) -> Optional[int]:
    """
    Index of the island containing the point, or None.

    Islands are scanned in list order and the first match wins, so a point on
    the shared boundary of two touching islands resolves to the earlier one.
    """
    for index, island in enumerate(islands):
        if contains(point, island):
            return index
    return None


def crossing_edges(
    axis: Axis,
    sign: int,
    start_island: Island,
    end_island: Island,
) -> Tuple[float, float, float]:
    """
    Edges crossed when travelling from one island to another.

    Returns:
        (exit_edge, entry_edge, far_edge): the edge of the start island the
        path leaves from, the edge of the end island it reaches first, and
        the opposite edge of the end island.
    """
    if sign > 0:
        return start_island.high(axis), end_island.low(axis), end_island.high(axis)
    return start_island.low(axis), end_island.high(axis), end_island.low(axis)
