"""Decomposition of a course into drive, bridge and turn segments."""

from typing import Dict, List, Optional, Sequence, Tuple

from ..config import CarConfig
from .course import Course, bridges, span_details
from .geometry import coordinate, crossing_edges, with_coordinate
from .models import Axis, Bridge, Island, JunctionType, PathSegment, Point, SpanDetail


def stop_point(
    start: Point,
    edge: float,
    axis: Axis,
    sign: int,
    stopping_distance: float,
) -> Point:
    """Where the car halts before an island edge, never behind the span start."""
    target = edge - sign * stopping_distance
    if sign * (target - coordinate(start, axis)) < 0:
        target = coordinate(start, axis)
    return with_coordinate(start, axis, target)


def _drive(detail: SpanDetail, start: Point, end: Point) -> PathSegment:
    return PathSegment(
        kind="drive",
        span_index=detail.index,
        start_pos=start,
        end_pos=end,
        axis=detail.axis,
        sign=detail.sign,
    )


def path_segments(
    course: Course,
    islands: Sequence[Island],
    config: Optional[CarConfig] = None,
) -> List[PathSegment]:
    """
    Decompose a course into the ordered segments the car follows.

    A span that owns a bridge becomes three segments: a drive that stops short
    of the exit edge by the car's stopping distance, a zero-length bridge
    placeholder at that stop point, and a drive from the stop point to the
    junction. Any other span is a single drive. A turn segment follows every
    span that ends in a TURN junction.

    Args:
        course: The course to decompose
        islands: Island layout the course runs over
        config: Car configuration; defaults to CarConfig()

    Returns:
        Linear list of segments; each segment starts where the previous ends
    """
    car = config or CarConfig()
    details = span_details(course)
    owned: Dict[int, Tuple[int, Bridge]] = {
        bridge.span_index: (index, bridge)
        for index, bridge in enumerate(bridges(course, islands))
    }

    segments: List[PathSegment] = []
    for i, detail in enumerate(details):
        crossing = owned.get(detail.index)

        if crossing is None:
            segments.append(_drive(detail, detail.start_pos, detail.end_pos))
        else:
            bridge_index, bridge = crossing
            exit_edge, _, _ = crossing_edges(
                detail.axis,
                detail.sign,
                islands[bridge.start_island],
                islands[bridge.end_island],
            )
            halt = stop_point(detail.start_pos, exit_edge, detail.axis, detail.sign, car.stopping_distance)

            segments.append(_drive(detail, detail.start_pos, halt))
            segments.append(PathSegment(
                kind="bridge",
                span_index=detail.index,
                start_pos=halt,
                end_pos=halt,
                axis=detail.axis,
                sign=detail.sign,
                bridge_index=bridge_index,
            ))
            segments.append(_drive(detail, halt, detail.end_pos))

        if detail.junction == JunctionType.TURN:
            segments.append(PathSegment(
                kind="turn",
                span_index=detail.index,
                start_pos=detail.end_pos,
                end_pos=detail.end_pos,
                from_axis=detail.axis,
                to_axis=details[i + 1].axis,
            ))

    return segments
