"""Clipping of the course centerline to individual islands."""

from typing import List, Sequence

from .course import Course, end_location, span_details
from .geometry import coordinate, find_island_at, with_coordinate
from .models import Island, RoadSegment, SpanDetail


def _overlaps(detail: SpanDetail, island: Island) -> bool:
    """Whether the span's bounding box touches the island rectangle."""
    low_row = min(detail.start_pos.row, detail.end_pos.row)
    high_row = max(detail.start_pos.row, detail.end_pos.row)
    low_col = min(detail.start_pos.col, detail.end_pos.col)
    high_col = max(detail.start_pos.col, detail.end_pos.col)

    return (
        low_row <= island.max_row and high_row >= island.row
        and low_col <= island.max_col and high_col >= island.col
    )


def road_segments_for_island(
    island_index: int,
    islands: Sequence[Island],
    course: Course,
) -> List[RoadSegment]:
    """
    Get the road segments drawn on one island.

    Each span passing over the island is clipped to the island's extent along
    the span's travel axis. The course's first span is stretched back to the
    outer edge of the start island and its last span forward to the outer edge
    of the end island, so the road visibly begins and ends at platform edges.

    Args:
        island_index: Island index (0-based, list order)
        islands: Island layout
        course: The course

    Returns:
        Clipped centerline segments in span order
    """
    island = islands[island_index]
    details = span_details(course)
    if not details:
        return []

    first_island = find_island_at(course.start, islands)
    last_island = find_island_at(end_location(course), islands)
    last_index = len(details) - 1

    segments: List[RoadSegment] = []
    for detail in details:
        if not _overlaps(detail, island):
            continue

        axis = detail.axis
        low, high = island.low(axis), island.high(axis)
        start = coordinate(detail.start_pos, axis)
        end = coordinate(detail.end_pos, axis)

        if detail.sign > 0:
            start, end = max(start, low), min(end, high)
        else:
            start, end = min(start, high), max(end, low)

        if detail.index == 0 and island_index == first_island:
            start = low if detail.sign > 0 else high
        if detail.index == last_index and island_index == last_island:
            end = high if detail.sign > 0 else low

        segments.append(RoadSegment(
            span_index=detail.index,
            start_pos=with_coordinate(detail.start_pos, axis, start),
            end_pos=with_coordinate(detail.end_pos, axis, end),
            axis=axis,
            sign=detail.sign,
        ))

    return segments
