"""Course geometry for islandhop."""

from .models import (
    Axis,
    JunctionType,
    Point,
    Span,
    Island,
    SpanDetail,
    Bridge,
    BridgeRange,
    PathSegment,
    RoadSegment,
)
from .geometry import contains, is_interior, find_island_at, crossing_edges
from .course import Course, span_end, junction_type, end_location, span_details, bridges
from .path import path_segments
from .roads import road_segments_for_island

__all__ = [
    # Models
    "Axis",
    "JunctionType",
    "Point",
    "Span",
    "Island",
    "SpanDetail",
    "Bridge",
    "BridgeRange",
    "PathSegment",
    "RoadSegment",
    # Geometry
    "contains",
    "is_interior",
    "find_island_at",
    "crossing_edges",
    # Course
    "Course",
    "span_end",
    "junction_type",
    "end_location",
    "span_details",
    "bridges",
    "path_segments",
    "road_segments_for_island",
]
