"""Value types for courses, islands and the facts derived from them."""

from enum import Enum
from typing import Optional, Literal, NamedTuple, Sequence
from pydantic import BaseModel, ConfigDict, Field


class Axis(str, Enum):
    """Travel axis. ROW increases upward, COLUMN increases rightward."""
    ROW = "row"
    COLUMN = "column"


class JunctionType(str, Enum):
    """Relationship between two consecutive spans."""
    STRAIGHT = "straight"
    TURN = "turn"


SegmentKind = Literal["drive", "bridge", "turn"]


class Point(NamedTuple):
    """A position on the grid plane."""
    row: float
    col: float


class Span(BaseModel):
    """One directional move of the course."""
    model_config = ConfigDict(frozen=True)

    length: float = Field(..., ge=0)
    axis: Axis
    sign: Literal[1, -1] = 1

    @property
    def signed_length(self) -> float:
        return self.length * self.sign

    @classmethod
    def from_signed(cls, value: float, axis: Axis) -> "Span":
        """Build a span from a signed length; negative values travel backwards."""
        return cls(length=abs(value), axis=axis, sign=1 if value >= 0 else -1)


class Island(BaseModel):
    """
    Axis-aligned rectangular platform.

    Islands carry no identity of their own: the index in the ordered island
    list is the island's identity everywhere in the engine.
    """
    model_config = ConfigDict(frozen=True)

    row: float
    col: float
    width: float
    height: float

    @property
    def max_row(self) -> float:
        return self.row + self.height

    @property
    def max_col(self) -> float:
        return self.col + self.width

    def low(self, axis: Axis) -> float:
        """Near edge along the axis."""
        return self.row if axis == Axis.ROW else self.col

    def extent(self, axis: Axis) -> float:
        """Size along the axis."""
        return self.height if axis == Axis.ROW else self.width

    def high(self, axis: Axis) -> float:
        """Far edge along the axis."""
        return self.low(axis) + self.extent(axis)

    @classmethod
    def from_list(cls, values: Sequence[float]) -> "Island":
        """Build from the authoring form [row, col, width, height, ...]."""
        row, col, width, height = values[:4]
        return cls(row=row, col=col, width=width, height=height)


class SpanDetail(BaseModel):
    """Canonical per-span geometry record."""
    model_config = ConfigDict(frozen=True)

    index: int
    start_pos: Point
    end_pos: Point
    length: float
    axis: Axis
    sign: Literal[1, -1] = 1
    junction: Optional[JunctionType] = None  # None for the course terminus


class BridgeRange(BaseModel):
    """Safe bridge length window."""
    model_config = ConfigDict(frozen=True)

    min_safe: float = 0.0
    max_safe: float = 0.0
    needs_bridge: bool = False

    @property
    def tolerance(self) -> float:
        return self.max_safe - self.min_safe


class Bridge(BaseModel):
    """
    A gap crossing derived from a course and an island layout.

    Attributes:
        span_index: Index of the span that crosses the gap
        start_island: Index of the island the span departs from
        end_island: Index of the island the span lands on
        start_pos: Start of the crossing span
        end_pos: End of the crossing span (the junction)
        axis: Travel axis of the crossing span
        junction: Junction type at the end of the span, None at the terminus
    """
    model_config = ConfigDict(frozen=True)

    span_index: int
    start_island: int
    end_island: int
    start_pos: Point
    end_pos: Point
    axis: Axis
    junction: Optional[JunctionType] = None

    def calculate_range(self, islands: Sequence[Island]) -> BridgeRange:
        """Safe length range for this bridge against the given island layout."""
        from ..verifiers.ranges import calculate_bridge_range

        return calculate_bridge_range(
            self.start_pos,
            self.end_pos,
            self.axis,
            islands[self.start_island],
            islands[self.end_island],
            self.junction,
        )


class PathSegment(BaseModel):
    """One step of the drivable path used for movement and animation."""
    model_config = ConfigDict(frozen=True)

    kind: SegmentKind
    span_index: int
    start_pos: Point
    end_pos: Point
    axis: Optional[Axis] = None
    sign: Literal[1, -1] = 1
    bridge_index: Optional[int] = None
    from_axis: Optional[Axis] = None
    to_axis: Optional[Axis] = None

    @property
    def length(self) -> float:
        return abs(self.end_pos.row - self.start_pos.row) + abs(self.end_pos.col - self.start_pos.col)


class RoadSegment(BaseModel):
    """Drawable road centerline clipped to one island."""
    model_config = ConfigDict(frozen=True)

    span_index: int
    start_pos: Point
    end_pos: Point
    axis: Axis
    sign: Literal[1, -1] = 1
