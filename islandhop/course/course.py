"""Course definition and the per-span geometry derived from it."""

from typing import List, Optional, Sequence, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field

from .models import Axis, Bridge, Island, JunctionType, Point, Span, SpanDetail
from .geometry import find_island_at


class Course(BaseModel):
    """
    The path the car travels: a start point and an ordered list of spans.

    A course is strictly linear. The position after span i is the start
    position of span i + 1; the end of the last span is the course exit.
    """
    model_config = ConfigDict(frozen=True)

    start: Point = Point(1, 1)
    spans: Tuple[Span, ...] = Field(default_factory=tuple)

    @classmethod
    def from_moves(
        cls,
        moves: Sequence[Tuple[float, Union[Axis, str]]],
        start: Point = Point(1, 1),
    ) -> "Course":
        """Build a course from (signed length, axis) pairs."""
        spans = tuple(Span.from_signed(length, Axis(axis)) for length, axis in moves)
        return cls(start=Point(*start), spans=spans)

    def add_move(self, length: float, axis: Union[Axis, str]) -> "Course":
        """Return a new course with one more span appended. No validation here."""
        span = Span.from_signed(length, Axis(axis))
        return self.model_copy(update={"spans": self.spans + (span,)})

    def end_location(self) -> Point:
        return end_location(self)

    def span_details(self) -> List[SpanDetail]:
        return span_details(self)

    def bridges(self, islands: Sequence[Island]) -> List[Bridge]:
        return bridges(self, islands)


def span_end(start: Point, span: Span) -> Point:
    """End position of a span travelled from start."""
    if span.axis == Axis.COLUMN:
        return Point(start.row, start.col + span.signed_length)
    return Point(start.row + span.signed_length, start.col)


def junction_type(current: Span, following: Span) -> JunctionType:
    """STRAIGHT when both spans share an axis, TURN otherwise."""
    if current.axis == following.axis:
        return JunctionType.STRAIGHT
    return JunctionType.TURN


def end_location(course: Course) -> Point:
    """Final position of the course."""
    position = course.start
    for span in course.spans:
        position = span_end(position, span)
    return position


def span_details(course: Course) -> List[SpanDetail]:
    """Start/end positions and junction type of every span."""
    details: List[SpanDetail] = []
    position = course.start
    spans = course.spans

    for i, span in enumerate(spans):
        end = span_end(position, span)

        junction: Optional[JunctionType] = None
        if i < len(spans) - 1:
            junction = junction_type(span, spans[i + 1])

        details.append(SpanDetail(
            index=i,
            start_pos=position,
            end_pos=end,
            length=span.length,
            axis=span.axis,
            sign=span.sign,
            junction=junction,
        ))
        position = end

    return details


def bridges(course: Course, islands: Sequence[Island]) -> List[Bridge]:
    """
    Derive the gap crossings of a course.

    A span owns a bridge when its end point lies on a different island than
    the one the car is currently on. Spans ending off every island produce no
    bridge and leave the current island unchanged (placement validation
    reports them). While the start itself is off every island, the first
    island reached becomes the current island without a bridge.
    """
    result: List[Bridge] = []
    current = find_island_at(course.start, islands)

    for detail in span_details(course):
        landing = find_island_at(detail.end_pos, islands)
        if landing is None:
            continue
        if current is None:
            current = landing
            continue
        if landing != current:
            result.append(Bridge(
                span_index=detail.index,
                start_island=current,
                end_island=landing,
                start_pos=detail.start_pos,
                end_pos=detail.end_pos,
                axis=detail.axis,
                junction=detail.junction,
            ))
            current = landing

    return result
