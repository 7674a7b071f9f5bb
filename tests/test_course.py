"""Test spans, course geometry and bridge derivation."""

import pytest
from pydantic import ValidationError as ModelValidationError

from islandhop.course import (
    Axis,
    Course,
    Island,
    JunctionType,
    Point,
    Span,
    bridges,
    end_location,
    junction_type,
    span_details,
    span_end,
)
from islandhop.level import EXAMPLE_ISLANDS, create_example_course


def make_islands(rects):
    return [Island.from_list(r) for r in rects]


class TestSpan:
    """Span value semantics."""

    def test_default_sign_is_positive(self):
        """A span travels forward unless told otherwise."""
        span = Span(length=4, axis=Axis.COLUMN)
        assert span.sign == 1
        assert span.signed_length == 4

    def test_from_signed_negative(self):
        """Negative signed lengths become a positive magnitude with sign -1."""
        span = Span.from_signed(-3, Axis.ROW)
        assert span.length == 3
        assert span.sign == -1
        assert span.signed_length == -3

    def test_negative_length_rejected(self):
        """Length is a magnitude and cannot be negative."""
        with pytest.raises(ModelValidationError):
            Span(length=-1, axis=Axis.ROW)

    def test_span_is_immutable(self):
        """Spans are frozen values."""
        span = Span(length=2, axis=Axis.ROW)
        with pytest.raises(ModelValidationError):
            span.length = 5

    def test_axis_from_string(self):
        """Axis values may be given by name."""
        assert Span(length=1, axis="column").axis == Axis.COLUMN


class TestCourseBuilding:
    """Building courses move by move."""

    def test_default_start(self):
        """Courses start at (1, 1) by default."""
        assert Course().start == Point(1, 1)

    def test_add_move_returns_new_course(self):
        """Appending a move leaves the original course untouched."""
        course = Course()
        longer = course.add_move(4, Axis.COLUMN)
        assert len(course.spans) == 0
        assert len(longer.spans) == 1
        assert longer.spans[0] == Span(length=4, axis=Axis.COLUMN)

    def test_add_move_does_not_validate(self):
        """Any move is accepted at append time, even off every island."""
        course = Course().add_move(100, "row").add_move(-50, "column")
        assert end_location(course) == Point(101, -49)

    def test_from_moves(self):
        """from_moves builds the same course as chained add_move calls."""
        chained = Course(start=Point(2, 3)).add_move(4, Axis.COLUMN).add_move(-2, Axis.ROW)
        built = Course.from_moves([(4, "column"), (-2, "row")], start=Point(2, 3))
        assert built == chained


class TestSpanEnd:
    """End positions of single spans."""

    def test_column_span(self):
        """Column spans move the column only."""
        assert span_end(Point(1, 1), Span(length=4, axis=Axis.COLUMN)) == Point(1, 5)

    def test_row_span(self):
        """Row spans move the row only."""
        assert span_end(Point(1, 5), Span(length=5, axis=Axis.ROW)) == Point(6, 5)

    def test_negative_span(self):
        """Negative spans travel backwards."""
        assert span_end(Point(13, 10), Span.from_signed(-4, Axis.ROW)) == Point(9, 10)


class TestJunctions:
    """Junction classification between consecutive spans."""

    def test_same_axis_is_straight(self):
        """Two row spans meet straight on."""
        a = Span(length=5, axis=Axis.ROW)
        b = Span(length=3, axis=Axis.ROW)
        assert junction_type(a, b) == JunctionType.STRAIGHT

    def test_reversal_is_straight(self):
        """Reversing along the same axis is not a turn."""
        a = Span(length=5, axis=Axis.ROW)
        b = Span.from_signed(-3, Axis.ROW)
        assert junction_type(a, b) == JunctionType.STRAIGHT

    def test_axis_change_is_turn(self):
        """Changing axis is a turn in either direction."""
        row = Span(length=5, axis=Axis.ROW)
        col = Span(length=3, axis=Axis.COLUMN)
        assert junction_type(row, col) == JunctionType.TURN
        assert junction_type(col, row) == JunctionType.TURN


class TestSpanDetails:
    """Per-span geometry of the example course."""

    def test_positions_chain(self):
        """Each span starts where the previous one ended."""
        details = span_details(create_example_course())
        for previous, current in zip(details, details[1:]):
            assert current.start_pos == previous.end_pos

    def test_example_positions(self):
        """Example course junctions land where the level was designed."""
        ends = [d.end_pos for d in span_details(create_example_course())]
        assert ends == [
            Point(1, 5), Point(6, 5), Point(9, 5), Point(9, 7),
            Point(13, 7), Point(13, 10), Point(9, 10),
        ]

    def test_example_junctions(self):
        """Junctions are classified and the terminus has none."""
        junctions = [d.junction for d in span_details(create_example_course())]
        assert junctions == [
            JunctionType.TURN,
            JunctionType.STRAIGHT,
            JunctionType.TURN,
            JunctionType.TURN,
            JunctionType.TURN,
            JunctionType.TURN,
            None,
        ]

    def test_detail_fields(self):
        """Details carry index, length, axis and sign."""
        last = span_details(create_example_course())[-1]
        assert last.index == 6
        assert last.length == 4
        assert last.axis == Axis.ROW
        assert last.sign == -1

    def test_empty_course(self):
        """An empty course has no details and ends at its start."""
        course = Course(start=Point(3, 3))
        assert span_details(course) == []
        assert end_location(course) == Point(3, 3)

    def test_end_location_matches_last_detail(self):
        """end_location equals the end of the last span."""
        course = create_example_course()
        assert end_location(course) == span_details(course)[-1].end_pos
        assert course.end_location() == Point(9, 10)

    def test_deterministic(self):
        """Deriving details twice gives identical results."""
        course = create_example_course()
        assert span_details(course) == span_details(course)


class TestBridges:
    """Bridge derivation from a course and island layout."""

    def test_example_bridges(self):
        """Every island change in the example course needs a bridge."""
        islands = make_islands(EXAMPLE_ISLANDS)
        result = bridges(create_example_course(), islands)

        assert [b.span_index for b in result] == [0, 1, 2, 4, 5, 6]
        assert [(b.start_island, b.end_island) for b in result] == [
            (0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 6),
        ]

    def test_bridge_fields(self):
        """Bridges record the crossing span's geometry."""
        islands = make_islands(EXAMPLE_ISLANDS)
        first = bridges(create_example_course(), islands)[0]

        assert first.start_pos == Point(1, 1)
        assert first.end_pos == Point(1, 5)
        assert first.axis == Axis.COLUMN
        assert first.junction == JunctionType.TURN

    def test_span_on_same_island_has_no_bridge(self):
        """A span that stays on one island needs no bridge."""
        islands = make_islands([[0, 0, 6, 2]])
        course = Course().add_move(3, Axis.COLUMN)
        assert bridges(course, islands) == []

    def test_end_off_island_skipped(self):
        """A span ending in the gap emits nothing and keeps the current island."""
        islands = make_islands([[0, 0, 2, 2], [0, 8, 2, 2]])
        course = Course().add_move(4, Axis.COLUMN).add_move(4, Axis.COLUMN)

        result = bridges(course, islands)

        assert len(result) == 1
        assert result[0].span_index == 1
        assert result[0].start_island == 0
        assert result[0].end_island == 1

    def test_start_off_island_adopts_first_island(self):
        """With the start off every island, the first island reached needs no bridge."""
        islands = make_islands([[0, 0, 2, 2], [0, 4, 2, 2]])
        course = Course(start=Point(1, -3)).add_move(4, Axis.COLUMN).add_move(4, Axis.COLUMN)

        result = bridges(course, islands)

        assert [(b.span_index, b.start_island, b.end_island) for b in result] == [(1, 0, 1)]

    def test_no_islands(self):
        """Without islands nothing resolves and no bridge exists."""
        assert bridges(create_example_course(), []) == []

    def test_course_method_matches_function(self):
        """Course.bridges delegates to the free function."""
        islands = make_islands(EXAMPLE_ISLANDS)
        course = create_example_course()
        assert course.bridges(islands) == bridges(course, islands)

    def test_deterministic(self):
        """Deriving bridges twice gives identical results."""
        islands = make_islands(EXAMPLE_ISLANDS)
        course = create_example_course()
        assert bridges(course, islands) == bridges(course, islands)
