"""Built-in example level."""

from typing import List, Optional

from ..config import GameConfig
from ..course.course import Course
from ..course.models import Axis, Island, Point
from .level import Level


# [row, col, width, height], in the order the course visits them
EXAMPLE_ISLANDS: List[List[float]] = [
    [0, 0, 2, 2],
    [0, 4, 2, 2],
    [5, 4, 2, 2],
    [8, 4, 4, 2],
    [11, 6, 2, 3],
    [12, 9, 2, 2],
    [8, 9, 2, 2],
    [5, 9, 5, 2],
]


def create_example_course() -> Course:
    """Create the example course."""
    course = Course(start=Point(1, 1))
    course = course.add_move(4, Axis.COLUMN)   # to (1,5), bridge to island 1, turn
    course = course.add_move(5, Axis.ROW)      # to (6,5), bridge to island 2, straight
    course = course.add_move(3, Axis.ROW)      # to (9,5), bridge to island 3, turn
    course = course.add_move(2, Axis.COLUMN)   # to (9,7), stays on island 3, turn
    course = course.add_move(4, Axis.ROW)      # to (13,7), bridge to island 4, turn
    course = course.add_move(3, Axis.COLUMN)   # to (13,10), bridge to island 5, turn
    course = course.add_move(-4, Axis.ROW)     # to (9,10), bridge back down to island 6, end
    return course


def example_level(config: Optional[GameConfig] = None) -> Level:
    """The example level: eight islands, seven spans, six bridges."""
    return Level(
        course=create_example_course(),
        islands=[Island.from_list(values) for values in EXAMPLE_ISLANDS],
        config=config or GameConfig(),
    )
