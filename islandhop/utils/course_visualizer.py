import math
from typing import Dict, Sequence, Tuple

from ..course.course import Course, end_location, span_details
from ..course.geometry import coordinate
from ..course.models import Axis, Island, Point


Cell = Tuple[int, int]


def _lattice(point: Point) -> Cell:
    return round(point.row), round(point.col)


def build_map(course: Course, islands: Sequence[Island]) -> Dict[Cell, str]:
    """
    Mark every integer grid point covered by an island or the course.

    Island points carry the island index (last digit). Course points are '#',
    junctions '+', the start 'S' and the end 'E'.
    """
    cells: Dict[Cell, str] = {}

    for index, island in enumerate(islands):
        label = str(index % 10)
        for row in range(math.ceil(island.row), math.floor(island.max_row) + 1):
            for col in range(math.ceil(island.col), math.floor(island.max_col) + 1):
                # Earlier islands win shared boundaries, as in find_island_at
                cells.setdefault((row, col), label)

    details = span_details(course)
    for detail in details:
        start = round(coordinate(detail.start_pos, detail.axis))
        end = round(coordinate(detail.end_pos, detail.axis))
        step = 1 if end >= start else -1
        fixed_row, fixed_col = _lattice(detail.start_pos)

        for value in range(start, end + step, step):
            cell = (value, fixed_col) if detail.axis == Axis.ROW else (fixed_row, value)
            cells[cell] = '#'

    # Junctions after all roads so later spans don't paint over them
    for detail in details:
        cells[_lattice(detail.end_pos)] = '+'

    cells[_lattice(end_location(course))] = 'E'
    cells[_lattice(course.start)] = 'S'

    return cells


def render_map(cells: Dict[Cell, str]) -> str:
    """Render marked points to a string, highest row first (rows increase upward)."""
    if not cells:
        return ""

    min_row = min(pos[0] for pos in cells)
    max_row = max(pos[0] for pos in cells)
    min_col = min(pos[1] for pos in cells)
    max_col = max(pos[1] for pos in cells)

    lines = [
        ''.join(cells.get((row, col), '.') for col in range(min_col, max_col + 1))
        for row in range(max_row, min_row - 1, -1)
    ]

    return '\n'.join(lines)


def visualize(course: Course, islands: Sequence[Island]) -> str:
    """Quick ASCII map of a course over its islands."""
    return render_map(build_map(course, islands))
