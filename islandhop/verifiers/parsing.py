"""Level data parsing utilities."""

import re
from numbers import Real
from typing import Any, List, Optional, Tuple

from ..course.course import Course
from ..course.models import Axis, Island, Point
from .cascade import FATAL
from .models import ValidationError


Move = Tuple[float, Axis]

# Compact move notation: axis letter then signed length, e.g. C+4, R5, r-2.5
MOVE_PATTERN = r'^([CR])\s*([+-]?\d+(?:\.\d+)?)$'

AXIS_NAMES = {
    "c": Axis.COLUMN,
    "col": Axis.COLUMN,
    "column": Axis.COLUMN,
    "r": Axis.ROW,
    "row": Axis.ROW,
}


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def parse_move(entry: Any) -> Optional[Move]:
    """Parse one move: a compact string or a [length, axis] pair. None if malformed."""
    if isinstance(entry, str):
        match = re.match(MOVE_PATTERN, entry.strip(), re.IGNORECASE)
        if not match:
            return None
        return float(match.group(2)), AXIS_NAMES[match.group(1).lower()]

    if isinstance(entry, (list, tuple)) and len(entry) == 2:
        length, axis = entry
        if not _is_number(length) or not isinstance(axis, str):
            return None
        axis_value = AXIS_NAMES.get(axis.strip().lower())
        if axis_value is None:
            return None
        return float(length), axis_value

    return None


def parse_moves(value: Any) -> Tuple[List[Move], List[ValidationError]]:
    """
    Parse a move list with error collection.

    Accepts a whitespace separated compact string ("C+4 R5 R-3") or a list of
    compact strings and [length, axis] pairs.

    Returns a tuple of (moves, errors).
    """
    if isinstance(value, str):
        entries: List[Any] = value.split()
    elif isinstance(value, (list, tuple)):
        entries = list(value)
    else:
        entries = []

    errors: List[ValidationError] = []
    moves: List[Move] = []

    if not entries:
        errors.append(ValidationError(
            code="EMPTY_COURSE",
            message="Course has no moves",
            cascade_level=FATAL
        ))
        return moves, errors

    for i, entry in enumerate(entries):
        move = parse_move(entry)
        if move is None:
            errors.append(ValidationError(
                code="INVALID_MOVE",
                message=f"Invalid move format: '{entry}'",
                span_index=i,
                cascade_level=FATAL
            ))
            continue
        moves.append(move)

    return moves, errors


def parse_islands(value: Any) -> Tuple[List[Island], List[ValidationError]]:
    """Parse [row, col, width, height, ...] rectangles with error collection."""
    errors: List[ValidationError] = []
    islands: List[Island] = []

    if not isinstance(value, (list, tuple)) or not value:
        errors.append(ValidationError(
            code="NO_ISLANDS",
            message="Level has no islands",
            cascade_level=FATAL
        ))
        return islands, errors

    for i, entry in enumerate(value):
        if (
            not isinstance(entry, (list, tuple))
            or len(entry) < 4
            or not all(_is_number(v) for v in entry[:4])
        ):
            errors.append(ValidationError(
                code="INVALID_ISLAND",
                message=f"Invalid island format: {entry!r} (expected [row, col, width, height])",
                island_index=i,
                cascade_level=FATAL
            ))
            continue
        islands.append(Island.from_list(entry))

    return islands, errors


def parse_level(data: Any) -> Tuple[Optional[Course], List[Island], List[ValidationError]]:
    """
    Parse level data (as loaded from YAML) into a course and island layout.

    Expected keys: ``start`` (optional, default [1, 1]), ``moves`` and
    ``islands``. Returns a tuple of (course, islands, errors); the course is
    None when any error was found.
    """
    errors: List[ValidationError] = []

    if not isinstance(data, dict):
        errors.append(ValidationError(
            code="INVALID_LEVEL",
            message="Level data must be a mapping with 'moves' and 'islands'",
            cascade_level=FATAL
        ))
        return None, [], errors

    start = data.get("start", [1, 1])
    if (
        not isinstance(start, (list, tuple))
        or len(start) != 2
        or not all(_is_number(v) for v in start)
    ):
        errors.append(ValidationError(
            code="INVALID_START",
            message=f"Invalid start location: {start!r} (expected [row, col])",
            cascade_level=FATAL
        ))
        start = [1, 1]

    moves, move_errors = parse_moves(data.get("moves"))
    errors.extend(move_errors)

    islands, island_errors = parse_islands(data.get("islands"))
    errors.extend(island_errors)

    if errors:
        return None, islands, errors

    return Course.from_moves(moves, start=Point(*start)), islands, errors
