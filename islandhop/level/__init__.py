"""Levels: a course, its islands and the game settings they are played with."""

from .models import BridgeAnimation, BridgePosition
from .level import Level, load_level
from .examples import EXAMPLE_ISLANDS, create_example_course, example_level

__all__ = [
    "BridgeAnimation",
    "BridgePosition",
    "Level",
    "load_level",
    "EXAMPLE_ISLANDS",
    "create_example_course",
    "example_level",
]
