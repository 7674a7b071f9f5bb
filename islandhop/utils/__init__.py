"""Debug utilities for inspecting levels."""

from .course_visualizer import build_map, render_map, visualize

__all__ = ["build_map", "render_map", "visualize"]
