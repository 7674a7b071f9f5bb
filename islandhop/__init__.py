"""islandhop: course geometry and validation for a bridge-building driving game."""

__version__ = "0.1.0"
