"""
Pydantic models for the level layer.

Facts the gameplay loop and the renderer read from a level: how long to hold
the grow-bridge control for each gap, and where each bridge is hinged.
"""

from typing import Literal
from pydantic import BaseModel, ConfigDict

from ..course.models import Axis, Point


class BridgeAnimation(BaseModel):
    """Target length and hold time for growing one bridge."""
    model_config = ConfigDict(frozen=True)

    bridge_index: int
    target_length: float
    hold_time: float  # seconds the grow control is held


class BridgePosition(BaseModel):
    """Where a bridge is hinged on its departure island."""
    model_config = ConfigDict(frozen=True)

    bridge_index: int
    axis: Axis
    sign: Literal[1, -1] = 1
    base_pos: Point  # exit edge point on the course centerline
    edge: float  # exit edge coordinate along the axis
