"""
Gameplay configuration.

These values belong to the game, not to the geometry engine: the engine only
receives them as explicit arguments (for example when decomposing a course
into path segments).
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field


class CarConfig(BaseModel):
    """Car dimensions and movement."""
    length: float = Field(default=0.6, gt=0)
    width: float = Field(default=0.4, gt=0)
    half_length: float = Field(default=0.3, ge=0)  # front bumper distance from center
    speed: float = Field(default=2.0, gt=0)  # units per second
    stopping_margin: float = Field(default=0.05, ge=0)  # gap left before an island edge

    @property
    def stopping_distance(self) -> float:
        """How far short of an island edge the car's center stops."""
        return self.half_length + self.stopping_margin


class BridgeConfig(BaseModel):
    """Bridge growth mechanics."""
    growth_rate: float = Field(default=2.0, gt=0)  # units per second
    landing_overlap: float = Field(default=0.5, ge=0)  # target overlap onto the next island
    base_offset: float = Field(default=0.1, ge=0)  # how far the bridge starts back onto the edge


class GameConfig(BaseModel):
    """Configuration consumed by levels, gameplay and the CLI."""
    car: CarConfig = Field(default_factory=CarConfig)
    bridge: BridgeConfig = Field(default_factory=BridgeConfig)


def load_config(config_path: str | Path) -> GameConfig:
    """Load game configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return GameConfig(**(data or {}))
