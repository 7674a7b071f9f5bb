from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field

from ..config import GameConfig
from ..course.course import Course
from ..course.geometry import crossing_edges, travel_sign, with_coordinate
from ..course.models import Bridge, BridgeRange, Island, PathSegment, RoadSegment, SpanDetail
from ..course.path import path_segments
from ..course.roads import road_segments_for_island
from ..verifiers.models import ValidationError, ValidationResult
from ..verifiers.parsing import parse_level
from ..verifiers.verify import validate
from .models import BridgeAnimation, BridgePosition


class Level(BaseModel):
    """
    A complete playable configuration: course, islands and game settings.

    Every query recomputes from the frozen course and island list, so a level
    can be shared between the renderer and the gameplay loop freely.

    Attributes:
        course: The course the car drives
        islands: Island layout, in course order
        config: Gameplay configuration passed to path decomposition
    """

    model_config = ConfigDict(frozen=True)

    course: Course
    islands: Tuple[Island, ...] = Field(default_factory=tuple)
    config: GameConfig = Field(default_factory=GameConfig)

    def span_details(self) -> List[SpanDetail]:
        return self.course.span_details()

    def bridges(self) -> List[Bridge]:
        """Get all bridges in this level."""
        return self.course.bridges(self.islands)

    def bridge_ranges(self) -> List[BridgeRange]:
        """Safe length range of each bridge, in bridge order."""
        return [bridge.calculate_range(self.islands) for bridge in self.bridges()]

    def bridge_animation_data(self) -> List[BridgeAnimation]:
        """
        Bridge growth targets for the gameplay loop.

        Each bridge's target length is the gap plus the configured landing
        overlap, so the deck rests slightly on the next island. The hold time
        is that length divided by the growth rate.
        """
        settings = self.config.bridge
        animations = []

        for index, span_range in enumerate(self.bridge_ranges()):
            target_length = span_range.min_safe + settings.landing_overlap
            animations.append(BridgeAnimation(
                bridge_index=index,
                target_length=target_length,
                hold_time=target_length / settings.growth_rate,
            ))

        return animations

    def bridge_positions(self) -> List[BridgePosition]:
        """Hinge point of each bridge on its departure island's exit edge."""
        positions = []

        for index, bridge in enumerate(self.bridges()):
            sign = travel_sign(bridge.start_pos, bridge.end_pos, bridge.axis)
            exit_edge, _, _ = crossing_edges(
                bridge.axis,
                sign,
                self.islands[bridge.start_island],
                self.islands[bridge.end_island],
            )
            positions.append(BridgePosition(
                bridge_index=index,
                axis=bridge.axis,
                sign=sign,
                base_pos=with_coordinate(bridge.start_pos, bridge.axis, exit_edge),
                edge=exit_edge,
            ))

        return positions

    def path_segments(self) -> List[PathSegment]:
        return path_segments(self.course, self.islands, self.config.car)

    def road_segments(self, island_index: int) -> List[RoadSegment]:
        return road_segments_for_island(island_index, self.islands, self.course)

    def validate(self) -> ValidationResult:
        """Validate this level configuration."""
        return validate(self.course, self.islands)

    def summary(self) -> Dict[str, Any]:
        """
        Get the derived facts of this level as a dictionary.

        Useful for serialization and logging.
        """
        result = self.validate()
        return {
            "start": list(self.course.start),
            "end": list(self.course.end_location()),
            "spans": len(self.course.spans),
            "islands": len(self.islands),
            "valid": result.valid,
            "validation": result.model_dump(mode="json"),
            "bridge_animation": [a.model_dump(mode="json") for a in self.bridge_animation_data()],
            "bridge_positions": [p.model_dump(mode="json") for p in self.bridge_positions()],
            "path_segments": [s.model_dump(mode="json") for s in self.path_segments()],
        }


def load_level(
    level_path: str | Path,
    config: Optional[GameConfig] = None
) -> Tuple[Optional[Level], List[ValidationError]]:
    """
    Load a level from a YAML file.

    Returns a tuple of (level, errors); the level is None when the file could
    not be parsed into a course and island layout.

    Raises:
        FileNotFoundError: If the level file does not exist
    """
    path = Path(level_path)

    if not path.exists():
        raise FileNotFoundError(f"Level file not found: {level_path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    course, islands, errors = parse_level(data)
    if course is None:
        return None, errors

    return Level(course=course, islands=islands, config=config or GameConfig()), errors
