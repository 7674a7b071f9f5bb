"""Test levels, configuration loading and derived gameplay facts."""

import json

import pytest

from islandhop.config import BridgeConfig, CarConfig, GameConfig, load_config
from islandhop.course import Axis, Point
from islandhop.level import EXAMPLE_ISLANDS, Level, create_example_course, example_level, load_level


LEVEL_YAML = """
start: [1, 1]
moves: C+4 R5 R3 C2 R4 C3 R-4
islands:
  - [0, 0, 2, 2]
  - [0, 4, 2, 2]
  - [5, 4, 2, 2]
  - [8, 4, 4, 2]
  - [11, 6, 2, 3]
  - [12, 9, 2, 2]
  - [8, 9, 2, 2]
  - [5, 9, 5, 2]
"""


class TestConfig:
    """Game configuration defaults and loading."""

    def test_defaults(self):
        """Defaults describe the standard car and bridge."""
        config = GameConfig()
        assert config.car.half_length == 0.3
        assert config.car.stopping_distance == pytest.approx(0.35)
        assert config.bridge.growth_rate == 2.0
        assert config.bridge.landing_overlap == 0.5

    def test_load_partial(self, tmp_path):
        """Missing sections and keys fall back to defaults."""
        path = tmp_path / "game.yaml"
        path.write_text("car:\n  half_length: 0.5\n")

        config = load_config(path)
        assert config.car.half_length == 0.5
        assert config.car.stopping_margin == 0.05
        assert config.bridge == BridgeConfig()

    def test_load_empty(self, tmp_path):
        """An empty file is the default configuration."""
        path = tmp_path / "game.yaml"
        path.write_text("")
        assert load_config(path) == GameConfig()

    def test_missing_file(self, tmp_path):
        """A missing config file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_rejects_bad_values(self):
        """Growth rate must be positive."""
        with pytest.raises(ValueError):
            BridgeConfig(growth_rate=0)


class TestLoadLevel:
    """Loading levels from YAML files."""

    def test_load_valid(self, tmp_path):
        """A well-formed file loads into the example level."""
        path = tmp_path / "level.yaml"
        path.write_text(LEVEL_YAML)

        level, errors = load_level(path)
        assert errors == []
        assert level.course == create_example_course()
        assert level.validate().valid is True

    def test_load_with_config(self, tmp_path):
        """The given configuration is attached to the level."""
        path = tmp_path / "level.yaml"
        path.write_text(LEVEL_YAML)
        config = GameConfig(car=CarConfig(half_length=0.5))

        level, _ = load_level(path, config)
        assert level.config.car.half_length == 0.5

    def test_load_malformed(self, tmp_path):
        """Parse errors come back instead of a level."""
        path = tmp_path / "level.yaml"
        path.write_text("moves: C4 bogus\nislands: []\n")

        level, errors = load_level(path)
        assert level is None
        assert [e.code for e in errors] == ["INVALID_MOVE", "NO_ISLANDS"]

    def test_missing_file(self, tmp_path):
        """A missing level file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_level(tmp_path / "missing.yaml")


class TestExampleLevel:
    """Derived facts of the example level."""

    def test_shape(self):
        """Eight islands, seven spans, six bridges."""
        level = example_level()
        assert len(level.islands) == len(EXAMPLE_ISLANDS) == 8
        assert len(level.course.spans) == 7
        assert len(level.bridges()) == 6

    def test_validates(self):
        """The example level passes every check."""
        assert example_level().validate().valid is True

    def test_bridge_animation(self):
        """Targets are the gap plus the landing overlap; holds divide by growth rate."""
        animations = example_level().bridge_animation_data()
        assert [a.bridge_index for a in animations] == [0, 1, 2, 3, 4, 5]
        assert [a.target_length for a in animations] == pytest.approx([2.5, 3.5, 1.5, 1.5, 1.5, 2.5])
        assert [a.hold_time for a in animations] == pytest.approx([1.25, 1.75, 0.75, 0.75, 0.75, 1.25])

    def test_bridge_animation_uses_config(self):
        """Faster growth shortens the hold."""
        config = GameConfig(bridge=BridgeConfig(growth_rate=4.0, landing_overlap=0.0))
        first = example_level(config).bridge_animation_data()[0]
        assert first.target_length == pytest.approx(2.0)
        assert first.hold_time == pytest.approx(0.5)

    def test_bridge_positions(self):
        """Bridges hinge on the exit edge of their departure island."""
        positions = example_level().bridge_positions()

        first = positions[0]
        assert first.axis == Axis.COLUMN
        assert first.sign == 1
        assert first.base_pos == Point(1, 2)
        assert first.edge == 2

        last = positions[-1]
        assert last.axis == Axis.ROW
        assert last.sign == -1
        assert last.base_pos == Point(12, 10)
        assert last.edge == 12

    def test_path_segments_use_level_config(self):
        """The level's car configuration drives path decomposition."""
        config = GameConfig(car=CarConfig(half_length=0.5, stopping_margin=0.1))
        segments = example_level(config).path_segments()
        assert segments[0].end_pos == pytest.approx(Point(1, 1.4))

    def test_road_segments(self):
        """Road segments are available per island."""
        level = example_level()
        assert len(level.road_segments(3)) == 3
        assert level.road_segments(7) == []

    def test_level_is_frozen(self):
        """Levels are immutable."""
        level = example_level()
        with pytest.raises(ValueError):
            level.islands = ()


class TestSummary:
    """Serializable level summaries."""

    def test_summary_fields(self):
        """The summary reports the course and validation outcome."""
        summary = example_level().summary()
        assert summary["start"] == [1, 1]
        assert summary["end"] == [9, 10]
        assert summary["spans"] == 7
        assert summary["islands"] == 8
        assert summary["valid"] is True
        assert len(summary["bridge_animation"]) == 6
        assert len(summary["path_segments"]) == 24

    def test_summary_is_json_serializable(self):
        """The summary dumps to JSON without a custom encoder."""
        text = json.dumps(example_level().summary())
        assert json.loads(text)["validation"]["errors"] == []

    def test_invalid_level_summary(self):
        """Invalid levels still summarize, with their errors."""
        level = Level(course=create_example_course().add_move(50, Axis.COLUMN), islands=example_level().islands)
        summary = level.summary()
        assert summary["valid"] is False
        codes = [e["code"] for e in summary["validation"]["errors"]]
        assert "JUNCTION_OFF_ISLAND" in codes
