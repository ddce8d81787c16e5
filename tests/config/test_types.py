"""Tests for cavern_pcg.config.types validation."""

from __future__ import annotations

import dataclasses
import json

import pytest

from cavern_pcg.config.constants import (
    AGENT_WALKS,
    CA_RADIUS,
    CA_THRESHOLD,
    GRID_HEIGHT,
    GRID_WIDTH,
)
from cavern_pcg.config.types import CellularAutomataConfig, DrunkAgentConfig, GenerationConfig
from cavern_pcg.errors import (
    GenerationError,
    InvalidDimensionError,
    InvalidIterationCountError,
    InvalidProbabilityError,
    InvalidRadiusError,
    InvalidRoomSizeError,
    InvalidStepCountError,
    InvalidThresholdError,
    InvalidWalkCountError,
    OutOfBoundsError,
)


class TestCellularAutomataConfig:
    def test_defaults(self) -> None:
        config = CellularAutomataConfig()
        assert config.radius == CA_RADIUS
        assert config.threshold == CA_THRESHOLD

    @pytest.mark.parametrize("radius", [0, -1, True, 1.5])
    def test_rejects_invalid_radius(self, radius: object) -> None:
        with pytest.raises(InvalidRadiusError):
            CellularAutomataConfig(radius=radius)  # type: ignore[arg-type]

    @pytest.mark.parametrize("threshold", [-0.01, 1.01, "0.5"])
    def test_rejects_invalid_threshold(self, threshold: object) -> None:
        with pytest.raises(InvalidThresholdError):
            CellularAutomataConfig(threshold=threshold)  # type: ignore[arg-type]

    @pytest.mark.parametrize("threshold", [0.0, 1.0, 0, 1])
    def test_accepts_threshold_bounds(self, threshold: float) -> None:
        assert CellularAutomataConfig(threshold=threshold).threshold == threshold

    def test_is_frozen(self) -> None:
        config = CellularAutomataConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.radius = 2  # type: ignore[misc]


class TestDrunkAgentConfig:
    def test_defaults(self) -> None:
        assert DrunkAgentConfig().walks == AGENT_WALKS

    def test_zero_counts_are_valid(self) -> None:
        config = DrunkAgentConfig(walks=0, steps_per_walk=0)
        assert config.walks == 0
        assert config.steps_per_walk == 0

    def test_rejects_negative_walks(self) -> None:
        with pytest.raises(InvalidWalkCountError):
            DrunkAgentConfig(walks=-1)

    def test_rejects_negative_steps(self) -> None:
        with pytest.raises(InvalidStepCountError):
            DrunkAgentConfig(steps_per_walk=-1)

    @pytest.mark.parametrize("field_name", ["room_max_width", "room_max_height"])
    def test_rejects_rooms_below_minimum(self, field_name: str) -> None:
        with pytest.raises(InvalidRoomSizeError):
            DrunkAgentConfig(**{field_name: 1})

    @pytest.mark.parametrize(
        "field_name",
        [
            "room_probability",
            "room_probability_increment",
            "direction_probability",
            "direction_probability_increment",
        ],
    )
    @pytest.mark.parametrize("value", [-0.1, 1.5])
    def test_rejects_out_of_range_probabilities(self, field_name: str, value: float) -> None:
        with pytest.raises(InvalidProbabilityError, match=field_name):
            DrunkAgentConfig(**{field_name: value})

    def test_errors_share_a_base_class(self) -> None:
        with pytest.raises(GenerationError):
            DrunkAgentConfig(walks=-3)
        with pytest.raises(ValueError):
            DrunkAgentConfig(walks=-3)


class TestGenerationConfig:
    def test_defaults_center_the_walker(self) -> None:
        config = GenerationConfig()
        assert (config.width, config.height) == (GRID_WIDTH, GRID_HEIGHT)
        assert config.start_position == (GRID_WIDTH // 2, GRID_HEIGHT // 2)

    def test_explicit_walker_start(self) -> None:
        config = GenerationConfig(width=8, height=4, walker_start=(7, 3))
        assert config.start_position == (7, 3)

    @pytest.mark.parametrize("start", [(8, 0), (0, 4), (-1, 2)])
    def test_rejects_walker_start_outside_grid(self, start: tuple[int, int]) -> None:
        with pytest.raises(OutOfBoundsError):
            GenerationConfig(width=8, height=4, walker_start=start)

    @pytest.mark.parametrize("start", [(1.5, 2), (True, 0), (1, 2, 3), (1,)])
    def test_rejects_non_integer_walker_start(self, start: tuple) -> None:
        with pytest.raises(ValueError, match="pair of integers"):
            GenerationConfig(width=8, height=4, walker_start=start)

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-2, 3)])
    def test_rejects_bad_dimensions(self, width: int, height: int) -> None:
        with pytest.raises(InvalidDimensionError):
            GenerationConfig(width=width, height=height)

    def test_rejects_negative_iterations(self) -> None:
        with pytest.raises(InvalidIterationCountError):
            GenerationConfig(iterations=-1)

    def test_rejects_initial_density_above_one(self) -> None:
        with pytest.raises(InvalidProbabilityError):
            GenerationConfig(initial_density=1.2)

    def test_to_dict_is_json_serializable(self) -> None:
        config = GenerationConfig(seed=3, walker_start=(1, 2))
        payload = json.loads(json.dumps(config.to_dict()))
        assert payload["seed"] == 3
        assert payload["walker_start"] == [1, 2]
        assert payload["cellular"]["radius"] == CA_RADIUS
        assert payload["agent"]["walks"] == AGENT_WALKS
