"""Configuration layer: constants and typed config dataclasses."""

from cavern_pcg.config.constants import (
    AGENT_STEPS_PER_WALK,
    AGENT_WALKS,
    CA_RADIUS,
    CA_THRESHOLD,
    DIRECTION_PROBABILITY,
    DIRECTION_PROBABILITY_INCREMENT,
    DIRECTION_PROBABILITY_RESET,
    EMPTY,
    GRID_HEIGHT,
    GRID_WIDTH,
    HEADINGS,
    INITIAL_HEADING,
    MIN_ROOM_SIZE,
    NUM_ITERATIONS,
    OCCUPIED,
    ROOM_MAX_HEIGHT,
    ROOM_MAX_WIDTH,
    ROOM_PROBABILITY,
    ROOM_PROBABILITY_INCREMENT,
    ROOM_PROBABILITY_RESET,
)
from cavern_pcg.config.types import (
    CellularAutomataConfig,
    DrunkAgentConfig,
    GenerationConfig,
)

__all__ = [
    "AGENT_STEPS_PER_WALK",
    "AGENT_WALKS",
    "CA_RADIUS",
    "CA_THRESHOLD",
    "CellularAutomataConfig",
    "DIRECTION_PROBABILITY",
    "DIRECTION_PROBABILITY_INCREMENT",
    "DIRECTION_PROBABILITY_RESET",
    "DrunkAgentConfig",
    "EMPTY",
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "GenerationConfig",
    "HEADINGS",
    "INITIAL_HEADING",
    "MIN_ROOM_SIZE",
    "NUM_ITERATIONS",
    "OCCUPIED",
    "ROOM_MAX_HEIGHT",
    "ROOM_MAX_WIDTH",
    "ROOM_PROBABILITY",
    "ROOM_PROBABILITY_INCREMENT",
    "ROOM_PROBABILITY_RESET",
]
