"""Configuration dataclasses for the generation passes and the driver.

All configs are frozen and validate themselves in ``__post_init__`` so an
invalid record can never reach a pass.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field

from cavern_pcg.config.constants import (
    AGENT_STEPS_PER_WALK,
    AGENT_WALKS,
    CA_RADIUS,
    CA_THRESHOLD,
    DIRECTION_PROBABILITY,
    DIRECTION_PROBABILITY_INCREMENT,
    GRID_HEIGHT,
    GRID_WIDTH,
    MIN_ROOM_SIZE,
    NUM_ITERATIONS,
    ROOM_MAX_HEIGHT,
    ROOM_MAX_WIDTH,
    ROOM_PROBABILITY,
    ROOM_PROBABILITY_INCREMENT,
)
from cavern_pcg.errors import (
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

__all__ = [
    "CellularAutomataConfig",
    "DrunkAgentConfig",
    "GenerationConfig",
    "validate_dimensions",
    "validate_probability",
    "validate_radius",
    "validate_threshold",
]

# ---------------------------------------------------------------------------
# Shared validators
# ---------------------------------------------------------------------------


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_dimensions(width: object, height: object) -> None:
    """Raise :exc:`InvalidDimensionError` unless both sides are positive ints."""
    if not _is_int(width) or not _is_int(height):
        raise InvalidDimensionError(f"grid dimensions must be integers, got {width!r}x{height!r}")
    if width <= 0 or height <= 0:  # type: ignore[operator]
        raise InvalidDimensionError(f"grid dimensions must be >= 1, got {width}x{height}")


def validate_radius(radius: object) -> None:
    """Raise :exc:`InvalidRadiusError` unless ``radius`` is an int >= 1."""
    if not _is_int(radius) or radius < 1:  # type: ignore[operator]
        raise InvalidRadiusError(f"radius must be an integer >= 1, got {radius!r}")


def validate_threshold(threshold: object) -> None:
    """Raise :exc:`InvalidThresholdError` unless ``threshold`` is in [0.0, 1.0]."""
    if isinstance(threshold, bool) or not isinstance(threshold, (int, float)):
        raise InvalidThresholdError(f"threshold must be a number, got {threshold!r}")
    if not 0.0 <= threshold <= 1.0:
        raise InvalidThresholdError(f"threshold must be in [0.0, 1.0], got {threshold}")


def validate_probability(value: object, name: str) -> None:
    """Raise :exc:`InvalidProbabilityError` unless ``value`` is in [0.0, 1.0]."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidProbabilityError(f"{name} must be a number, got {value!r}")
    if not 0.0 <= value <= 1.0:
        raise InvalidProbabilityError(f"{name} must be in [0.0, 1.0], got {value}")


# ---------------------------------------------------------------------------
# Pass configs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CellularAutomataConfig:
    """Neighborhood-density rule parameters."""

    radius: int = CA_RADIUS
    """Half-side of the square neighborhood window (1 = 3x3)."""
    threshold: float = CA_THRESHOLD
    """A cell becomes occupied only when its neighbor ratio is strictly above this."""

    def __post_init__(self) -> None:
        validate_radius(self.radius)
        validate_threshold(self.threshold)


@dataclass(frozen=True)
class DrunkAgentConfig:
    """Random-walk carving parameters.

    Probabilities are validated here only. During a pass they grow by their
    increments without an upper bound, so a value above 1.0 at runtime is
    expected and simply makes the roll succeed.
    """

    walks: int = AGENT_WALKS
    steps_per_walk: int = AGENT_STEPS_PER_WALK
    room_max_width: int = ROOM_MAX_WIDTH
    room_max_height: int = ROOM_MAX_HEIGHT
    room_probability: float = ROOM_PROBABILITY
    room_probability_increment: float = ROOM_PROBABILITY_INCREMENT
    direction_probability: float = DIRECTION_PROBABILITY
    direction_probability_increment: float = DIRECTION_PROBABILITY_INCREMENT

    def __post_init__(self) -> None:
        if not _is_int(self.walks) or self.walks < 0:
            raise InvalidWalkCountError(f"walks must be an integer >= 0, got {self.walks!r}")
        if not _is_int(self.steps_per_walk) or self.steps_per_walk < 0:
            raise InvalidStepCountError(
                f"steps_per_walk must be an integer >= 0, got {self.steps_per_walk!r}"
            )
        for name in ("room_max_width", "room_max_height"):
            value = getattr(self, name)
            if not _is_int(value) or value < MIN_ROOM_SIZE:
                raise InvalidRoomSizeError(
                    f"{name} must be an integer >= {MIN_ROOM_SIZE}, got {value!r}"
                )
        validate_probability(self.room_probability, "room_probability")
        validate_probability(self.room_probability_increment, "room_probability_increment")
        validate_probability(self.direction_probability, "direction_probability")
        validate_probability(
            self.direction_probability_increment, "direction_probability_increment"
        )


# ---------------------------------------------------------------------------
# Driver config
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class GenerationConfig:
    """Everything the program driver needs for one generation run."""

    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT
    iterations: int = NUM_ITERATIONS
    seed: int | None = None
    """Seed for the run's random generator. ``None`` draws fresh OS entropy."""
    initial_density: float = 0.0
    """Probability that a cell of the seed grid starts occupied."""
    walker_start: tuple[int, int] | None = None
    """Initial walker position. ``None`` means the grid center."""
    cellular: CellularAutomataConfig = field(default_factory=CellularAutomataConfig)
    agent: DrunkAgentConfig = field(default_factory=DrunkAgentConfig)

    def __post_init__(self) -> None:
        validate_dimensions(self.width, self.height)
        if not _is_int(self.iterations) or self.iterations < 0:
            raise InvalidIterationCountError(
                f"iterations must be an integer >= 0, got {self.iterations!r}"
            )
        if self.seed is not None and not _is_int(self.seed):
            raise ValueError(f"seed must be an integer or None, got {self.seed!r}")
        validate_probability(self.initial_density, "initial_density")
        if self.walker_start is not None:
            if len(self.walker_start) != 2 or not all(_is_int(v) for v in self.walker_start):
                raise ValueError(
                    f"walker_start must be a pair of integers, got {self.walker_start!r}"
                )
            x, y = self.walker_start
            if not (0 <= x < self.width and 0 <= y < self.height):
                raise OutOfBoundsError(
                    f"walker_start {self.walker_start} outside {self.width}x{self.height} grid"
                )

    @property
    def start_position(self) -> tuple[int, int]:
        """Resolved walker start: explicit value or the grid center."""
        if self.walker_start is not None:
            return self.walker_start
        return (self.width // 2, self.height // 2)

    def to_dict(self) -> dict[str, object]:
        """Plain-dict view suitable for JSON serialization."""
        payload = asdict(self)
        if self.walker_start is not None:
            payload["walker_start"] = list(self.walker_start)
        return payload
