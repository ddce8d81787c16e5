"""Centralized defaults and fixed constants for map generation.

Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

GRID_WIDTH = 20
"""Default grid width in cells."""

GRID_HEIGHT = 10
"""Default grid height in cells."""

NUM_ITERATIONS = 5
"""Default number of CA + agent iterations per run."""

CA_RADIUS = 1
"""Default neighborhood radius (1 = 3x3 window)."""

CA_THRESHOLD = 0.5
"""Default occupancy ratio a cell must strictly exceed to become occupied."""

AGENT_WALKS = 5
"""Default number of walk phases per agent pass."""

AGENT_STEPS_PER_WALK = 10
"""Default number of steps per walk phase."""

ROOM_MAX_WIDTH = 5
"""Default upper bound for the random room width draw."""

ROOM_MAX_HEIGHT = 3
"""Default upper bound for the random room height draw."""

MIN_ROOM_SIZE = 2
"""Lower bound (inclusive) for both room dimension draws."""

ROOM_PROBABILITY = 0.1
"""Default starting room-generation probability."""

ROOM_PROBABILITY_INCREMENT = 0.05
"""Default per-step growth of the room probability when no room is dug."""

DIRECTION_PROBABILITY = 0.2
"""Default starting direction-change probability."""

DIRECTION_PROBABILITY_INCREMENT = 0.03
"""Default per-step growth of the direction probability when heading is kept."""

ROOM_PROBABILITY_RESET = 0.1
"""Room probability after a room is dug.

Fixed baseline, independent of the configured starting probability.
"""

DIRECTION_PROBABILITY_RESET = 0.2
"""Direction probability after a heading change.

Fixed baseline, independent of the configured starting probability.
"""

INITIAL_HEADING: tuple[int, int] = (1, 0)
"""Heading of the walker at the start of every agent pass."""

HEADINGS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
"""Axis-aligned headings a direction change picks from uniformly."""

EMPTY = 0
"""Cell value for empty space."""

OCCUPIED = 1
"""Cell value for occupied floor."""
