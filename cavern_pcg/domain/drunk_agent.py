"""Drunk-agent random-walk carving pass.

The agent performs ``walks`` phases of ``steps_per_walk`` steps. Each step
marks the walker cell, may dig a room around it, may turn, then moves one
cell and clamps to the grid. Position carries over between phases and is
returned to the caller; heading and both probabilities restart from the
configuration on every call.

Room and direction probabilities grow by their increments after every
failed roll and are never clamped, so after enough misses they exceed 1.0
and the next roll always succeeds. A successful roll resets them to the
fixed baselines ``ROOM_PROBABILITY_RESET`` / ``DIRECTION_PROBABILITY_RESET``,
not to the configured starting values.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from random import Random
from typing import NamedTuple

from cavern_pcg.config.constants import (
    DIRECTION_PROBABILITY_RESET,
    INITIAL_HEADING,
    MIN_ROOM_SIZE,
    OCCUPIED,
    ROOM_PROBABILITY_RESET,
)
from cavern_pcg.config.types import DrunkAgentConfig
from cavern_pcg.domain.grid import Grid
from cavern_pcg.domain.walker import Heading, WalkerState, random_heading
from cavern_pcg.errors import InvalidRoomSizeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Room:
    """Inclusive, grid-clipped bounds of a dug room."""

    x0: int
    y0: int
    x1: int
    y1: int
    center: tuple[int, int]
    requested_width: int
    requested_height: int

    @property
    def width(self) -> int:
        return self.x1 - self.x0 + 1

    @property
    def height(self) -> int:
        return self.y1 - self.y0 + 1

    @property
    def area(self) -> int:
        return self.width * self.height

    def cells(self):
        for y in range(self.y0, self.y1 + 1):
            for x in range(self.x0, self.x1 + 1):
                yield x, y


class AgentPassResult(NamedTuple):
    grid: Grid
    walker: WalkerState
    rooms: list[Room]


def dig_room(
    grid: Grid, cx: int, cy: int, max_width: int, max_height: int, rng: Random
) -> Room | None:
    """Occupy a random rectangle centered on ``(cx, cy)``, clipped to the grid.

    ``grid`` is modified in place, so pass a working copy. Width and height
    are drawn independently from ``[2, max_width]`` and ``[2, max_height]``;
    the rectangle spans ``cx - w//2 .. cx + w//2`` by ``cy - h//2 .. cy + h//2``.
    Returns the clipped room, or ``None`` when it misses the grid entirely.
    """
    if max_width < MIN_ROOM_SIZE or max_height < MIN_ROOM_SIZE:
        raise InvalidRoomSizeError(
            f"room bounds must be >= {MIN_ROOM_SIZE}, got {max_width}x{max_height}"
        )
    room_w = rng.randint(MIN_ROOM_SIZE, max_width)
    room_h = rng.randint(MIN_ROOM_SIZE, max_height)

    x0 = max(0, cx - room_w // 2)
    x1 = min(grid.width - 1, cx + room_w // 2)
    y0 = max(0, cy - room_h // 2)
    y1 = min(grid.height - 1, cy + room_h // 2)
    if x0 > x1 or y0 > y1:
        return None
    grid.fill_rect(x0, y0, x1, y1, OCCUPIED)
    return Room(
        x0=x0,
        y0=y0,
        x1=x1,
        y1=y1,
        center=(cx, cy),
        requested_width=room_w,
        requested_height=room_h,
    )


def apply_drunk_agent(
    grid: Grid,
    config: DrunkAgentConfig,
    walker: WalkerState,
    rng: Random,
) -> AgentPassResult:
    """Run every walk phase on a copy of ``grid``.

    Returns the carved copy, the walker's final position and the rooms dug,
    in order. A phase ends early if the walker starts it outside the grid;
    in that case the position is returned unchanged.
    """
    working = grid.copy()
    width, height = working.width, working.height
    heading: Heading = INITIAL_HEADING
    p_room = config.room_probability
    p_direction = config.direction_probability
    rooms: list[Room] = []
    room_saturated = direction_saturated = False

    for phase in range(config.walks):
        for _ in range(config.steps_per_walk):
            if not walker.within(width, height):
                logger.debug("walker %s outside grid; ending phase %d", walker, phase)
                break

            working.set(walker.x, walker.y, OCCUPIED)

            if rng.random() < p_room:
                room = dig_room(
                    working,
                    walker.x,
                    walker.y,
                    config.room_max_width,
                    config.room_max_height,
                    rng,
                )
                if room is not None:
                    rooms.append(room)
                p_room = ROOM_PROBABILITY_RESET
                room_saturated = False
            else:
                p_room += config.room_probability_increment
                if p_room > 1.0 and not room_saturated:
                    room_saturated = True
                    logger.debug("room probability accumulated to %.3f", p_room)

            if rng.random() < p_direction:
                heading = random_heading(rng)
                p_direction = DIRECTION_PROBABILITY_RESET
                direction_saturated = False
            else:
                p_direction += config.direction_probability_increment
                if p_direction > 1.0 and not direction_saturated:
                    direction_saturated = True
                    logger.debug("direction probability accumulated to %.3f", p_direction)

            walker = walker.advanced(heading, width, height)

    return AgentPassResult(grid=working, walker=walker, rooms=rooms)
