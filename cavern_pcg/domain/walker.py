"""Drunk-agent walker position and heading helpers."""

from __future__ import annotations

from dataclasses import dataclass
from random import Random

from cavern_pcg.config.constants import HEADINGS

Heading = tuple[int, int]


@dataclass(frozen=True)
class WalkerState:
    """Position of the drunk agent, carried from one agent pass to the next."""

    x: int
    y: int

    def within(self, width: int, height: int) -> bool:
        return 0 <= self.x < width and 0 <= self.y < height

    def advanced(self, heading: Heading, width: int, height: int) -> WalkerState:
        """Move one cell along ``heading`` and clamp into the grid.

        A walker pushing against a wall stays on the border cell.
        """
        dx, dy = heading
        return WalkerState(
            x=max(0, min(width - 1, self.x + dx)),
            y=max(0, min(height - 1, self.y + dy)),
        )

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


def random_heading(rng: Random) -> Heading:
    """Pick one of the four axis-aligned headings uniformly."""
    return HEADINGS[rng.randrange(len(HEADINGS))]
