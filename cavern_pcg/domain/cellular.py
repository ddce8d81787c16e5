"""Cellular-automata smoothing pass.

Each cell looks at the square window of radius ``R`` around it (center
excluded). Neighbors outside the grid are not counted, but the denominator
is always the full window size ``(2R + 1)**2 - 1``. Border cells therefore
need proportionally more occupied neighbors than interior cells to survive.

The output is computed from a frozen view of the input and written into a
fresh array, so the result does not depend on visiting order.
"""

from __future__ import annotations

import numpy as np

from cavern_pcg.config.types import CellularAutomataConfig, validate_radius, validate_threshold
from cavern_pcg.domain.grid import CELL_DTYPE, Grid


def window_size(radius: int) -> int:
    """Neighbor count of a full window, center excluded."""
    return (2 * radius + 1) ** 2 - 1


def neighbor_counts(grid: Grid, radius: int) -> np.ndarray:
    """Return a ``(height, width)`` array of occupied-neighbor sums.

    Implemented as a sum of shifted slices over a zero-padded copy, which
    makes out-of-bounds neighbors contribute nothing.
    """
    validate_radius(radius)
    cells = grid.view().astype(np.int64)
    height, width = cells.shape
    padded = np.pad(cells, radius, mode="constant", constant_values=0)
    counts = np.zeros((height, width), dtype=np.int64)
    for dy in range(-radius, radius + 1):
        for dx in range(-radius, radius + 1):
            if dx == 0 and dy == 0:
                continue
            counts += padded[
                radius + dy : radius + dy + height,
                radius + dx : radius + dx + width,
            ]
    return counts


def apply_cellular_automata(grid: Grid, radius: int, threshold: float) -> Grid:
    """Apply one density-threshold step and return a new grid.

    A cell becomes 1 iff ``count / ((2R+1)**2 - 1) > threshold``; ties go to 0.
    """
    validate_radius(radius)
    validate_threshold(threshold)
    ratios = neighbor_counts(grid, radius) / float(window_size(radius))
    return Grid((ratios > threshold).astype(CELL_DTYPE))


def cellular_pass(grid: Grid, config: CellularAutomataConfig) -> Grid:
    return apply_cellular_automata(grid, config.radius, config.threshold)
