"""Tests for cavern_pcg.domain.cellular module."""

from __future__ import annotations

from random import Random

import numpy as np
import pytest

from cavern_pcg.config.types import CellularAutomataConfig
from cavern_pcg.domain.cellular import (
    apply_cellular_automata,
    cellular_pass,
    neighbor_counts,
    window_size,
)
from cavern_pcg.domain.grid import Grid
from cavern_pcg.errors import InvalidRadiusError, InvalidThresholdError


class TestNeighborCounts:
    def test_window_size(self) -> None:
        assert window_size(1) == 8
        assert window_size(2) == 24

    def test_full_grid_counts_drop_at_borders(self) -> None:
        counts = neighbor_counts(Grid.create(3, 3, fill=1), 1)
        assert counts.tolist() == [[3, 5, 3], [5, 8, 5], [3, 5, 3]]

    def test_center_cell_is_excluded(self) -> None:
        grid = Grid.create(3, 3)
        grid.set(1, 1, 1)
        counts = neighbor_counts(grid, 1)
        assert counts[1, 1] == 0
        assert int(counts.sum()) == 8

    def test_radius_two_reaches_further(self) -> None:
        grid = Grid.create(5, 5)
        grid.set(0, 0, 1)
        counts = neighbor_counts(grid, 2)
        assert counts[2, 2] == 1
        assert counts[3, 3] == 0


class TestApplyCellularAutomata:
    @pytest.mark.parametrize("radius,threshold", [(1, 0.5), (2, 0.3), (1, 0.0), (3, 1.0)])
    def test_preserves_shape_and_binary_values(self, radius: int, threshold: float) -> None:
        grid = Grid.random(12, 7, 0.45, Random(5))
        result = apply_cellular_automata(grid, radius, threshold)
        assert result.shape == grid.shape
        assert set(np.unique(result.view()).tolist()) <= {0, 1}

    def test_is_deterministic_and_leaves_input_untouched(self) -> None:
        grid = Grid.random(10, 10, 0.5, Random(9))
        before = grid.copy()
        first = apply_cellular_automata(grid, 1, 0.5)
        second = apply_cellular_automata(grid, 1, 0.5)
        assert first == second
        assert grid == before
        assert first is not grid

    @pytest.mark.parametrize("threshold", [0.0, 0.5, 1.0])
    def test_empty_grid_stays_empty(self, threshold: float) -> None:
        result = apply_cellular_automata(Grid.create(20, 10), 1, threshold)
        assert result.occupied_count() == 0

    def test_zero_threshold_keeps_full_interior(self) -> None:
        result = apply_cellular_automata(Grid.create(7, 6, fill=1), 1, 0.0)
        for y in range(1, 5):
            for x in range(1, 6):
                assert result.get(x, y) == 1

    def test_reads_from_a_frozen_snapshot(self) -> None:
        grid = Grid.create(5, 5)
        grid.set(2, 2, 1)
        result = apply_cellular_automata(grid, 1, 0.0)
        expected = {(x, y) for x in range(1, 4) for y in range(1, 4)} - {(2, 2)}
        assert set(result.occupied_cells()) == expected

    def test_border_cells_are_eroded(self) -> None:
        result = apply_cellular_automata(Grid.create(5, 5, fill=1), 1, 0.6)
        # corners see 3/8, edges 5/8, interior 8/8
        for corner in [(0, 0), (4, 0), (0, 4), (4, 4)]:
            assert result.get(*corner) == 0
        assert result.get(2, 0) == 1
        assert result.get(2, 2) == 1

    def test_ties_go_to_zero(self) -> None:
        result = apply_cellular_automata(Grid.create(5, 5, fill=1), 1, 0.625)
        assert result.get(2, 0) == 0
        assert result.get(0, 2) == 0
        assert result.get(2, 2) == 1

    def test_single_cell_grid_always_clears(self) -> None:
        result = apply_cellular_automata(Grid.create(1, 1, fill=1), 1, 0.0)
        assert result.occupied_count() == 0

    def test_only_the_center_survives_a_high_threshold(self) -> None:
        result = apply_cellular_automata(Grid.create(3, 3, fill=1), 1, 0.9)
        assert list(result.occupied_cells()) == [(1, 1)]

    def test_full_grid_is_a_fixed_point_below_corner_ratio(self) -> None:
        grid = Grid.create(6, 6, fill=1)
        once = apply_cellular_automata(grid, 1, 0.3)
        assert once == grid
        assert apply_cellular_automata(once, 1, 0.3) == once

    @pytest.mark.parametrize("radius", [0, -2])
    def test_rejects_non_positive_radius(self, radius: int) -> None:
        with pytest.raises(InvalidRadiusError):
            apply_cellular_automata(Grid.create(3, 3), radius, 0.5)

    @pytest.mark.parametrize("threshold", [-0.1, 1.5])
    def test_rejects_threshold_outside_unit_interval(self, threshold: float) -> None:
        with pytest.raises(InvalidThresholdError):
            apply_cellular_automata(Grid.create(3, 3), 1, threshold)


def test_cellular_pass_uses_config() -> None:
    grid = Grid.random(9, 9, 0.5, Random(2))
    config = CellularAutomataConfig(radius=2, threshold=0.4)
    assert cellular_pass(grid, config) == apply_cellular_automata(grid, 2, 0.4)
