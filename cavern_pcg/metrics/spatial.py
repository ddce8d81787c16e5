"""Spatial metrics over occupancy grids: density and 4-connected floor regions."""

from __future__ import annotations

import networkx as nx
import numpy as np

from cavern_pcg.domain.grid import Grid


def floor_fraction(grid: Grid) -> float:
    """Fraction of cells that are occupied, in [0, 1]."""
    return grid.occupied_count() / (grid.width * grid.height)


def floor_graph(grid: Grid) -> nx.Graph:
    """Graph with one node per occupied cell and edges between 4-neighbors."""
    cells = grid.view()
    graph = nx.Graph()
    graph.add_nodes_from(grid.occupied_cells())
    # Horizontal then vertical adjacency, vectorized per axis
    ys, xs = np.nonzero(cells[:, :-1] & cells[:, 1:])
    graph.add_edges_from(
        ((x, y), (x + 1, y)) for x, y in zip(xs.tolist(), ys.tolist(), strict=True)
    )
    ys, xs = np.nonzero(cells[:-1, :] & cells[1:, :])
    graph.add_edges_from(
        ((x, y), (x, y + 1)) for x, y in zip(xs.tolist(), ys.tolist(), strict=True)
    )
    return graph


def floor_regions(grid: Grid) -> list[set[tuple[int, int]]]:
    """Connected floor regions, largest first."""
    components = nx.connected_components(floor_graph(grid))
    return sorted((set(c) for c in components), key=len, reverse=True)


def region_count(grid: Grid) -> int:
    return nx.number_connected_components(floor_graph(grid))


def largest_region_size(grid: Grid) -> int:
    """Cell count of the largest floor region (0 for an empty grid)."""
    regions = floor_regions(grid)
    return len(regions[0]) if regions else 0


def compute_iteration_metrics(grid: Grid) -> dict[str, float | int]:
    """Per-iteration summary used by the generation log."""
    regions = floor_regions(grid)
    return {
        "floor_fraction": floor_fraction(grid),
        "region_count": len(regions),
        "largest_region": len(regions[0]) if regions else 0,
    }
