"""Grid metrics for generation logs."""

from cavern_pcg.metrics.spatial import (
    compute_iteration_metrics,
    floor_fraction,
    floor_graph,
    floor_regions,
    largest_region_size,
    region_count,
)

__all__ = [
    "compute_iteration_metrics",
    "floor_fraction",
    "floor_graph",
    "floor_regions",
    "largest_region_size",
    "region_count",
]
