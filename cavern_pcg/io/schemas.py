"""Parquet schema for the per-iteration generation log.

The log holds run statistics only; grids themselves are not persisted.
"""

from __future__ import annotations

import pyarrow as pa

GENERATION_LOG_SCHEMA_VERSION = 1

GENERATION_LOG_SCHEMA = pa.schema(
    [
        ("run_id", pa.string()),
        ("iteration", pa.int64()),
        ("floor_fraction", pa.float64()),
        ("region_count", pa.int64()),
        ("largest_region", pa.int64()),
        ("rooms_carved", pa.int64()),
        ("walker_x", pa.int64()),
        ("walker_y", pa.int64()),
    ]
)

ITERATION_METRIC_NAMES = [
    "floor_fraction",
    "region_count",
    "largest_region",
    "rooms_carved",
]
"""Metrics plotted or summarised per iteration."""
