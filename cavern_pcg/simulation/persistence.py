"""Parquet and JSON writers for generation run artifacts."""

from __future__ import annotations

import json
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from cavern_pcg.io.schemas import GENERATION_LOG_SCHEMA, GENERATION_LOG_SCHEMA_VERSION


def new_log_columns() -> dict[str, list[int | str | float]]:
    """Empty column buffers matching ``GENERATION_LOG_SCHEMA``."""
    return {name: [] for name in GENERATION_LOG_SCHEMA.names}


def write_generation_log(
    log_columns: dict[str, list[int | str | float]], generation_log_path: Path
) -> Path:
    """Write accumulated iteration rows to Parquet, replacing any previous log."""
    table = pa.Table.from_pydict(log_columns, schema=GENERATION_LOG_SCHEMA)
    generation_log_path.parent.mkdir(parents=True, exist_ok=True)
    pq.write_table(table, generation_log_path)
    return generation_log_path


def write_run_config(payload: dict[str, object], run_config_path: Path) -> Path:
    """Write the run configuration alongside its schema version."""
    record = {"schema_version": GENERATION_LOG_SCHEMA_VERSION, **payload}
    run_config_path.parent.mkdir(parents=True, exist_ok=True)
    run_config_path.write_text(json.dumps(record, ensure_ascii=False, indent=2))
    return run_config_path
