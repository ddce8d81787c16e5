"""Path construction helpers for generation output directories."""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    return out_dir / "logs"


def generation_log_path(out_dir: Path) -> Path:
    """Return path to the per-iteration generation log Parquet file."""
    return logs_dir(out_dir) / "generation_log.parquet"


def run_config_path(out_dir: Path) -> Path:
    """Return path to the JSON record of the run configuration."""
    return out_dir / "run_config.json"
