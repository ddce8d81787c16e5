"""Simulation engine: the alternating generation loop and run artifacts."""

from cavern_pcg.simulation.engine import (
    GenerationRun,
    IterationResult,
    build_initial_grid,
    generate_grids,
    iterate_generation,
    resolve_seed,
    run_generation,
)
from cavern_pcg.simulation.persistence import write_generation_log, write_run_config

__all__ = [
    "GenerationRun",
    "IterationResult",
    "build_initial_grid",
    "generate_grids",
    "iterate_generation",
    "resolve_seed",
    "run_generation",
    "write_generation_log",
    "write_run_config",
]
