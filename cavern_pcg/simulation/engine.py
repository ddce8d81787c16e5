"""Generation loop: alternate cellular-automata and drunk-agent passes.

Every iteration runs the CA pass on the current grid, feeds its output to
the agent pass, and emits only the grid after both passes. The walker
position returned by one agent pass is the starting position of the next.
"""

from __future__ import annotations

import hashlib
import json
import logging
import random
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import NamedTuple

from cavern_pcg.config.types import CellularAutomataConfig, DrunkAgentConfig, GenerationConfig
from cavern_pcg.domain.cellular import cellular_pass
from cavern_pcg.domain.drunk_agent import Room, apply_drunk_agent
from cavern_pcg.domain.grid import Grid
from cavern_pcg.domain.walker import WalkerState
from cavern_pcg.errors import InvalidIterationCountError, OutOfBoundsError
from cavern_pcg.io.paths import generation_log_path, run_config_path
from cavern_pcg.metrics.spatial import compute_iteration_metrics
from cavern_pcg.simulation.persistence import (
    new_log_columns,
    write_generation_log,
    write_run_config,
)

logger = logging.getLogger(__name__)

_SEED_BOUND = 2**32


class IterationResult(NamedTuple):
    """State after both passes of one iteration (1-based)."""

    iteration: int
    grid: Grid
    walker: WalkerState
    rooms: list[Room]


@dataclass(frozen=True)
class GenerationRun:
    """Outcome of :func:`run_generation`."""

    run_id: str
    seed: int
    config: GenerationConfig
    initial_grid: Grid
    initial_walker: WalkerState
    results: tuple[IterationResult, ...]
    metrics: list[dict[str, float | int]] = field(default_factory=list)
    log_path: Path | None = None

    @property
    def final_grid(self) -> Grid:
        return self.results[-1].grid if self.results else self.initial_grid

    @property
    def final_walker(self) -> WalkerState:
        return self.results[-1].walker if self.results else self.initial_walker


def _deterministic_run_id(config: GenerationConfig, seed: int) -> str:
    """Build reproducible run ID stable across runs for identical config and seed.

    The suffix digests every setting except ``seed``, so runs that differ only
    in pass parameters still get distinct IDs.
    """
    settings = config.to_dict()
    settings.pop("seed")
    digest = hashlib.sha256(json.dumps(settings, sort_keys=True).encode("utf-8")).hexdigest()
    return f"w{config.width}_h{config.height}_s{seed}_{digest[:8]}"


def iterate_generation(
    initial_grid: Grid,
    initial_walker: WalkerState,
    cellular: CellularAutomataConfig,
    agent: DrunkAgentConfig,
    iterations: int,
    rng: random.Random,
) -> Iterator[IterationResult]:
    """Return a lazy, single-use iterator over ``iterations`` results.

    Arguments are validated immediately, before the first item is requested.
    """
    if isinstance(iterations, bool) or not isinstance(iterations, int) or iterations < 0:
        raise InvalidIterationCountError(
            f"iterations must be an integer >= 0, got {iterations!r}"
        )
    if not initial_walker.within(initial_grid.width, initial_grid.height):
        raise OutOfBoundsError(
            f"walker {initial_walker.as_tuple()} outside "
            f"{initial_grid.width}x{initial_grid.height} grid"
        )
    return _iterate(initial_grid, initial_walker, cellular, agent, iterations, rng)


def _iterate(
    grid: Grid,
    walker: WalkerState,
    cellular: CellularAutomataConfig,
    agent: DrunkAgentConfig,
    iterations: int,
    rng: random.Random,
) -> Iterator[IterationResult]:
    for iteration in range(1, iterations + 1):
        smoothed = cellular_pass(grid, cellular)
        grid, walker, rooms = apply_drunk_agent(smoothed, agent, walker, rng)
        # callers get their own copy; the loop keeps reading its private grid
        yield IterationResult(iteration=iteration, grid=grid.copy(), walker=walker, rooms=rooms)


def generate_grids(
    initial_grid: Grid,
    initial_walker: WalkerState,
    cellular: CellularAutomataConfig,
    agent: DrunkAgentConfig,
    iterations: int,
    rng: random.Random,
) -> Iterator[Grid]:
    """Lazy sequence of the grid after each full iteration."""
    results = iterate_generation(initial_grid, initial_walker, cellular, agent, iterations, rng)
    return (result.grid for result in results)


def resolve_seed(seed: int | None) -> int:
    """Return ``seed``, or draw one from OS entropy so the run can be replayed."""
    if seed is not None:
        return seed
    return random.SystemRandom().randrange(_SEED_BOUND)


def build_initial_grid(config: GenerationConfig, rng: random.Random) -> Grid:
    """Seed grid: all empty, or random noise when ``initial_density`` is set."""
    if config.initial_density > 0.0:
        return Grid.random(config.width, config.height, config.initial_density, rng)
    return Grid.create(config.width, config.height, 0)


def run_generation(
    config: GenerationConfig,
    out_dir: Path | None = None,
    on_iteration: Callable[[IterationResult], None] | None = None,
    on_start: Callable[[Grid, WalkerState], None] | None = None,
) -> GenerationRun:
    """Drive a full run from a :class:`GenerationConfig`.

    ``on_start`` receives the seed grid and walker before the first pass;
    ``on_iteration`` is called with each result as soon as it is produced.
    When ``out_dir`` is given, the per-iteration log and the resolved config
    are written under it.
    """
    seed = resolve_seed(config.seed)
    rng = random.Random(seed)
    run_id = _deterministic_run_id(config, seed)
    initial_grid = build_initial_grid(config, rng)
    initial_walker = WalkerState(*config.start_position)
    logger.info(
        "run %s: %d iterations on %dx%d grid, walker at %s",
        run_id,
        config.iterations,
        config.width,
        config.height,
        initial_walker.as_tuple(),
    )
    if on_start is not None:
        on_start(initial_grid, initial_walker)

    results: list[IterationResult] = []
    metrics: list[dict[str, float | int]] = []
    log_columns = new_log_columns()
    for result in iterate_generation(
        initial_grid,
        initial_walker,
        config.cellular,
        config.agent,
        config.iterations,
        rng,
    ):
        row: dict[str, float | int] = {
            **compute_iteration_metrics(result.grid),
            "rooms_carved": len(result.rooms),
            "walker_x": result.walker.x,
            "walker_y": result.walker.y,
        }
        logger.debug("run %s iteration %d: %s", run_id, result.iteration, row)
        log_columns["run_id"].append(run_id)
        log_columns["iteration"].append(result.iteration)
        for key, value in row.items():
            log_columns[key].append(value)
        results.append(result)
        metrics.append(row)
        if on_iteration is not None:
            on_iteration(result)

    log_path: Path | None = None
    if out_dir is not None:
        out_dir = Path(out_dir)
        log_path = write_generation_log(log_columns, generation_log_path(out_dir))
        write_run_config(
            {"run_id": run_id, "resolved_seed": seed, **config.to_dict()},
            run_config_path(out_dir),
        )
        logger.info("run %s: wrote %s", run_id, log_path)

    run = GenerationRun(
        run_id=run_id,
        seed=seed,
        config=config,
        initial_grid=initial_grid,
        initial_walker=initial_walker,
        results=tuple(results),
        metrics=metrics,
        log_path=log_path,
    )
    logger.info(
        "run %s finished: %d occupied cells, walker at %s",
        run_id,
        run.final_grid.occupied_count(),
        run.final_walker.as_tuple(),
    )
    return run
