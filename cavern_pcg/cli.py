"""CLI entrypoint for cave map generation.

This module owns argument parsing, config-file resolution and console
output. The generation itself lives in:

- ``cavern_pcg.config``            – configuration dataclasses and defaults
- ``cavern_pcg.domain``            – grid, cellular-automata and drunk-agent passes
- ``cavern_pcg.simulation.engine`` – ``run_generation`` loop and run artifacts
"""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import fields
from pathlib import Path

from cavern_pcg.config.constants import (
    AGENT_STEPS_PER_WALK,
    AGENT_WALKS,
    CA_RADIUS,
    CA_THRESHOLD,
    DIRECTION_PROBABILITY,
    DIRECTION_PROBABILITY_INCREMENT,
    GRID_HEIGHT,
    GRID_WIDTH,
    NUM_ITERATIONS,
    ROOM_MAX_HEIGHT,
    ROOM_MAX_WIDTH,
    ROOM_PROBABILITY,
    ROOM_PROBABILITY_INCREMENT,
)
from cavern_pcg.config.types import CellularAutomataConfig, DrunkAgentConfig, GenerationConfig
from cavern_pcg.domain.grid import Grid
from cavern_pcg.domain.walker import WalkerState
from cavern_pcg.simulation.engine import GenerationRun, IterationResult, run_generation
from cavern_pcg.viz.text import BLOCK_SYMBOLS, render_banner
from cavern_pcg.viz.theme import Theme, get_theme

logger = logging.getLogger(__name__)

SYMBOL_SETS: dict[str, dict[int, str] | None] = {
    "digits": None,
    "blocks": BLOCK_SYMBOLS,
}
"""Named cell-symbol mappings accepted by ``--symbols``."""

# ---------------------------------------------------------------------------
# Value coercion (CLI > file > default)
# ---------------------------------------------------------------------------


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_float(raw: object, key: str) -> float:
    """Coerce raw value to float; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a float value")
    if isinstance(raw, (int, float, str)):
        try:
            return float(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be a float value, got {raw!r}") from exc
    raise ValueError(f"{key} must be a float value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_optional_int(
    cli_val: int | None, key: str, file_cfg: dict[str, object]
) -> int | None:
    raw = _get_val(cli_val, key, file_cfg, None)
    return None if raw is None else _coerce_int(raw, key)


def _get_float(
    cli_val: float | None, key: str, file_cfg: dict[str, object], default: float
) -> float:
    return _coerce_float(_get_val(cli_val, key, file_cfg, default), key)


_SECTION_KEYS: dict[str, frozenset[str]] = {
    "cellular": frozenset(f.name for f in fields(CellularAutomataConfig)),
    "agent": frozenset(f.name for f in fields(DrunkAgentConfig)),
}
_FLAT_KEYS = frozenset(
    {"width", "height", "iterations", "seed", "initial_density", "walker_x", "walker_y"}
).union(*_SECTION_KEYS.values())
_RUN_RECORD_KEYS = frozenset({"schema_version", "run_id", "resolved_seed"})


def _flatten_file_config(payload: dict[str, object]) -> dict[str, object]:
    """Normalize a config file to flat keys.

    Accepts the flat layout (``{"radius": 2, "walks": 0}``) and the nested
    layout written to ``run_config.json``, so a recorded run can be replayed.
    A null ``seed`` falls back to the recorded ``resolved_seed``.
    """
    flat: dict[str, object] = {}
    for key, value in payload.items():
        if key in _SECTION_KEYS:
            if not isinstance(value, dict):
                raise ValueError(f"{key} must be a JSON object")
            for sub_key, sub_value in value.items():
                if sub_key not in _SECTION_KEYS[key]:
                    raise ValueError(f"Unknown config key: {key}.{sub_key}")
                flat[sub_key] = sub_value
        elif key == "walker_start":
            if value is None:
                continue
            if not isinstance(value, list) or len(value) != 2:
                raise ValueError("walker_start must be an [x, y] pair")
            flat["walker_x"], flat["walker_y"] = value
        elif key in _FLAT_KEYS:
            flat[key] = value
        elif key not in _RUN_RECORD_KEYS:
            raise ValueError(f"Unknown config key: {key}")
    if flat.get("seed") is None and payload.get("resolved_seed") is not None:
        flat["seed"] = payload["resolved_seed"]
    return flat


def _load_file_config(parser: argparse.ArgumentParser, path: Path | None) -> dict[str, object]:
    if path is None:
        return {}
    try:
        payload = json.loads(Path(path).read_text())
    except FileNotFoundError:
        parser.error(f"Config file not found: {path}")
    except json.JSONDecodeError as exc:
        parser.error(f"Config file is not valid JSON: {path}: {exc}")
    if not isinstance(payload, dict):
        parser.error(f"Config file must contain a JSON object: {path}")
    try:
        return _flatten_file_config(payload)
    except ValueError as exc:
        parser.error(f"Invalid config file {path}: {exc}")


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Generate a cave map with cellular automata and a drunk agent"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    grid_group = parser.add_argument_group("grid")
    grid_group.add_argument("--width", type=int, default=None)
    grid_group.add_argument("--height", type=int, default=None)
    grid_group.add_argument("--iterations", type=int, default=None)
    grid_group.add_argument("--seed", type=int, default=None)
    grid_group.add_argument(
        "--initial-density",
        type=float,
        default=None,
        help="Probability that a seed-grid cell starts occupied (default 0: empty grid)",
    )
    grid_group.add_argument("--walker-x", type=int, default=None)
    grid_group.add_argument("--walker-y", type=int, default=None)

    ca_group = parser.add_argument_group("cellular automata")
    ca_group.add_argument("--radius", type=int, default=None)
    ca_group.add_argument("--threshold", type=float, default=None)

    agent_group = parser.add_argument_group("drunk agent")
    agent_group.add_argument("--walks", type=int, default=None)
    agent_group.add_argument("--steps-per-walk", type=int, default=None)
    agent_group.add_argument("--room-max-width", type=int, default=None)
    agent_group.add_argument("--room-max-height", type=int, default=None)
    agent_group.add_argument("--room-probability", type=float, default=None)
    agent_group.add_argument("--room-probability-increment", type=float, default=None)
    agent_group.add_argument("--direction-probability", type=float, default=None)
    agent_group.add_argument("--direction-probability-increment", type=float, default=None)

    output_group = parser.add_argument_group("output")
    output_group.add_argument(
        "--symbols",
        choices=sorted(SYMBOL_SETS),
        default="digits",
        help="Cell symbols for console output",
    )
    output_group.add_argument(
        "--quiet",
        action="store_true",
        help="Only print the JSON summary",
    )
    output_group.add_argument(
        "--out-dir",
        type=Path,
        default=None,
        help="Directory for the Parquet generation log and run config",
    )
    output_group.add_argument(
        "--filmstrip",
        type=Path,
        default=None,
        help="Write a filmstrip image of the iterations to this path",
    )
    output_group.add_argument(
        "--image",
        type=Path,
        default=None,
        help="Write an image of the final grid to this path",
    )
    output_group.add_argument(
        "--metrics-plot",
        type=Path,
        default=None,
        help="Write a per-iteration metrics plot to this path",
    )
    output_group.add_argument("--theme", type=str, default="default")
    output_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    return parser


def _build_config(args: argparse.Namespace, file_cfg: dict[str, object]) -> GenerationConfig:
    """Resolve every setting and construct the validated run config."""
    walker_x = _get_optional_int(args.walker_x, "walker_x", file_cfg)
    walker_y = _get_optional_int(args.walker_y, "walker_y", file_cfg)
    if (walker_x is None) != (walker_y is None):
        raise ValueError("walker_x and walker_y must be given together")
    walker_start = None if walker_x is None else (walker_x, walker_y)

    cellular = CellularAutomataConfig(
        radius=_get_int(args.radius, "radius", file_cfg, CA_RADIUS),
        threshold=_get_float(args.threshold, "threshold", file_cfg, CA_THRESHOLD),
    )
    agent = DrunkAgentConfig(
        walks=_get_int(args.walks, "walks", file_cfg, AGENT_WALKS),
        steps_per_walk=_get_int(
            args.steps_per_walk, "steps_per_walk", file_cfg, AGENT_STEPS_PER_WALK
        ),
        room_max_width=_get_int(args.room_max_width, "room_max_width", file_cfg, ROOM_MAX_WIDTH),
        room_max_height=_get_int(
            args.room_max_height, "room_max_height", file_cfg, ROOM_MAX_HEIGHT
        ),
        room_probability=_get_float(
            args.room_probability, "room_probability", file_cfg, ROOM_PROBABILITY
        ),
        room_probability_increment=_get_float(
            args.room_probability_increment,
            "room_probability_increment",
            file_cfg,
            ROOM_PROBABILITY_INCREMENT,
        ),
        direction_probability=_get_float(
            args.direction_probability,
            "direction_probability",
            file_cfg,
            DIRECTION_PROBABILITY,
        ),
        direction_probability_increment=_get_float(
            args.direction_probability_increment,
            "direction_probability_increment",
            file_cfg,
            DIRECTION_PROBABILITY_INCREMENT,
        ),
    )
    return GenerationConfig(
        width=_get_int(args.width, "width", file_cfg, GRID_WIDTH),
        height=_get_int(args.height, "height", file_cfg, GRID_HEIGHT),
        iterations=_get_int(args.iterations, "iterations", file_cfg, NUM_ITERATIONS),
        seed=_get_optional_int(args.seed, "seed", file_cfg),
        initial_density=_get_float(args.initial_density, "initial_density", file_cfg, 0.0),
        walker_start=walker_start,
        cellular=cellular,
        agent=agent,
    )


def _summary(run: GenerationRun) -> dict[str, object]:
    final_metrics = run.metrics[-1] if run.metrics else {}
    return {
        "run_id": run.run_id,
        "seed": run.seed,
        "width": run.config.width,
        "height": run.config.height,
        "iterations": len(run.results),
        "occupied_cells": run.final_grid.occupied_count(),
        "walker": list(run.final_walker.as_tuple()),
        "rooms_carved": sum(len(result.rooms) for result in run.results),
        "final_metrics": final_metrics,
        "log_path": str(run.log_path) if run.log_path is not None else None,
    }


def _render_images(args: argparse.Namespace, run: GenerationRun, theme: Theme) -> None:
    import matplotlib

    matplotlib.use("Agg")
    from cavern_pcg.viz.render import (
        render_filmstrip,
        render_grid_image,
        render_metric_timeseries,
    )

    if args.filmstrip is not None:
        grids = [run.initial_grid, *(result.grid for result in run.results)]
        walkers = [run.initial_walker, *(result.walker for result in run.results)]
        labels = ["Seed", *(f"Iteration {result.iteration}" for result in run.results)]
        path = render_filmstrip(grids, args.filmstrip, labels=labels, walkers=walkers, theme=theme)
        logger.info("wrote filmstrip %s", path)
    if args.image is not None:
        title = f"{run.run_id} iteration {len(run.results)}"
        path = render_grid_image(
            run.final_grid, args.image, title=title, walker=run.final_walker, theme=theme
        )
        logger.info("wrote final grid image %s", path)
    if args.metrics_plot is not None:
        if not run.metrics:
            logger.warning("no iterations ran; skipping metrics plot")
        else:
            path = render_metric_timeseries(run.metrics, args.metrics_plot, theme=theme)
            logger.info("wrote metrics plot %s", path)


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for map generation.

    Supports ``--config path/to/config.json`` for reproducible runs. CLI
    arguments override config-file values; config-file values override
    built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    file_cfg = _load_file_config(parser, args.config)
    try:
        config = _build_config(args, file_cfg)
    except ValueError as exc:
        parser.error(str(exc))
    try:
        theme = get_theme(args.theme)
    except ValueError as exc:
        parser.error(str(exc))

    symbols = SYMBOL_SETS[args.symbols]

    def _print_start(grid: Grid, walker: WalkerState) -> None:
        if args.quiet:
            return
        print("--- CELLULAR AUTOMATA AND DRUNK AGENT SIMULATION ---")
        print("\nInitial map state:")
        print(render_banner(grid, symbols))

    def _print_iteration(result: IterationResult) -> None:
        if args.quiet:
            return
        print(f"\n--- Iteration {result.iteration} ---")
        print(render_banner(result.grid, symbols))

    run = run_generation(
        config,
        out_dir=args.out_dir,
        on_iteration=_print_iteration,
        on_start=_print_start,
    )
    if not args.quiet:
        print("\n--- Simulation Finished ---")

    if args.filmstrip or args.image or args.metrics_plot:
        _render_images(args, run, theme)

    print(json.dumps(_summary(run), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
