"""Procedural cave maps from cellular automata and a drunk-agent random walk."""

from cavern_pcg.config.types import CellularAutomataConfig, DrunkAgentConfig, GenerationConfig
from cavern_pcg.domain import (
    AgentPassResult,
    Grid,
    Room,
    WalkerState,
    apply_cellular_automata,
    apply_drunk_agent,
    dig_room,
)
from cavern_pcg.simulation.engine import (
    GenerationRun,
    IterationResult,
    generate_grids,
    iterate_generation,
    run_generation,
)

__all__ = [
    "AgentPassResult",
    "CellularAutomataConfig",
    "DrunkAgentConfig",
    "GenerationConfig",
    "GenerationRun",
    "Grid",
    "IterationResult",
    "Room",
    "WalkerState",
    "apply_cellular_automata",
    "apply_drunk_agent",
    "dig_room",
    "generate_grids",
    "iterate_generation",
    "run_generation",
]
