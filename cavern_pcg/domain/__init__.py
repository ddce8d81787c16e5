"""Domain layer: occupancy grid, walker state and the two generation passes."""

from cavern_pcg.domain.cellular import (
    apply_cellular_automata,
    cellular_pass,
    neighbor_counts,
    window_size,
)
from cavern_pcg.domain.drunk_agent import AgentPassResult, Room, apply_drunk_agent, dig_room
from cavern_pcg.domain.grid import Grid
from cavern_pcg.domain.walker import Heading, WalkerState, random_heading

__all__ = [
    "AgentPassResult",
    "Grid",
    "Heading",
    "Room",
    "WalkerState",
    "apply_cellular_automata",
    "apply_drunk_agent",
    "cellular_pass",
    "dig_room",
    "neighbor_counts",
    "random_heading",
    "window_size",
]
