"""Plain-text grid rendering for the console."""

from __future__ import annotations

from collections.abc import Mapping

from cavern_pcg.domain.grid import Grid

MAP_HEADER = "--- Current Map ---"
MAP_FOOTER = "-------------------"

BLOCK_SYMBOLS: dict[int, str] = {0: ".", 1: "#"}
"""Alternative symbol set for ``--symbols blocks``."""


def render_text(grid: Grid, symbols: Mapping[int, str] | None = None) -> str:
    """One line per row, cells separated by a single space.

    Without ``symbols`` the raw 0/1 values are printed.
    """
    lines = []
    for row in grid.rows():
        if symbols is None:
            lines.append(" ".join(str(value) for value in row))
        else:
            lines.append(" ".join(symbols[value] for value in row))
    return "\n".join(lines)


def render_banner(grid: Grid, symbols: Mapping[int, str] | None = None) -> str:
    """Render ``grid`` framed by the map header and footer lines."""
    return "\n".join([MAP_HEADER, render_text(grid, symbols), MAP_FOOTER])
