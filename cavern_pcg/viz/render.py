"""Matplotlib rendering of occupancy grids to static image files."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.image import AxesImage
from matplotlib.patches import Patch

from cavern_pcg.domain.grid import Grid
from cavern_pcg.domain.walker import WalkerState
from cavern_pcg.io.schemas import ITERATION_METRIC_NAMES
from cavern_pcg.viz.theme import DEFAULT_THEME, Theme


def _cell_cmap(theme: Theme = DEFAULT_THEME) -> tuple[ListedColormap, BoundaryNorm]:
    """Two-color colormap: empty, floor."""
    cmap = ListedColormap([theme.empty_color, theme.floor_color])
    norm = BoundaryNorm([-0.5, 0.5, 1.5], cmap.N)
    return cmap, norm


def _legend_handles(theme: Theme = DEFAULT_THEME, with_walker: bool = False) -> list[Patch]:
    handles = [
        Patch(facecolor=theme.empty_color, edgecolor="gray", label="Empty"),
        Patch(facecolor=theme.floor_color, edgecolor="gray", label="Floor"),
    ]
    if with_walker:
        handles.append(Patch(facecolor=theme.walker_color, edgecolor="gray", label="Walker"))
    return handles


def _draw_cell_grid(
    ax: plt.Axes,
    cells: np.ndarray,
    theme: Theme = DEFAULT_THEME,
    walker: WalkerState | None = None,
) -> AxesImage:
    """Shared renderer: imshow with subtle grid lines and an optional walker marker."""
    cmap, norm = _cell_cmap(theme)
    img = ax.imshow(cells, cmap=cmap, norm=norm, origin="upper", aspect="equal")
    h, w = cells.shape
    for x in range(w + 1):
        ax.axvline(x - 0.5, color=theme.grid_line_color, linewidth=0.5)
    for y in range(h + 1):
        ax.axhline(y - 0.5, color=theme.grid_line_color, linewidth=0.5)
    if walker is not None:
        ax.plot(walker.x, walker.y, marker="o", markersize=4, color=theme.walker_color)
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_facecolor(theme.background_color)
    return img


def render_grid_image(
    grid: Grid,
    output_path: Path,
    title: str | None = None,
    walker: WalkerState | None = None,
    theme: Theme = DEFAULT_THEME,
    dpi: int = 150,
) -> Path:
    """Render one grid to ``output_path`` (format inferred from the suffix)."""
    fig, ax = plt.subplots(figsize=(max(2.0, grid.width / 4), max(2.0, grid.height / 4)))
    fig.patch.set_facecolor(theme.background_color)
    _draw_cell_grid(ax, grid.view(), theme=theme, walker=walker)
    if title:
        ax.set_title(title, fontsize=10, color=theme.title_color)
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=dpi, facecolor=fig.get_facecolor())
    plt.close(fig)
    return output_path


def render_filmstrip(
    grids: Sequence[Grid],
    output_path: Path,
    labels: Sequence[str] | None = None,
    walkers: Sequence[WalkerState] | None = None,
    n_frames: int = 6,
    theme: Theme = DEFAULT_THEME,
) -> Path:
    """Render a horizontal filmstrip of evenly spaced grids with labels."""
    if not grids:
        raise ValueError("grids must not be empty")
    if n_frames < 1:
        raise ValueError("n_frames must be >= 1")
    if labels is not None and len(labels) != len(grids):
        raise ValueError("labels must match grids in length")
    if walkers is not None and len(walkers) != len(grids):
        raise ValueError("walkers must match grids in length")

    actual_n = max(1, min(n_frames, len(grids)))
    indices = [int(i * (len(grids) - 1) / max(1, actual_n - 1)) for i in range(actual_n)]

    first = grids[0]
    panel_w = max(2.0, first.width / 6)
    panel_h = max(2.0, first.height / 6)
    fig, axes = plt.subplots(1, actual_n, figsize=(panel_w * actual_n, panel_h), squeeze=False)
    fig.patch.set_facecolor(theme.background_color)

    for col_idx, grid_idx in enumerate(indices):
        ax = axes[0, col_idx]
        walker = walkers[grid_idx] if walkers is not None else None
        _draw_cell_grid(ax, grids[grid_idx].view(), theme=theme, walker=walker)
        label = labels[grid_idx] if labels is not None else f"Frame {grid_idx}"
        ax.set_title(label, fontsize=9, color=theme.title_color)

    fig.legend(
        handles=_legend_handles(theme, with_walker=walkers is not None),
        loc="lower center",
        ncol=3,
        fontsize=8,
        frameon=False,
        labelcolor=theme.title_color,
    )
    fig.tight_layout(rect=(0, 0.12, 1, 1))
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150, facecolor=fig.get_facecolor())
    plt.close(fig)
    return output_path


def render_metric_timeseries(
    metrics: Sequence[dict[str, float | int]],
    output_path: Path,
    metric_names: Sequence[str] | None = None,
    theme: Theme = DEFAULT_THEME,
) -> Path:
    """Plot per-iteration metrics, one stacked panel per metric."""
    if not metrics:
        raise ValueError("metrics must not be empty")
    names = list(metric_names) if metric_names is not None else list(ITERATION_METRIC_NAMES)
    iterations = list(range(1, len(metrics) + 1))
    fig, axes = plt.subplots(len(names), 1, figsize=(6, 1.8 * len(names)), squeeze=False)
    for row_idx, name in enumerate(names):
        ax = axes[row_idx, 0]
        values = [float(row[name]) for row in metrics]
        ax.plot(iterations, values, marker="o", color=theme.metric_colors.get(name, "tab:gray"))
        ax.set_ylabel(theme.metric_labels.get(name, name), fontsize=8)
        ax.grid(alpha=0.3)
    axes[-1, 0].set_xlabel("Iteration")
    fig.tight_layout()
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path
