"""Visualization theme presets for grid renderers.

Themes are frozen dataclasses that group all styling constants together so
renderers take a ``Theme`` instead of module-level colors.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Theme:
    """Complete collection of visualization style tokens."""

    metric_labels: dict[str, str] = field(default_factory=dict)
    metric_colors: dict[str, str] = field(default_factory=dict)

    floor_color: str = "#C9A66B"
    empty_color: str = "#1A1A1A"
    walker_color: str = "#E53935"
    grid_line_color: str = "#333333"
    background_color: str = "#1A1A1A"
    title_color: str = "white"


_DEFAULT_METRIC_LABELS: dict[str, str] = {
    "floor_fraction": "Floor Fraction",
    "region_count": "Floor Regions",
    "largest_region": "Largest Region (cells)",
    "rooms_carved": "Rooms Carved",
}

_DEFAULT_METRIC_COLORS: dict[str, str] = {
    "floor_fraction": "tab:orange",
    "region_count": "tab:blue",
    "largest_region": "tab:green",
    "rooms_carved": "tab:red",
}

DEFAULT_THEME = Theme(
    metric_labels=_DEFAULT_METRIC_LABELS,
    metric_colors=_DEFAULT_METRIC_COLORS,
)

PAPER_THEME = Theme(
    metric_labels=_DEFAULT_METRIC_LABELS,
    metric_colors={
        "floor_fraction": "#ff7f0e",
        "region_count": "#1f77b4",
        "largest_region": "#2ca02c",
        "rooms_carved": "#d62728",
    },
    floor_color="#404040",
    empty_color="#FFFFFF",
    walker_color="#d62728",
    grid_line_color="#E0E0E0",
    background_color="#FFFFFF",
    title_color="black",
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "paper": PAPER_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]
