"""Visualization: console text output and static matplotlib images."""

from cavern_pcg.viz.text import BLOCK_SYMBOLS, MAP_FOOTER, MAP_HEADER, render_banner, render_text
from cavern_pcg.viz.theme import DEFAULT_THEME, PAPER_THEME, REGISTERED_THEMES, Theme, get_theme

__all__ = [
    "BLOCK_SYMBOLS",
    "DEFAULT_THEME",
    "MAP_FOOTER",
    "MAP_HEADER",
    "PAPER_THEME",
    "REGISTERED_THEMES",
    "Theme",
    "get_theme",
    "render_banner",
    "render_text",
]
