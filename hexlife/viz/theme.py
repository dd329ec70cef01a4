"""Visualization theme presets for frame and metric renderers.

Themes are frozen dataclasses that group all styling constants together so
renderers accept a ``Theme`` instance instead of module-level constants.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Theme:
    """Complete collection of visualization style tokens."""

    # Live-cell polygons
    fill_color: str = "#AD66CC"
    fill_alpha: float = 0.5
    edge_color: str = "#000000"
    edge_width: float = 1.0

    # Map canvas
    background_color: str = "#FFFFFF"
    graticule_color: str = "#DDDDDD"
    seam_color: str = "#999999"

    # Per-metric display
    metric_labels: dict[str, str] = field(default_factory=dict)
    metric_colors: dict[str, str] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Built-in presets
# ---------------------------------------------------------------------------

_DEFAULT_METRIC_LABELS: dict[str, str] = {
    "population": "Live Cells",
    "tracked_cells": "Tracked Cells",
    "births": "Births",
    "deaths": "Deaths",
    "cluster_count": "Cluster Count",
    "pentagon_count": "Live Pentagons",
}

_DEFAULT_METRIC_COLORS: dict[str, str] = {
    "population": "tab:purple",
    "tracked_cells": "tab:gray",
    "births": "tab:green",
    "deaths": "tab:red",
    "cluster_count": "tab:blue",
    "pentagon_count": "tab:orange",
}

DEFAULT_THEME = Theme(
    metric_labels=_DEFAULT_METRIC_LABELS,
    metric_colors=_DEFAULT_METRIC_COLORS,
)

DARK_THEME = Theme(
    fill_color="#D9A6F0",
    fill_alpha=0.6,
    edge_color="#F0F0F0",
    edge_width=0.8,
    background_color="#111111",
    graticule_color="#333333",
    seam_color="#666666",
    metric_labels=_DEFAULT_METRIC_LABELS,
    metric_colors=_DEFAULT_METRIC_COLORS,
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "dark": DARK_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]
