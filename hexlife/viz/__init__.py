"""Visualization layer: themes, renderers, and CLI."""

from hexlife.viz.render import (
    render_frame,
    render_frame_animation,
    render_generation_timeseries,
    set_active_theme,
)
from hexlife.viz.theme import (
    DARK_THEME,
    DEFAULT_THEME,
    REGISTERED_THEMES,
    Theme,
    get_theme,
)

__all__ = [
    "DARK_THEME",
    "DEFAULT_THEME",
    "REGISTERED_THEMES",
    "Theme",
    "get_theme",
    "render_frame",
    "render_frame_animation",
    "render_generation_timeseries",
    "set_active_theme",
]
