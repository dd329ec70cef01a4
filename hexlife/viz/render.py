"""Matplotlib-based rendering of GeoJSON frames and generation metrics."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pyarrow.parquet as pq
from matplotlib import animation
from matplotlib.axes import Axes
from matplotlib.collections import PolyCollection

from hexlife.config.constants import MAX_LAT, MAX_LNG, MIN_LAT, MIN_LNG
from hexlife.io.geojson import Ring, load_rings
from hexlife.io.schemas import GENERATION_METRIC_NAMES
from hexlife.viz.theme import DEFAULT_THEME, Theme

_active_theme: Theme = DEFAULT_THEME


def set_active_theme(theme: Theme) -> None:
    """Set the theme used when a renderer is called without an explicit one."""
    global _active_theme
    _active_theme = theme


def _ring_arrays(rings: list[Ring]) -> list[np.ndarray]:
    """Convert rings to vertex arrays, adding a -360 copy of rings past the seam."""
    arrays: list[np.ndarray] = []
    for ring in rings:
        verts = np.asarray(ring, dtype=float)
        arrays.append(verts)
        if verts[:, 0].max() > MAX_LNG:
            wrapped = verts.copy()
            wrapped[:, 0] -= 2 * MAX_LNG
            arrays.append(wrapped)
    return arrays


def _draw_map_canvas(ax: Axes, theme: Theme) -> None:
    ax.set_facecolor(theme.background_color)
    ax.set_xlim(MIN_LNG, MAX_LNG)
    ax.set_ylim(MIN_LAT, MAX_LAT)
    ax.set_aspect("equal")
    for lng in range(-120, 180, 60):
        ax.axvline(lng, color=theme.graticule_color, linewidth=0.5, zorder=0)
    for lat in range(-60, 90, 30):
        ax.axhline(lat, color=theme.graticule_color, linewidth=0.5, zorder=0)
    for lng in (MIN_LNG, MAX_LNG):
        ax.axvline(lng, color=theme.seam_color, linewidth=1.0, linestyle="--", zorder=0)
    ax.set_xlabel("Longitude")
    ax.set_ylabel("Latitude")


def _draw_rings(ax: Axes, rings: list[Ring], theme: Theme) -> PolyCollection:
    collection = PolyCollection(
        _ring_arrays(rings),
        facecolors=theme.fill_color,
        edgecolors=theme.edge_color,
        linewidths=theme.edge_width,
        alpha=theme.fill_alpha,
    )
    ax.add_collection(collection)
    return collection


def render_frame(
    geojson_path: Path,
    output_path: Path,
    title: str | None = None,
    theme: Theme | None = None,
) -> None:
    """Draw every live-cell polygon of one rendered frame on an equirectangular map."""
    theme = theme or _active_theme
    rings = load_rings(Path(geojson_path))

    fig, ax = plt.subplots(figsize=(12, 6))
    fig.patch.set_facecolor(theme.background_color)
    _draw_map_canvas(ax, theme)
    _draw_rings(ax, rings, theme)
    ax.set_title(title or f"{Path(geojson_path).stem} ({len(rings)} live cells)")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150, facecolor=fig.get_facecolor())
    plt.close(fig)


def render_frame_animation(
    frame_paths: list[Path],
    output_path: Path,
    fps: int = 2,
    theme: Theme | None = None,
) -> None:
    """Animate a sequence of GeoJSON frames into a GIF (or MP4 via ffmpeg)."""
    if not frame_paths:
        raise ValueError("frame_paths must not be empty")
    theme = theme or _active_theme
    frames = [load_rings(Path(path)) for path in frame_paths]

    fig, ax = plt.subplots(figsize=(12, 6))
    fig.patch.set_facecolor(theme.background_color)
    _draw_map_canvas(ax, theme)
    collection = _draw_rings(ax, frames[0], theme)

    def update(frame_index: int) -> tuple[PolyCollection]:
        collection.set_verts(_ring_arrays(frames[frame_index]))
        ax.set_title(f"Generation {frame_index} ({len(frames[frame_index])} live cells)")
        return (collection,)

    anim = animation.FuncAnimation(
        fig, update, frames=len(frames), interval=max(1, int(1000 / fps)), blit=False
    )

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if output_path.suffix.lower() == ".gif":
        writer = animation.PillowWriter(fps=fps)
    else:
        writer = animation.FFMpegWriter(fps=fps)
    anim.save(output_path, writer=writer)
    plt.close(fig)


def render_generation_timeseries(
    generation_log_path: Path,
    output_path: Path,
    metric_names: list[str] | None = None,
    run_ids: list[str] | None = None,
    theme: Theme | None = None,
) -> None:
    """Plot per-generation metrics for each run in a generation log."""
    theme = theme or _active_theme
    metric_names = metric_names or ["population", "births", "deaths"]
    unknown = [name for name in metric_names if name not in GENERATION_METRIC_NAMES]
    if unknown:
        valid = ", ".join(GENERATION_METRIC_NAMES)
        raise ValueError(f"Unknown metric(s) {unknown}; available: {valid}")
    filters = [("run_id", "in", run_ids)] if run_ids else None
    rows = pq.read_table(generation_log_path, filters=filters).to_pylist()
    if not rows:
        raise ValueError(f"No generation rows found in {generation_log_path}")

    by_run: dict[str, list[dict[str, object]]] = {}
    for row in rows:
        by_run.setdefault(str(row["run_id"]), []).append(row)

    n_metrics = len(metric_names)
    fig, axes = plt.subplots(n_metrics, 1, figsize=(8, 2.5 * n_metrics), squeeze=False)
    for m_idx, metric in enumerate(metric_names):
        ax = axes[m_idx, 0]
        color = theme.metric_colors.get(metric, "tab:blue")
        for run_id, run_rows in sorted(by_run.items()):
            run_rows.sort(key=lambda r: int(r["generation"]))
            generations = [int(r["generation"]) for r in run_rows]
            values = [int(r[metric]) for r in run_rows]
            ax.plot(generations, values, color=color, alpha=0.6, linewidth=1.5, label=run_id)
        ax.set_ylabel(theme.metric_labels.get(metric, metric))
        ax.grid(True, alpha=0.3)
    axes[-1, 0].set_xlabel("Generation")
    if len(by_run) <= 8:
        axes[0, 0].legend(fontsize=8)

    fig.tight_layout()
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
