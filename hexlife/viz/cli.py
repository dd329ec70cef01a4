"""CLI for rendering simulation outputs to images."""

from __future__ import annotations

import argparse
from pathlib import Path

from hexlife.io.paths import resolve_within_base
from hexlife.viz.render import (
    render_frame,
    render_frame_animation,
    render_generation_timeseries,
    set_active_theme,
)
from hexlife.viz.theme import get_theme


def _build_frame_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("frame", help="Render one GeoJSON frame to an image")
    p.set_defaults(func=_handle_frame)
    p.add_argument("--geojson", type=Path, required=True)
    p.add_argument("--output", type=Path, required=True)
    p.add_argument("--title", type=str, default=None)
    p.add_argument("--base-dir", type=Path, default=Path("."))


def _build_animation_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("animation", help="Animate a directory of GeoJSON frames")
    p.set_defaults(func=_handle_animation)
    p.add_argument("--frames-dir", type=Path, required=True)
    p.add_argument("--output", type=Path, required=True)
    p.add_argument("--fps", type=int, default=2)
    p.add_argument("--base-dir", type=Path, default=Path("."))


def _build_timeseries_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("timeseries", help="Plot per-generation metrics from a generation log")
    p.set_defaults(func=_handle_timeseries)
    p.add_argument("--generation-log", type=Path, required=True)
    p.add_argument("--output", type=Path, required=True)
    p.add_argument("--metric", action="append", default=None)
    p.add_argument("--run-id", action="append", default=None)
    p.add_argument("--base-dir", type=Path, default=Path("."))


def _handle_frame(args: argparse.Namespace) -> None:
    base_dir = Path(args.base_dir).resolve()
    render_frame(
        geojson_path=resolve_within_base(args.geojson, base_dir),
        output_path=resolve_within_base(args.output, base_dir),
        title=args.title,
    )


def _handle_animation(args: argparse.Namespace) -> None:
    base_dir = Path(args.base_dir).resolve()
    frames_dir = resolve_within_base(args.frames_dir, base_dir)
    frame_paths = sorted(frames_dir.glob("*.geojson"))
    if not frame_paths:
        raise ValueError(f"No GeoJSON frames found in {frames_dir}")
    render_frame_animation(
        frame_paths=frame_paths,
        output_path=resolve_within_base(args.output, base_dir),
        fps=args.fps,
    )


def _handle_timeseries(args: argparse.Namespace) -> None:
    base_dir = Path(args.base_dir).resolve()
    render_generation_timeseries(
        generation_log_path=resolve_within_base(args.generation_log, base_dir),
        output_path=resolve_within_base(args.output, base_dir),
        metric_names=args.metric,
        run_ids=args.run_id,
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint with subcommands."""
    parser = argparse.ArgumentParser(description="Visualization tools for hexlife runs")
    parser.add_argument(
        "--theme",
        type=str,
        default="default",
        help="Theme preset name (default, dark)",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    _build_frame_parser(sub)
    _build_animation_parser(sub)
    _build_timeseries_parser(sub)
    args = parser.parse_args(argv)

    try:
        set_active_theme(get_theme(args.theme))
    except ValueError as exc:
        parser.error(str(exc))

    args.func(args)


if __name__ == "__main__":
    main()
