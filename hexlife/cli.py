"""CLI entrypoint for simulation runs.

This module owns CLI argument parsing, config-file resolution, and logging
setup. All domain logic lives in the extracted modules:

- ``hexlife.config``            – constants and configuration dataclasses
- ``hexlife.domain``            – grid capability, universe, projector, filters
- ``hexlife.simulation.engine`` – ``run_batch`` driver
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from hexlife.config.constants import (
    DEFAULT_GENERATIONS,
    DEFAULT_POPULATION,
    DEFAULT_RESOLUTION,
    HALT_WINDOW,
    WARMUP_TICKS,
)
from hexlife.config.types import RunConfig
from hexlife.domain.grid import H3Grid
from hexlife.simulation.engine import run_batch

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# ---------------------------------------------------------------------------
# Coercion helpers
# ---------------------------------------------------------------------------


def _coerce_bool(raw: object, key: str) -> bool:
    """Coerce raw value to bool with strict string-check."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _coerce_int(raw: object, key: str) -> int:
    """Coerce raw value to int; rejects booleans and non-integer floats."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float):
        if raw != int(raw):
            raise ValueError(f"{key} must be an integer value, got {raw!r}")
        return int(raw)
    if isinstance(raw, (int, str)):
        try:
            return int(raw)
        except ValueError as exc:
            raise ValueError(f"{key} must be an integer value, got {raw!r}") from exc
    raise ValueError(f"{key} must be an integer value")


def _coerce_str(raw: object, key: str) -> str:
    """Coerce raw value to str; rejects booleans."""
    if isinstance(raw, bool):
        raise ValueError(f"{key} must be a string-coercible value")
    if isinstance(raw, (str, Path, int, float)):
        return str(raw)
    raise ValueError(f"{key} must be a string-coercible value")


def _get_val(cli_val: object, key: str, file_cfg: dict[str, object], default: object) -> object:
    """CLI > file > default resolution."""
    if cli_val is not None:
        return cli_val
    return file_cfg.get(key, default)


def _get_bool(cli_val: bool | None, key: str, file_cfg: dict[str, object], default: bool) -> bool:
    """CLI > file > default resolution for boolean flags."""
    return _coerce_bool(_get_val(cli_val, key, file_cfg, default), key)


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    """CLI > file > default resolution for integer values."""
    return _coerce_int(_get_val(cli_val, key, file_cfg, default), key)


def _get_str(cli_val: str | None, key: str, file_cfg: dict[str, object], default: str) -> str:
    """CLI > file > default resolution for string values."""
    return _coerce_str(_get_val(cli_val, key, file_cfg, default), key)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Run hexagonal Life on the H3 sphere")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--population", type=int, default=None)
    parser.add_argument("--resolution", type=int, default=None)
    parser.add_argument("--generations", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--n-runs", type=int, default=None)
    parser.add_argument("--warmup-ticks", type=int, default=None)
    parser.add_argument("--halt-window", type=int, default=None)
    parser.add_argument(
        "--stop-on-extinction", action=argparse.BooleanOptionalAction, default=None
    )
    parser.add_argument("--write-frames", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=None)
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for simulation runs.

    Supports ``--config path/to/config.json`` for reproducibility. CLI
    arguments override config-file values; config-file values override
    built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")
        if not isinstance(file_cfg, dict):
            parser.error(f"Config file must contain a JSON object: {args.config}")

    try:
        log_level = _get_str(args.log_level, "log_level", file_cfg, "WARNING").upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        n_runs = _get_int(args.n_runs, "n_runs", file_cfg, 1)
        if n_runs < 1:
            raise ValueError("n_runs must be >= 1")
        out_dir = Path(_get_str(args.out_dir, "out_dir", file_cfg, "data"))
        config = RunConfig(
            population=_get_int(args.population, "population", file_cfg, DEFAULT_POPULATION),
            resolution=_get_int(args.resolution, "resolution", file_cfg, DEFAULT_RESOLUTION),
            generations=_get_int(args.generations, "generations", file_cfg, DEFAULT_GENERATIONS),
            seed=_get_int(args.seed, "seed", file_cfg, 0),
            warmup_ticks=_get_int(args.warmup_ticks, "warmup_ticks", file_cfg, WARMUP_TICKS),
            halt_window=_get_int(args.halt_window, "halt_window", file_cfg, HALT_WINDOW),
            stop_on_extinction=_get_bool(
                args.stop_on_extinction, "stop_on_extinction", file_cfg, True
            ),
            write_frames=_get_bool(args.write_frames, "write_frames", file_cfg, True),
        )
        H3Grid().validate_resolution(config.resolution)
    except ValueError as exc:
        parser.error(str(exc))

    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    results = run_batch(n_runs=n_runs, out_dir=out_dir, config=config)
    summary = {
        "resolution": config.resolution,
        "population": config.population,
        "total_runs": len(results),
        "extinct": sum(1 for r in results if r.termination_reason == "extinction"),
        "halted": sum(1 for r in results if r.termination_reason == "halt"),
        "completed": sum(1 for r in results if r.termination_reason is None),
        "final_populations": {r.run_id: r.final_population for r in results},
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
