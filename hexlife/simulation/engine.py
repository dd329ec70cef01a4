"""Simulation driver: seeded runs of render-then-tick with Parquet logging."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path

import pyarrow.parquet as pq

from hexlife.config.constants import FLUSH_THRESHOLD
from hexlife.config.types import RunConfig, RunResult
from hexlife.domain.filters import ExtinctionDetector, HaltDetector, TerminationReason
from hexlife.domain.grid import GridIndex
from hexlife.domain.sampler import create_rng
from hexlife.domain.universe import Universe
from hexlife.io.paths import frame_path, frames_dir, generation_log_path, logs_dir, runs_dir
from hexlife.metrics.spatial import cluster_count, pentagon_count, population_delta
from hexlife.simulation.persistence import (
    flush_generation_columns,
    new_generation_columns,
    write_run_summary,
)

logger = logging.getLogger(__name__)


def _simulate(
    config: RunConfig,
    out_dir: Path,
    grid: GridIndex | None,
    columns: dict[str, list[int | str]],
    writer: pq.ParquetWriter | None,
) -> tuple[RunResult, pq.ParquetWriter | None]:
    """Run one universe to completion, appending generation rows to *columns*."""
    run_id = config.run_id()
    log_path = generation_log_path(out_dir)
    if config.write_frames:
        frames_dir(out_dir, run_id).mkdir(parents=True, exist_ok=True)

    universe = Universe.create(
        population=config.population,
        resolution=config.resolution,
        rng=create_rng(config.seed),
        grid=grid,
    )
    logger.info(
        "Run %s: %d live cells seeded at resolution %d",
        run_id,
        universe.population,
        universe.resolution,
    )
    for _ in range(config.warmup_ticks):
        universe.tick()

    halt_detector = HaltDetector(window=config.halt_window)
    extinction_detector = ExtinctionDetector()
    terminated_at: int | None = None
    termination_reason: str | None = None
    generations_run = 0
    previous_live = universe.live_cells()
    final_population = len(previous_live)

    for generation in range(config.generations):
        tracked = len(universe)
        geojson_text = universe.render()
        live = universe.live_cells()
        births, deaths = population_delta(previous_live, live)
        if config.write_frames:
            frame_path(out_dir, run_id, generation).write_text(geojson_text)

        columns["run_id"].append(run_id)
        columns["generation"].append(generation)
        columns["population"].append(len(live))
        columns["tracked_cells"].append(tracked)
        columns["births"].append(births)
        columns["deaths"].append(deaths)
        columns["cluster_count"].append(cluster_count(live, universe.grid))
        columns["pentagon_count"].append(pentagon_count(live, universe.grid))
        if len(columns["run_id"]) >= FLUSH_THRESHOLD:
            writer = flush_generation_columns(columns, log_path, writer)

        logger.debug("Run %s generation %d: population %d", run_id, generation, len(live))
        generations_run = generation + 1
        final_population = len(live)

        if config.stop_on_extinction and extinction_detector.observe(len(live)):
            terminated_at = generation
            termination_reason = TerminationReason.EXTINCTION.value
            break
        if halt_detector.observe(live):
            terminated_at = generation
            termination_reason = TerminationReason.HALT.value
            break

        previous_live = live
        if generation + 1 < config.generations:
            universe.tick()

    result = RunResult(
        run_id=run_id,
        generations_run=generations_run,
        final_population=final_population,
        terminated_at=terminated_at,
        termination_reason=termination_reason,
    )
    write_run_summary(
        result,
        runs_dir(out_dir) / f"{run_id}.json",
        payload=dataclasses.asdict(config),
    )
    logger.info(
        "Run %s finished after %d generations (%s)",
        run_id,
        generations_run,
        termination_reason or "completed",
    )
    return result, writer


def run_batch(
    n_runs: int,
    out_dir: Path,
    config: RunConfig | None = None,
    grid: GridIndex | None = None,
) -> list[RunResult]:
    """Run *n_runs* seeded universes and persist JSON/Parquet/GeoJSON outputs.

    Run ``i`` uses seed ``config.seed + i``; all runs share one generation log.
    """
    if n_runs < 1:
        raise ValueError("n_runs must be >= 1")
    base_config = config or RunConfig()

    out_dir = Path(out_dir)
    runs_dir(out_dir).mkdir(parents=True, exist_ok=True)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)

    columns = new_generation_columns()
    writer: pq.ParquetWriter | None = None
    results: list[RunResult] = []
    try:
        for i in range(n_runs):
            run_config = dataclasses.replace(base_config, seed=base_config.seed + i)
            result, writer = _simulate(run_config, out_dir, grid, columns, writer)
            results.append(result)
        writer = flush_generation_columns(columns, generation_log_path(out_dir), writer)
    finally:
        if writer is not None:
            writer.close()
    return results


def run_simulation(
    config: RunConfig,
    out_dir: Path,
    grid: GridIndex | None = None,
) -> RunResult:
    """Run a single seeded universe; see :func:`run_batch`."""
    return run_batch(n_runs=1, out_dir=out_dir, config=config, grid=grid)[0]
