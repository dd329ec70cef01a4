"""Tests for hexlife.simulation.engine: outputs, termination and batching."""

from __future__ import annotations

import json
from pathlib import Path

import pyarrow.parquet as pq
import pytest

from hexlife.config.types import RunConfig
from hexlife.io.geojson import load_rings
from hexlife.io.schemas import GENERATION_LOG_SCHEMA
from hexlife.simulation.engine import run_batch, run_simulation


def _frames(out_dir: Path, run_id: str) -> list[Path]:
    return sorted((out_dir / "frames" / run_id).glob("gen_*.geojson"))


class TestRunSimulation:
    def test_writes_summary_log_and_frames(self, tmp_path: Path) -> None:
        config = RunConfig(population=64, resolution=1, generations=5, seed=3)
        result = run_simulation(config, tmp_path)

        assert result.run_id == "r1_n64_s3"
        assert 1 <= result.generations_run <= 5

        summary = json.loads((tmp_path / "runs" / "r1_n64_s3.json").read_text())
        assert summary["run_id"] == result.run_id
        assert summary["generations_run"] == result.generations_run
        assert summary["config"]["population"] == 64

        table = pq.read_table(tmp_path / "logs" / "generation_log.parquet")
        assert table.schema.equals(GENERATION_LOG_SCHEMA)
        assert table.num_rows == result.generations_run

        frames = _frames(tmp_path, result.run_id)
        assert len(frames) == result.generations_run
        populations = table.column("population").to_pylist()
        for frame, population in zip(frames, populations):
            rings = load_rings(frame)
            assert len(rings) == population
            assert all(ring[0] == ring[-1] for ring in rings)

    def test_log_rows_are_consistent(self, tmp_path: Path) -> None:
        config = RunConfig(population=200, resolution=1, generations=4, seed=1)
        run_simulation(config, tmp_path)
        rows = pq.read_table(tmp_path / "logs" / "generation_log.parquet").to_pylist()
        assert [row["generation"] for row in rows] == list(range(len(rows)))
        for row in rows:
            assert row["population"] <= row["tracked_cells"]
            assert row["cluster_count"] <= row["population"]

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_final_population_matches_last_logged_row(self, tmp_path: Path, seed: int) -> None:
        config = RunConfig(
            population=200,
            resolution=1,
            generations=3,
            seed=seed,
            halt_window=50,
            write_frames=False,
        )
        result = run_simulation(config, tmp_path)
        rows = pq.read_table(tmp_path / "logs" / "generation_log.parquet").to_pylist()
        assert result.final_population == rows[-1]["population"]

        summary = json.loads((tmp_path / "runs" / f"{result.run_id}.json").read_text())
        assert summary["final_population"] == rows[-1]["population"]

    def test_same_seed_same_log(self, tmp_path: Path) -> None:
        config = RunConfig(population=100, resolution=1, generations=3, seed=11)
        run_simulation(config, tmp_path / "a")
        run_simulation(config, tmp_path / "b")
        a = pq.read_table(tmp_path / "a" / "logs" / "generation_log.parquet").to_pylist()
        b = pq.read_table(tmp_path / "b" / "logs" / "generation_log.parquet").to_pylist()
        assert a == b

    def test_empty_universe_goes_extinct_immediately(self, tmp_path: Path) -> None:
        config = RunConfig(population=0, resolution=0, generations=10)
        result = run_simulation(config, tmp_path)
        assert result.termination_reason == "extinction"
        assert result.terminated_at == 0
        assert result.generations_run == 1
        assert result.final_population == 0

    def test_halt_when_extinction_ignored(self, tmp_path: Path) -> None:
        config = RunConfig(
            population=0,
            resolution=0,
            generations=10,
            halt_window=2,
            stop_on_extinction=False,
        )
        result = run_simulation(config, tmp_path)
        assert result.termination_reason == "halt"
        assert result.terminated_at == 2
        assert result.generations_run == 3

    def test_frames_can_be_disabled(self, tmp_path: Path) -> None:
        config = RunConfig(population=32, resolution=0, generations=2, write_frames=False)
        run_simulation(config, tmp_path)
        assert not (tmp_path / "frames").exists()


class TestRunBatch:
    def test_seeds_increment_per_run(self, tmp_path: Path) -> None:
        config = RunConfig(population=64, resolution=1, generations=3, seed=3)
        results = run_batch(n_runs=2, out_dir=tmp_path, config=config)
        assert [r.run_id for r in results] == ["r1_n64_s3", "r1_n64_s4"]

        table = pq.read_table(tmp_path / "logs" / "generation_log.parquet")
        assert set(table.column("run_id").to_pylist()) == {"r1_n64_s3", "r1_n64_s4"}
        assert table.num_rows == sum(r.generations_run for r in results)

    def test_zero_runs_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="n_runs"):
            run_batch(n_runs=0, out_dir=tmp_path)

    def test_runs_on_custom_grid(self, tmp_path: Path, complete_graph_grid) -> None:
        config = RunConfig(population=8, resolution=0, generations=3, warmup_ticks=0)
        (result,) = run_batch(n_runs=1, out_dir=tmp_path, config=config, grid=complete_graph_grid)
        assert result.generations_run >= 1
