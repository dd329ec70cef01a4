"""Parquet persistence helpers for the generation log stream."""

from __future__ import annotations

import json
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from hexlife.config.types import RunResult
from hexlife.io.schemas import GENERATION_LOG_SCHEMA, GENERATION_LOG_SCHEMA_VERSION


def new_generation_columns() -> dict[str, list[int | str]]:
    """Return empty column buffers matching :data:`GENERATION_LOG_SCHEMA`."""
    return {name: [] for name in GENERATION_LOG_SCHEMA.names}


def flush_generation_columns(
    columns: dict[str, list[int | str]],
    generation_log_path: Path,
    writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated generation rows to Parquet and clear in-memory buffers."""
    if not columns["run_id"]:
        return writer
    table = pa.Table.from_pydict(columns, schema=GENERATION_LOG_SCHEMA)
    if writer is None:
        writer = pq.ParquetWriter(generation_log_path, GENERATION_LOG_SCHEMA)
    writer.write_table(table)
    for values in columns.values():
        values.clear()
    return writer


def write_run_summary(result: RunResult, path: Path, payload: dict[str, object]) -> None:
    """Persist one run's result and configuration as JSON."""
    document = {
        "schema_version": GENERATION_LOG_SCHEMA_VERSION,
        "run_id": result.run_id,
        "generations_run": result.generations_run,
        "final_population": result.final_population,
        "terminated_at": result.terminated_at,
        "termination_reason": result.termination_reason,
        "config": payload,
    }
    path.write_text(json.dumps(document, ensure_ascii=False, indent=2))
