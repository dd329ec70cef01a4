"""Parquet schema definitions for simulation artifacts."""

from __future__ import annotations

import pyarrow as pa

GENERATION_LOG_SCHEMA_VERSION = 1

GENERATION_LOG_SCHEMA = pa.schema(
    [
        ("run_id", pa.string()),
        ("generation", pa.int64()),
        ("population", pa.int64()),
        ("tracked_cells", pa.int64()),
        ("births", pa.int64()),
        ("deaths", pa.int64()),
        ("cluster_count", pa.int64()),
        ("pentagon_count", pa.int64()),
    ]
)

GENERATION_METRIC_NAMES = [
    "population",
    "tracked_cells",
    "births",
    "deaths",
    "cluster_count",
    "pentagon_count",
]
