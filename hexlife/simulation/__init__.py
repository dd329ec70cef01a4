"""Simulation driver: seeded runs and Parquet persistence."""

from hexlife.simulation.engine import run_batch, run_simulation
from hexlife.simulation.persistence import (
    flush_generation_columns,
    new_generation_columns,
    write_run_summary,
)

__all__ = [
    "flush_generation_columns",
    "new_generation_columns",
    "run_batch",
    "run_simulation",
    "write_run_summary",
]
