"""Configuration layer: constants and typed config dataclasses."""

from hexlife.config.constants import (
    DEFAULT_GENERATIONS,
    DEFAULT_POPULATION,
    DEFAULT_RESOLUTION,
    FLUSH_THRESHOLD,
    HALT_WINDOW,
    MAX_LAT,
    MAX_LNG,
    MAX_RESOLUTION,
    MIN_LAT,
    MIN_LNG,
    MIN_RESOLUTION,
    WARMUP_TICKS,
)
from hexlife.config.types import RunConfig, RunResult

__all__ = [
    "DEFAULT_GENERATIONS",
    "DEFAULT_POPULATION",
    "DEFAULT_RESOLUTION",
    "FLUSH_THRESHOLD",
    "HALT_WINDOW",
    "MAX_LAT",
    "MAX_LNG",
    "MAX_RESOLUTION",
    "MIN_LAT",
    "MIN_LNG",
    "MIN_RESOLUTION",
    "RunConfig",
    "RunResult",
    "WARMUP_TICKS",
]
