"""Centralized domain constants for the hexagonal Life simulation.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

MIN_LAT = -90.0
"""Southern bound of the latitude domain in degrees."""

MAX_LAT = 90.0
"""Northern bound of the latitude domain in degrees."""

MIN_LNG = -180.0
"""Western bound of the longitude domain in degrees."""

MAX_LNG = 180.0
"""Eastern bound of the longitude domain; also the antimeridian jump threshold."""

MIN_RESOLUTION = 0
"""Coarsest H3 resolution."""

MAX_RESOLUTION = 15
"""Finest H3 resolution."""

DEFAULT_POPULATION = 64
"""Default number of sampled coordinates when seeding a universe."""

DEFAULT_RESOLUTION = 2
"""Default grid resolution for new universes."""

DEFAULT_GENERATIONS = 100
"""Default number of generations recorded by the simulation driver."""

HALT_WINDOW = 10
"""Default halt-detector window (consecutive unchanged live sets)."""

WARMUP_TICKS = 1
"""Ticks applied before the first recorded generation; most seeds die off in the first one."""

FLUSH_THRESHOLD = 8_192
"""Flush generation log rows to Parquet once this in-memory row count is reached."""
