"""Conway-style Life on the H3 hexagonal sphere, rendered as GeoJSON."""

from hexlife.domain import (
    CellState,
    GridIndex,
    GridInvariantError,
    H3Grid,
    InvalidResolution,
    LngLat,
    UniformSampler,
    Universe,
    create_rng,
    project_boundary,
)

__all__ = [
    "CellState",
    "GridIndex",
    "GridInvariantError",
    "H3Grid",
    "InvalidResolution",
    "LngLat",
    "UniformSampler",
    "Universe",
    "create_rng",
    "project_boundary",
]
