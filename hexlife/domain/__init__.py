"""Domain layer: grid capability, sampler, universe, projection, and filters."""

from hexlife.domain.boundary import crosses_antimeridian, project_boundary
from hexlife.domain.errors import GridInvariantError, InvalidResolution
from hexlife.domain.filters import ExtinctionDetector, HaltDetector, TerminationReason
from hexlife.domain.grid import CellIndex, GridIndex, H3Grid, LngLat
from hexlife.domain.sampler import GeoSampler, UniformSampler, create_rng
from hexlife.domain.universe import CellState, Universe, next_state
from hexlife.io.geojson import Ring

__all__ = [
    "CellIndex",
    "CellState",
    "ExtinctionDetector",
    "GeoSampler",
    "GridIndex",
    "GridInvariantError",
    "H3Grid",
    "HaltDetector",
    "InvalidResolution",
    "LngLat",
    "Ring",
    "TerminationReason",
    "UniformSampler",
    "Universe",
    "create_rng",
    "crosses_antimeridian",
    "next_state",
    "project_boundary",
]
