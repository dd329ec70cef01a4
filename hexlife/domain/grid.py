"""Grid index capability: coordinates to cells, cell boundaries and disks.

The universe only talks to the grid through :class:`GridIndex`, so any
hexagonal indexing scheme can stand in for H3 (the test suite swaps in
planar and graph-defined grids).
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import NamedTuple, Protocol, TypeAlias

import h3

from hexlife.config.constants import (
    MAX_LAT,
    MAX_LNG,
    MAX_RESOLUTION,
    MIN_LAT,
    MIN_LNG,
    MIN_RESOLUTION,
)
from hexlife.domain.errors import GridInvariantError, InvalidResolution

CellIndex: TypeAlias = Hashable
"""Opaque, totally ordered identifier for one grid cell at a fixed resolution."""


class LngLat(NamedTuple):
    """Geographic coordinate in degrees, longitude first."""

    lng: float
    lat: float

    def in_domain(self) -> bool:
        """Return True when both components lie within the geographic domain."""
        return MIN_LNG <= self.lng <= MAX_LNG and MIN_LAT <= self.lat <= MAX_LAT


class GridIndex(Protocol):
    """Capability interface consumed by :class:`hexlife.domain.universe.Universe`."""

    def validate_resolution(self, resolution: object) -> int:
        """Return *resolution* as an int or raise :exc:`InvalidResolution`."""
        ...

    def coordinate_to_cell(self, coord: LngLat, resolution: int) -> CellIndex:
        """Return the cell containing *coord* at *resolution*."""
        ...

    def cell_boundary(self, cell: CellIndex) -> Sequence[LngLat]:
        """Return the ordered boundary vertices of *cell* (5 or 6 points)."""
        ...

    def cell_disk(self, cell: CellIndex, radius: int) -> set[CellIndex]:
        """Return all cells within grid distance *radius*, including *cell*."""
        ...


class H3Grid:
    """:class:`GridIndex` backed by the H3 hierarchical hexagonal grid."""

    def validate_resolution(self, resolution: object) -> int:
        if isinstance(resolution, bool) or not isinstance(resolution, int):
            raise InvalidResolution(resolution, "an integer")
        if not MIN_RESOLUTION <= resolution <= MAX_RESOLUTION:
            raise InvalidResolution(resolution, f"in [{MIN_RESOLUTION}, {MAX_RESOLUTION}]")
        return resolution

    def coordinate_to_cell(self, coord: LngLat, resolution: int) -> str:
        res = self.validate_resolution(resolution)
        if not coord.in_domain():
            raise GridInvariantError(f"coordinate outside geographic domain: {coord}")
        try:
            return h3.latlng_to_cell(coord.lat, coord.lng, res)
        except h3.H3BaseException as exc:
            raise GridInvariantError(f"h3 rejected coordinate {coord}") from exc

    def cell_boundary(self, cell: CellIndex) -> tuple[LngLat, ...]:
        try:
            boundary = h3.cell_to_boundary(cell)
        except h3.H3BaseException as exc:
            raise GridInvariantError(f"h3 rejected cell {cell!r}") from exc
        # h3 reports (lat, lng) pairs
        return tuple(LngLat(lng, lat) for lat, lng in boundary)

    def cell_disk(self, cell: CellIndex, radius: int) -> set[str]:
        if radius < 0:
            raise ValueError("radius must be >= 0")
        try:
            return set(h3.grid_disk(cell, radius))
        except h3.H3BaseException as exc:
            raise GridInvariantError(f"h3 rejected cell {cell!r}") from exc
