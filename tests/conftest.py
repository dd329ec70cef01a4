"""Grid doubles shared across the test suite."""

from __future__ import annotations

import math
from collections.abc import Hashable, Iterable, Mapping

import matplotlib
import pytest

from hexlife.config.constants import MAX_RESOLUTION, MIN_RESOLUTION
from hexlife.domain.errors import InvalidResolution
from hexlife.domain.grid import LngLat

matplotlib.use("Agg")

SQRT3 = math.sqrt(3.0)


def _validate(resolution: object) -> int:
    if isinstance(resolution, bool) or not isinstance(resolution, int):
        raise InvalidResolution(resolution, "an integer")
    if not MIN_RESOLUTION <= resolution <= MAX_RESOLUTION:
        raise InvalidResolution(resolution, f"in [{MIN_RESOLUTION}, {MAX_RESOLUTION}]")
    return resolution


class AxialHexGrid:
    """Flat pointy-top hex grid addressed by axial ``(q, r)`` coordinates.

    Sampling cell size halves with every resolution step. Boundaries are drawn
    at unit size around the axial center, so cells near the origin stay inside
    the geographic domain.
    """

    def __init__(self, base_size: float = 8.0) -> None:
        self.base_size = base_size

    def size(self, resolution: int) -> float:
        return self.base_size / (2**resolution)

    def validate_resolution(self, resolution: object) -> int:
        return _validate(resolution)

    def coordinate_to_cell(self, coord: LngLat, resolution: int) -> tuple[int, int]:
        size = self.size(_validate(resolution))
        q = (SQRT3 / 3 * coord.lng - coord.lat / 3) / size
        r = (2 / 3 * coord.lat) / size
        return _cube_round(q, r)

    def cell_boundary(self, cell: tuple[int, int]) -> list[LngLat]:
        q, r = cell
        cx = SQRT3 * q + SQRT3 / 2 * r
        cy = 1.5 * r
        corners = []
        for i in range(6):
            angle = math.radians(60 * i - 30)
            corners.append(LngLat(cx + math.cos(angle), cy + math.sin(angle)))
        return corners

    def cell_disk(self, cell: tuple[int, int], radius: int) -> set[tuple[int, int]]:
        q, r = cell
        disk = set()
        for dq in range(-radius, radius + 1):
            for dr in range(max(-radius, -dq - radius), min(radius, -dq + radius) + 1):
                disk.add((q + dq, r + dr))
        return disk


def _cube_round(q: float, r: float) -> tuple[int, int]:
    s = -q - r
    rq, rr, rs = round(q), round(r), round(s)
    dq, dr, ds = abs(rq - q), abs(rr - r), abs(rs - s)
    if dq > dr and dq > ds:
        rq = -rr - rs
    elif dr > ds:
        rr = -rq - rs
    return int(rq), int(rr)


class GraphGrid:
    """Grid defined by an explicit adjacency map, for pentagons and odd topologies."""

    def __init__(
        self,
        adjacency: Mapping[Hashable, Iterable[Hashable]],
        boundaries: Mapping[Hashable, list[LngLat]] | None = None,
    ) -> None:
        self.adjacency: dict[Hashable, set[Hashable]] = {}
        for cell, neighbors in adjacency.items():
            for neighbor in neighbors:
                self.adjacency.setdefault(cell, set()).add(neighbor)
                self.adjacency.setdefault(neighbor, set()).add(cell)
        self.boundaries = dict(boundaries or {})

    def validate_resolution(self, resolution: object) -> int:
        return _validate(resolution)

    def coordinate_to_cell(self, coord: LngLat, resolution: int) -> Hashable:
        _validate(resolution)
        cells = sorted(self.adjacency, key=str)
        return cells[int(abs(coord.lng)) % len(cells)]

    def cell_boundary(self, cell: Hashable) -> list[LngLat]:
        if cell in self.boundaries:
            return self.boundaries[cell]
        offset = float(sorted(self.adjacency, key=str).index(cell))
        return [
            LngLat(offset, 0.0),
            LngLat(offset + 0.5, 0.5),
            LngLat(offset + 1.0, 0.0),
            LngLat(offset + 0.5, -0.5),
        ]

    def cell_disk(self, cell: Hashable, radius: int) -> set[Hashable]:
        disk = {cell}
        frontier = {cell}
        for _ in range(radius):
            frontier = {n for c in frontier for n in self.adjacency.get(c, ())} - disk
            disk |= frontier
        return disk


@pytest.fixture
def hex_grid() -> AxialHexGrid:
    return AxialHexGrid()


@pytest.fixture
def complete_graph_grid() -> GraphGrid:
    """Four cells, every pair adjacent, nothing else in the grid."""
    cells = ["a", "b", "c", "d"]
    return GraphGrid({cell: [other for other in cells if other != cell] for cell in cells})


@pytest.fixture
def pentagon_grid() -> GraphGrid:
    """A pentagon ``p`` ringed by five cells that also touch their ring neighbors."""
    ring = [f"n{i}" for i in range(5)]
    adjacency: dict[Hashable, list[Hashable]] = {"p": list(ring)}
    for i, cell in enumerate(ring):
        adjacency[cell] = [ring[(i + 1) % 5]]
    return GraphGrid(adjacency)
