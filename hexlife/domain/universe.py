"""Sparse hexagonal Life universe on a spherical grid.

Only cells that are alive, or that died since the last render, are tracked.
Dead cells that were never alive are implicit: they are discovered during a
tick by being adjacent to a tracked cell, which is the only way such a cell
can reach the birth count.

Transition rule (hexagonal B2/S23):

- alive with fewer than 2 or more than 3 live neighbors dies
- alive with 2 or 3 live neighbors survives
- untracked with exactly 2 live neighbors is born
- tracked dead cells stay dead until ``render`` prunes them
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from enum import Enum
from random import Random
from types import MappingProxyType

from hexlife.domain.boundary import project_boundary
from hexlife.domain.grid import CellIndex, GridIndex, H3Grid
from hexlife.domain.sampler import GeoSampler, UniformSampler
from hexlife.io.geojson import FeatureCollection, dumps, feature_collection, polygon_feature

logger = logging.getLogger(__name__)

BIRTH_COUNT = 2
SURVIVAL_COUNTS = frozenset({2, 3})


class CellState(Enum):
    """Two-state population marker per tracked cell."""

    DEAD = 0
    ALIVE = 1


def next_state(state: CellState, live_neighbors: int) -> CellState:
    """Apply the rule table to one tracked cell."""
    if state is CellState.ALIVE and live_neighbors not in SURVIVAL_COUNTS:
        return CellState.DEAD
    return state


class Universe:
    """Mapping of tracked cells to states at one fixed grid resolution."""

    def __init__(
        self,
        resolution: int,
        cells: Mapping[CellIndex, CellState] | None = None,
        grid: GridIndex | None = None,
    ) -> None:
        self._grid: GridIndex = grid if grid is not None else H3Grid()
        self._resolution = self._grid.validate_resolution(resolution)
        self._cells: dict[CellIndex, CellState] = dict(cells) if cells is not None else {}
        if any(state is not CellState.ALIVE for state in self._cells.values()):
            raise ValueError("a new universe may only track ALIVE cells")
        self._lock = threading.Lock()

    @classmethod
    def create(
        cls,
        population: int,
        resolution: int,
        rng: Random | None = None,
        grid: GridIndex | None = None,
        sampler: GeoSampler | None = None,
    ) -> Universe:
        """Seed a universe with *population* uniformly sampled live cells.

        Samples that land in the same cell coalesce, so the live count may be
        lower than *population*. Raises :exc:`InvalidResolution` for an
        unsupported *resolution*, even when *population* is zero.
        """
        if isinstance(population, bool) or not isinstance(population, int):
            raise ValueError("population must be an integer")
        if population < 0:
            raise ValueError("population must be >= 0")
        universe = cls(resolution=resolution, grid=grid)
        coord_sampler = sampler if sampler is not None else UniformSampler(rng)
        for _ in range(population):
            coord = coord_sampler.sample_coord()
            cell = universe._grid.coordinate_to_cell(coord, universe._resolution)
            universe._cells[cell] = CellState.ALIVE
        logger.debug(
            "Seeded universe: %d live cells from %d samples at resolution %d",
            len(universe._cells),
            population,
            universe._resolution,
        )
        return universe

    @classmethod
    def from_cells(
        cls,
        cells: Iterable[CellIndex],
        resolution: int,
        grid: GridIndex | None = None,
    ) -> Universe:
        """Build a universe whose live set is exactly *cells*."""
        return cls(
            resolution=resolution,
            cells={cell: CellState.ALIVE for cell in cells},
            grid=grid,
        )

    @property
    def resolution(self) -> int:
        return self._resolution

    @property
    def grid(self) -> GridIndex:
        return self._grid

    @property
    def cells(self) -> Mapping[CellIndex, CellState]:
        """Read-only view of every tracked cell, dead entries included."""
        return MappingProxyType(self._cells)

    @property
    def population(self) -> int:
        """Number of tracked cells currently alive."""
        return sum(1 for state in self._cells.values() if state is CellState.ALIVE)

    def __len__(self) -> int:
        return len(self._cells)

    def is_alive(self, cell: CellIndex) -> bool:
        """Untracked cells are dead."""
        return self._cells.get(cell) is CellState.ALIVE

    def live_cells(self) -> frozenset[CellIndex]:
        """Return the set of cells currently alive."""
        return frozenset(cell for cell, state in self._cells.items() if state is CellState.ALIVE)

    def neighbors(self, cell: CellIndex) -> set[CellIndex]:
        """Return the grid-distance-1 ring of *cell* (5 for pentagons, 6 otherwise)."""
        disk = self._grid.cell_disk(cell, 1)
        disk.discard(cell)
        return disk

    def live_neighbor_count(self, cell: CellIndex) -> int:
        """Count live cells adjacent to *cell*, excluding *cell* itself."""
        return sum(1 for neighbor in self.neighbors(cell) if self.is_alive(neighbor))

    def tick(self) -> None:
        """Advance exactly one generation.

        Every count and membership test reads the pre-tick map; the next
        generation is built in a fresh dict and swapped in at the end.
        """
        with self._lock:
            current = self._cells
            upcoming = dict(current)
            neighbor_cache: dict[CellIndex, set[CellIndex]] = {}

            def ring_of(cell: CellIndex) -> set[CellIndex]:
                ring = neighbor_cache.get(cell)
                if ring is None:
                    ring = self.neighbors(cell)
                    neighbor_cache[cell] = ring
                return ring

            def live_count(cell: CellIndex) -> int:
                return sum(1 for n in ring_of(cell) if current.get(n) is CellState.ALIVE)

            births = 0
            for cell, state in current.items():
                for neighbor in ring_of(cell):
                    if neighbor in current or neighbor in upcoming:
                        continue
                    if live_count(neighbor) == BIRTH_COUNT:
                        upcoming[neighbor] = CellState.ALIVE
                        births += 1
                upcoming[cell] = next_state(state, live_count(cell))

            self._cells = upcoming
        logger.debug("Tick: %d tracked, %d births", len(upcoming), births)

    def render_features(self) -> FeatureCollection:
        """Build one polygon feature per live cell and prune every dead entry."""
        with self._lock:
            features = []
            tombstones = []
            for cell, state in self._cells.items():
                if state is CellState.DEAD:
                    tombstones.append(cell)
                    continue
                ring = project_boundary(self._grid.cell_boundary(cell))
                features.append(polygon_feature(ring))
            for cell in tombstones:
                del self._cells[cell]
        return feature_collection(features)

    def render(self) -> str:
        """Serialize live cells to GeoJSON text, pruning dead entries."""
        return dumps(self.render_features())
