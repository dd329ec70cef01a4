"""Spatial metrics over a universe's live set: clusters, pentagons, turnover."""

from __future__ import annotations

from collections.abc import Set

import networkx as nx

from hexlife.domain.grid import CellIndex, GridIndex


def adjacency_graph(live_cells: Set[CellIndex], grid: GridIndex) -> nx.Graph:
    """Build the grid-adjacency graph induced on *live_cells*."""
    graph = nx.Graph()
    graph.add_nodes_from(live_cells)
    for cell in live_cells:
        for neighbor in grid.cell_disk(cell, 1):
            if neighbor != cell and neighbor in live_cells:
                graph.add_edge(cell, neighbor)
    return graph


def cluster_count(live_cells: Set[CellIndex], grid: GridIndex) -> int:
    """Count connected components of live cells under grid adjacency."""
    if not live_cells:
        return 0
    return nx.number_connected_components(adjacency_graph(live_cells, grid))


def pentagon_count(live_cells: Set[CellIndex], grid: GridIndex) -> int:
    """Count live cells with five neighbors (icosahedron vertices)."""
    return sum(1 for cell in live_cells if len(grid.cell_disk(cell, 1)) == 6)


def population_delta(previous: Set[CellIndex], current: Set[CellIndex]) -> tuple[int, int]:
    """Return ``(births, deaths)`` between two consecutive live sets."""
    return len(current - previous), len(previous - current)
