"""Tests for hexlife.metrics.spatial module."""

from __future__ import annotations

import h3

from hexlife.domain.grid import H3Grid
from hexlife.metrics.spatial import (
    adjacency_graph,
    cluster_count,
    pentagon_count,
    population_delta,
)


class TestClusterCount:
    def test_empty_set_has_no_clusters(self, hex_grid) -> None:
        assert cluster_count(frozenset(), hex_grid) == 0

    def test_adjacent_cells_form_one_cluster(self, hex_grid) -> None:
        assert cluster_count(frozenset({(0, 0), (1, 0), (1, -1)}), hex_grid) == 1

    def test_separated_cells_form_separate_clusters(self, hex_grid) -> None:
        live = frozenset({(0, 0), (1, 0), (5, 5), (-4, 2)})
        assert cluster_count(live, hex_grid) == 3

    def test_graph_edges_follow_adjacency(self, complete_graph_grid) -> None:
        graph = adjacency_graph(frozenset({"a", "b", "c"}), complete_graph_grid)
        assert graph.number_of_nodes() == 3
        assert graph.number_of_edges() == 3


class TestPentagonCount:
    def test_graph_pentagon(self, pentagon_grid) -> None:
        assert pentagon_count(frozenset({"p", "n0"}), pentagon_grid) == 1

    def test_hex_grid_has_none(self, hex_grid) -> None:
        assert pentagon_count(frozenset({(0, 0), (3, 3)}), hex_grid) == 0

    def test_h3_pentagons(self) -> None:
        pentagons = set(h3.get_pentagons(1))
        ordinary = h3.latlng_to_cell(48.85, 2.35, 1)
        assert pentagon_count(frozenset(pentagons | {ordinary}), H3Grid()) == len(pentagons)


def test_population_delta() -> None:
    previous = frozenset({"a", "b", "c"})
    current = frozenset({"b", "c", "d", "e"})
    assert population_delta(previous, current) == (2, 1)
