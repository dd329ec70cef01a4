"""Metrics computed per generation by the simulation driver."""

from hexlife.metrics.spatial import (
    adjacency_graph,
    cluster_count,
    pentagon_count,
    population_delta,
)

__all__ = [
    "adjacency_graph",
    "cluster_count",
    "pentagon_count",
    "population_delta",
]
