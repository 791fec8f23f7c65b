"""Connectivity and separation analyses."""

from degrees_of_separation.analysis.metrics import (
    average_shortest_path_length,
    bfs_connectivity,
    separation_distribution_and_max,
    separation_statistics,
)

__all__ = [
    "average_shortest_path_length",
    "bfs_connectivity",
    "separation_distribution_and_max",
    "separation_statistics",
]
