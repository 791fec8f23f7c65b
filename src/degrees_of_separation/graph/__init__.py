"""Edge-list parsing, adjacency construction and BFS."""

from degrees_of_separation.graph.bfs import bfs_distances, iter_distance_tables
from degrees_of_separation.graph.build import build_adjacency
from degrees_of_separation.graph.parse import read_edge_file

__all__ = ["bfs_distances", "build_adjacency", "iter_distance_tables", "read_edge_file"]
