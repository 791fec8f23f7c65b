"""
Connectivity and degree-of-separation analyses.

Every analysis runs a BFS from each node, so the cost is O(V * (V + E)).
Pass an executor to spread the per-node runs across workers.
"""

import math
from concurrent.futures import Executor

from degrees_of_separation.errors import EmptyGraphError
from degrees_of_separation.graph.bfs import iter_distance_tables
from degrees_of_separation.graph.types import (
    UNREACHABLE,
    AdjacencyList,
    SeparationDistribution,
    SeparationStatistics,
)


def _require_nodes(adjacency: AdjacencyList) -> None:
    if not adjacency:
        raise EmptyGraphError("graph has no nodes")


def population_std_dev(total: float, total_sq: float, count: int) -> float:
    """Population standard deviation from a sum, a sum of squares and a count."""
    # Cancellation can push a zero variance slightly negative.
    variance = max((total_sq - total * total / count) / count, 0.0)
    return math.sqrt(variance)


def bfs_connectivity(
    adjacency: AdjacencyList,
    executor: Executor | None = None,
) -> list[int]:
    """Count the nodes reachable from each node, the node itself included."""
    _require_nodes(adjacency)

    return [
        sum(1 for distance in distances if distance != UNREACHABLE)
        for distances in iter_distance_tables(adjacency, executor)
    ]


def average_shortest_path_length(
    adjacency: AdjacencyList,
    executor: Executor | None = None,
) -> float:
    """
    Average every finite BFS distance over all start nodes.

    Each node's zero distance to itself is part of the count.
    """
    _require_nodes(adjacency)

    total_distance = 0
    path_count = 0
    for distances in iter_distance_tables(adjacency, executor):
        for distance in distances:
            if distance != UNREACHABLE:
                total_distance += distance
                path_count += 1

    if path_count == 0:
        return 0.0
    return total_distance / path_count


def separation_distribution_and_max(
    adjacency: AdjacencyList,
    executor: Executor | None = None,
) -> SeparationDistribution:
    """
    Percentage of node pairs at each degree of separation.

    Index d of the result holds the share for distance d. Counts come from
    every start node, so each unordered pair contributes twice against a
    denominator of V(V-1)/2. The most common degree is the lowest one
    reaching the maximum share.
    """
    _require_nodes(adjacency)

    node_count = len(adjacency)
    total_pairs = node_count * (node_count - 1) // 2
    counts = [0] * node_count

    for distances in iter_distance_tables(adjacency, executor):
        for distance in distances:
            if 0 < distance < node_count:
                counts[distance] += 1

    if total_pairs == 0:
        percentages = [0.0] * node_count
    else:
        percentages = [100.0 * count / total_pairs for count in counts]

    max_degree = max(range(node_count), key=percentages.__getitem__)
    return SeparationDistribution(percentages, max_degree, percentages[max_degree])


def separation_statistics(
    adjacency: AdjacencyList,
    executor: Executor | None = None,
) -> SeparationStatistics:
    """
    Mean and population standard deviation of all finite separations.

    Self distances of zero are included.
    """
    _require_nodes(adjacency)

    total = 0.0
    total_sq = 0.0
    count = 0

    for distances in iter_distance_tables(adjacency, executor):
        for distance in distances:
            if distance >= 0:
                total += distance
                total_sq += distance * distance
                count += 1

    return SeparationStatistics(total / count, population_std_dev(total, total_sq, count))
