"""Graph construction utilities for undirected edge lists."""

from collections.abc import Sequence

from degrees_of_separation.errors import InvalidInputError
from degrees_of_separation.graph.types import AdjacencyList, NodeId


def build_adjacency(
    sources: Sequence[NodeId],
    targets: Sequence[NodeId],
    size: int | None = None,
) -> AdjacencyList:
    """
    Build an undirected adjacency list from parallel source/target lists.

    The list is indexed by node ID and sized to max(ID) + 1 unless an
    explicit size is given. Self-loops are dropped, duplicate edges collapse
    into the neighbor sets, and pairs with an ID outside the sized range are
    skipped.
    """
    if not sources:
        raise InvalidInputError("cannot build adjacency from an empty node list")
    if len(sources) != len(targets):
        raise InvalidInputError(
            f"source and target lists differ in length: {len(sources)} != {len(targets)}"
        )

    if size is None:
        size = max(max(sources), max(targets)) + 1

    adjacency: AdjacencyList = [set() for _ in range(size)]

    for node, edge in zip(sources, targets):
        if node == edge:
            continue
        if 0 <= node < size and 0 <= edge < size:
            adjacency[node].add(edge)
            adjacency[edge].add(node)

    return adjacency


def count_edges(adjacency: AdjacencyList) -> int:
    """Return the number of distinct undirected edges."""
    return sum(len(neighbors) for neighbors in adjacency) // 2
