"""Breadth-first search primitives over an adjacency list."""

from collections import deque
from collections.abc import Iterator
from concurrent.futures import Executor, ProcessPoolExecutor
from functools import partial

from degrees_of_separation.graph.types import UNREACHABLE, AdjacencyList, DistanceTable, NodeId

# Start nodes handed to each worker process per task.
PROCESS_POOL_CHUNKSIZE = 64

# Adjacency loaded into a worker process by load_worker_adjacency.
_worker_adjacency: AdjacencyList | None = None


def bfs_distances(adjacency: AdjacencyList, start: NodeId) -> DistanceTable:
    """
    Compute hop distances from start to every node.

    Nodes not connected to start keep UNREACHABLE.
    """
    distances = [UNREACHABLE] * len(adjacency)
    distances[start] = 0
    queue = deque([start])

    while queue:
        node = queue.popleft()
        next_distance = distances[node] + 1
        for neighbor in adjacency[node]:
            # A set distance doubles as the discovered mark.
            if distances[neighbor] == UNREACHABLE:
                distances[neighbor] = next_distance
                queue.append(neighbor)

    return distances


def load_worker_adjacency(adjacency: AdjacencyList) -> None:
    """Process-pool initializer: keep the adjacency for the life of the worker."""
    global _worker_adjacency
    _worker_adjacency = adjacency


def worker_bfs_distances(start: NodeId) -> DistanceTable:
    """Run bfs_distances against the adjacency loaded into this worker."""
    if _worker_adjacency is None:
        raise RuntimeError("worker adjacency not loaded; use load_worker_adjacency")
    return bfs_distances(_worker_adjacency, start)


def iter_distance_tables(
    adjacency: AdjacencyList,
    executor: Executor | None = None,
) -> Iterator[DistanceTable]:
    """
    Yield the BFS distance table of every start node in node-ID order.

    Runs serially when no executor is given. Each run only reads the
    adjacency, so any executor produces the same tables. A process pool must
    be created with load_worker_adjacency as its initializer, so tasks carry
    only start nodes instead of the whole adjacency.
    """
    starts = range(len(adjacency))

    if executor is None:
        yield from map(partial(bfs_distances, adjacency), starts)
    elif isinstance(executor, ProcessPoolExecutor):
        yield from executor.map(worker_bfs_distances, starts, chunksize=PROCESS_POOL_CHUNKSIZE)
    else:
        yield from executor.map(partial(bfs_distances, adjacency), starts)
