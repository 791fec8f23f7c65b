"""Shared type definitions for graph processing."""

from dataclasses import dataclass
from typing import TypeAlias

NodeId: TypeAlias = int
EdgeRecord: TypeAlias = tuple[NodeId, NodeId]
AdjacencyList: TypeAlias = list[set[NodeId]]
DistanceTable: TypeAlias = list[int]

# Distance assigned to nodes the BFS never reaches.
UNREACHABLE = -1


@dataclass(frozen=True, slots=True)
class SeparationDistribution:
    """Share of node pairs at each degree of separation, in percent."""

    percentages: list[float]
    max_degree: int
    max_percentage: float


@dataclass(frozen=True, slots=True)
class SeparationStatistics:
    """Mean and population standard deviation of all finite separations."""

    mean: float
    std_dev: float
