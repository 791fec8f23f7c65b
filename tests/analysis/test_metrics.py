"""Tests for the connectivity and separation analyses."""

import math
from concurrent.futures import ThreadPoolExecutor

import pytest

from degrees_of_separation.analysis import (
    average_shortest_path_length,
    bfs_connectivity,
    separation_distribution_and_max,
    separation_statistics,
)
from degrees_of_separation.analysis.metrics import population_std_dev
from degrees_of_separation.errors import EmptyGraphError
from degrees_of_separation.graph.build import build_adjacency

ANALYSES = [
    bfs_connectivity,
    average_shortest_path_length,
    separation_distribution_and_max,
    separation_statistics,
]


def _line_of_three():
    # 0 - 1 - 2
    return build_adjacency([0, 1], [1, 2])


def _mixed_graph():
    # Triangle 0-1-2 with tail 2-3-4, a separate pair 5-6 and isolated 7.
    return build_adjacency([0, 1, 2, 2, 3, 5], [1, 2, 0, 3, 4, 6], size=8)


@pytest.mark.parametrize("analysis", ANALYSES)
def test_empty_graph_raises(analysis) -> None:
    with pytest.raises(EmptyGraphError):
        analysis([])


class TestConnectivity:
    """Test cases for bfs_connectivity."""

    def test_counts_include_start_node(self) -> None:
        # Path 2-3-4-5; reachable counts include the start itself.
        adjacency = build_adjacency([2, 3, 4], [3, 4, 5])
        connectivity = bfs_connectivity(adjacency)

        assert connectivity == [1, 1, 4, 4, 4, 4]
        # Node 2 reaches three other nodes.
        assert connectivity[2] - 1 == 3

    def test_unconnected_node_reaches_only_itself(self) -> None:
        adjacency = build_adjacency([1], [2], size=4)
        assert bfs_connectivity(adjacency)[3] == 1

    def test_every_node_reaches_at_least_itself(self) -> None:
        assert all(count >= 1 for count in bfs_connectivity(_mixed_graph()))

    def test_component_sizes(self) -> None:
        assert bfs_connectivity(_mixed_graph()) == [5, 5, 5, 5, 5, 2, 2, 1]


class TestAverageShortestPathLength:
    """Test cases for average_shortest_path_length."""

    def test_line_of_three(self) -> None:
        # Nine finite observations (three of them self distances) summing to 8.
        assert average_shortest_path_length(_line_of_three()) == pytest.approx(8 / 9)

    def test_single_node(self) -> None:
        assert average_shortest_path_length([set()]) == 0.0

    def test_matches_separation_statistics_mean(self) -> None:
        adjacency = _mixed_graph()
        average = average_shortest_path_length(adjacency)
        assert average == pytest.approx(separation_statistics(adjacency).mean)


class TestSeparationDistribution:
    """Test cases for separation_distribution_and_max."""

    def test_line_of_three(self) -> None:
        result = separation_distribution_and_max(_line_of_three())

        assert result.percentages == pytest.approx([0.0, 400 / 3, 200 / 3])
        assert result.max_degree == 1
        assert result.max_percentage == pytest.approx(400 / 3)

    def test_tie_goes_to_lowest_degree(self) -> None:
        # Star centred on 0: six observations at distance 1 and six at 2.
        result = separation_distribution_and_max(build_adjacency([0, 0, 0], [1, 2, 3]))

        assert result.percentages[1] == result.percentages[2]
        assert result.max_degree == 1

    def test_single_node_has_no_pairs(self) -> None:
        result = separation_distribution_and_max([set()])

        assert result.percentages == [0.0]
        assert result.max_degree == 0
        assert result.max_percentage == 0.0

    def test_table_has_one_slot_per_node(self) -> None:
        adjacency = _mixed_graph()
        result = separation_distribution_and_max(adjacency)

        assert len(result.percentages) == len(adjacency)
        assert result.percentages[0] == 0.0


class TestSeparationStatistics:
    """Test cases for separation_statistics."""

    def test_line_of_three(self) -> None:
        result = separation_statistics(_line_of_three())

        assert result.mean == pytest.approx(8 / 9)
        assert result.std_dev == pytest.approx(math.sqrt(44) / 9)

    def test_uses_population_formula(self) -> None:
        # Observations 0, 1, 1, 0: population std-dev is 0.5.
        result = separation_statistics(build_adjacency([0], [1]))

        assert result.mean == pytest.approx(0.5)
        assert result.std_dev == pytest.approx(0.5)

    def test_isolated_nodes_have_zero_deviation(self) -> None:
        result = separation_statistics([set(), set(), set()])

        assert result.mean == 0.0
        assert result.std_dev == 0.0
        assert not math.isnan(result.std_dev)

    def test_negative_variance_from_cancellation_clamps_to_zero(self) -> None:
        # Sum of squares slightly below sum**2 / count, as rounding can leave it.
        std_dev = population_std_dev(3.0, 2.9999999, 3)

        assert std_dev == 0.0
        assert not math.isnan(std_dev)

    def test_population_std_dev_formula(self) -> None:
        # Observations 2, 4, 4, 4, 5, 5, 7, 9: population std-dev is 2.
        assert population_std_dev(40.0, 232.0, 8) == pytest.approx(2.0)


@pytest.mark.parametrize("analysis", ANALYSES)
def test_thread_pool_gives_same_results(analysis) -> None:
    adjacency = _mixed_graph()
    with ThreadPoolExecutor(max_workers=3) as executor:
        assert analysis(adjacency, executor) == analysis(adjacency)
