import logging
import os
import time
from collections.abc import Callable
from concurrent.futures import Executor
from pathlib import Path
from typing import TypeVar

from degrees_of_separation.analysis import (
    average_shortest_path_length,
    bfs_connectivity,
    separation_distribution_and_max,
    separation_statistics,
)
from degrees_of_separation.graph.build import build_adjacency, count_edges
from degrees_of_separation.graph.parse import ReadStats, read_edge_file
from degrees_of_separation.graph.types import AdjacencyList
from degrees_of_separation.report import AnalysisReport, render_report
from degrees_of_separation.runner.execution import (
    DOS_EXECUTOR_ENV,
    create_executor,
    describe_executor,
    get_executor_class,
    is_gil_enabled,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def analyze_adjacency(
    adjacency: AdjacencyList,
    executor: Executor | None = None,
) -> AnalysisReport:
    """Run all four analyses against an adjacency list, logging each stage."""
    timings: dict[str, float] = {}

    def timed(name: str, analysis: Callable[[AdjacencyList, Executor | None], T]) -> T:
        start = time.perf_counter()
        result = analysis(adjacency, executor)
        timings[name] = time.perf_counter() - start
        logger.debug("%s done in %.2fs", name, timings[name])
        return result

    connectivity = timed("connectivity", bfs_connectivity)
    average_path_length = timed("average path length", average_shortest_path_length)
    distribution = timed("distribution", separation_distribution_and_max)
    statistics = timed("statistics", separation_statistics)

    logger.info(
        "Analyses done in %.2fs (%s)",
        sum(timings.values()),
        ", ".join(f"{name}={elapsed:.2f}s" for name, elapsed in timings.items()),
    )

    return AnalysisReport(
        node_count=len(adjacency),
        edge_count=count_edges(adjacency),
        connectivity=connectivity,
        average_path_length=average_path_length,
        distribution=distribution,
        statistics=statistics,
    )


def analyze(
    input_path: str,
    executor_name: str | None = None,
    workers: int | None = None,
) -> AnalysisReport:
    """
    Load an edge list and compute its connectivity report.

    Stages:
    1. Read the comma-separated edge file, skipping malformed lines
    2. Build the undirected adjacency list
    3. Run the four BFS analyses, in parallel across start nodes when an
       executor is selected
    """
    total_start = time.perf_counter()
    input_file = Path(input_path)

    executor_class = get_executor_class(executor_name)
    policy = describe_executor(executor_class)
    gil_status = "enabled" if is_gil_enabled() else "disabled"
    workers_desc = "auto" if workers is None else str(workers)
    executor_override = os.environ.get(DOS_EXECUTOR_ENV, "")
    override_info = f", {DOS_EXECUTOR_ENV}={executor_override}" if executor_override else ""

    logger.info(
        f"Starting: file={input_file.name}, workers={workers_desc}, "
        f"executor={policy}, GIL={gil_status}{override_info}"
    )

    # Stage 1: read edges.
    t1_start = time.perf_counter()
    stats = ReadStats()
    sources, targets = read_edge_file(str(input_file), stats)
    t1 = time.perf_counter() - t1_start

    if stats.malformed_lines > 0:
        logger.warning(
            "Read: %d malformed lines skipped (read=%d, edges=%d)",
            stats.malformed_lines,
            stats.lines_read,
            stats.edges_read,
        )
    logger.info("Read done: %d edges in %.2fs", stats.edges_read, t1)

    # Stage 2: build adjacency.
    adjacency = build_adjacency(sources, targets)
    logger.info("Graph built: %d nodes, %d edges", len(adjacency), count_edges(adjacency))

    # Stage 3: analyses.
    if executor_class is None:
        report = analyze_adjacency(adjacency)
    else:
        with create_executor(executor_class, workers, adjacency) as executor:
            report = analyze_adjacency(adjacency, executor)

    total_time = time.perf_counter() - total_start
    logger.info("Result: %d nodes analysed (total %.2fs)", report.node_count, total_time)
    return report


def main_analyze(
    input_path: str,
    executor_name: str | None = None,
    workers: int | None = None,
) -> None:
    """Main entry point that prints the report to stdout."""
    report = analyze(input_path, executor_name=executor_name, workers=workers)
    for line in render_report(report):
        print(line)
