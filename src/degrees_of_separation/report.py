"""Console rendering of analysis results."""

from dataclasses import dataclass

from degrees_of_separation.graph.types import SeparationDistribution, SeparationStatistics

SEPARATOR = "----------------"


@dataclass(frozen=True, slots=True)
class AnalysisReport:
    """Results of all four analyses for one graph."""

    node_count: int
    edge_count: int
    connectivity: list[int]
    average_path_length: float
    distribution: SeparationDistribution
    statistics: SeparationStatistics


def trim_distribution(percentages: list[float]) -> list[float]:
    """Drop the zero entries after the last non-zero percentage."""
    end = len(percentages)
    while end > 0 and percentages[end - 1] == 0.0:
        end -= 1
    return percentages[:end]


def render_report(report: AnalysisReport) -> list[str]:
    """Format a report as console lines."""
    distribution = trim_distribution(report.distribution.percentages)
    max_separation = max(len(distribution) - 1, 0)

    return [
        f"Connectivity: {report.connectivity}",
        SEPARATOR,
        f"Average Shortest Path Length: {report.average_path_length}",
        SEPARATOR,
        f"Separation Distribution (up to {max_separation} degrees): {distribution}",
        SEPARATOR,
        f"Degree of Separation with the maximum percentage: {report.distribution.max_degree}",
        f"Maximum percentage of valid connections: {report.distribution.max_percentage}",
        f"Mean of Separations: {report.statistics.mean}",
        f"Standard Deviation of Separations: {report.statistics.std_dev}",
    ]
