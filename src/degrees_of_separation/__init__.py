"""Degrees of Separation - connectivity and shortest-path metrics for edge lists."""

from degrees_of_separation.runner.analyze import analyze, main_analyze

__all__ = ["analyze", "main_analyze"]
