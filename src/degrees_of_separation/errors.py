"""Errors raised by graph construction and analysis."""


class GraphError(ValueError):
    """Base class for graph construction and analysis failures."""


class InvalidInputError(GraphError):
    """Raised when the edge lists cannot produce an adjacency structure."""


class EmptyGraphError(GraphError):
    """Raised when an analysis is handed an adjacency with no nodes."""
