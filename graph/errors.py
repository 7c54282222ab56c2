"""
errors.py - Exception Types
===========================
Every error the visualizer raises on purpose derives from VisualizerError,
so a host can report them uniformly.  The ValueError mix-in keeps them
catchable by callers that only know about builtin exceptions.
"""


class VisualizerError(Exception):
    """Base class for all package-specific errors."""


class GraphError(VisualizerError, ValueError):
    """Raised when a GraphModel cannot be built from the given parts."""


class DuplicateVertexError(GraphError):
    """Two vertices share the same id."""


class UnknownVertexError(GraphError):
    """An edge references a vertex that is not part of the graph."""


class InvalidWeightError(GraphError):
    """Edge weight is negative, NaN, infinite or not a real number."""


class InvalidStartError(VisualizerError, ValueError):
    """The requested start vertex is not among the graph's vertices."""


__all__ = [
    "VisualizerError",
    "GraphError",
    "DuplicateVertexError",
    "UnknownVertexError",
    "InvalidWeightError",
    "InvalidStartError",
]
