"""
graph/
-----
Core data layer.  Public API:

    from graph import GraphModel, GraphNode, Edge
    from graph import GraphError, InvalidStartError
"""

from graph.node   import GraphNode
from graph.edge   import Edge
from graph.graph  import GraphModel
from graph.errors import (
    VisualizerError,
    GraphError,
    DuplicateVertexError,
    UnknownVertexError,
    InvalidWeightError,
    InvalidStartError,
)

__all__ = [
    "GraphNode",
    "Edge",
    "GraphModel",
    "VisualizerError",
    "GraphError",
    "DuplicateVertexError",
    "UnknownVertexError",
    "InvalidWeightError",
    "InvalidStartError",
]
