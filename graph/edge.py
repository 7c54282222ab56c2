"""
edge.py - Weighted Undirected Edge
==================================
An unordered (node_a, node_b, weight) triple.

Design decisions:
  - Endpoints are GraphNode values, not ids.  GraphNode hashes by id so
    this costs nothing and saves every caller a lookup.
  - There is no `directed` flag: the whole model is undirected, and every
    helper checks both endpoints.
  - Two Edge objects with identical endpoints and weight compare equal.
    Parallel edges are still kept apart by their position in the graph.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from graph.node import GraphNode


Weight = Union[int, float]


@dataclass(frozen=True)
class Edge:
    """
    Attributes:
        node_a : One endpoint.
        node_b : The other endpoint.
        weight : Non-negative real cost of traversing the edge.
    """

    node_a: GraphNode
    node_b: GraphNode
    weight: Weight

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def touches(self, node: GraphNode) -> bool:
        """True if `node` is either endpoint."""
        return self.node_a == node or self.node_b == node

    def other_end(self, node: GraphNode) -> Optional[GraphNode]:
        """Given one endpoint, return the other.  None if `node` isn't an endpoint."""
        if node == self.node_a:
            return self.node_b
        if node == self.node_b:
            return self.node_a
        return None

    def connects(self, a: GraphNode, b: GraphNode) -> bool:
        """True if this edge links a and b, in either order."""
        return (self.node_a == a and self.node_b == b) or (self.node_a == b and self.node_b == a)

    @property
    def endpoints(self) -> Tuple[GraphNode, GraphNode]:
        return self.node_a, self.node_b

    def __repr__(self) -> str:
        return f"Edge({self.node_a.name} ↔ {self.node_b.name}, w={self.weight})"
