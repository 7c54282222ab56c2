"""
graph.py - Graph Container
==========================
Single source of truth for the graph.  The trace generator, the stepper and
the renderer all read from this object; none of them writes to it.

Responsibilities:
  1. Validate vertices & edges at construction   (ids, endpoints, weights)
  2. Adjacency queries                           (incident_edges, neighbours, ...)
  3. Factory class-methods                       (example, from_edges, random)

Design decisions:
  - Vertices and edges are kept as tuples in the order they were given.
    That order is observable: the minimum-distance tie-break and the order
    in which neighbours are checked both follow it.
  - A per-vertex incidence index `_incident[node] -> [edge, ...]` is built
    once so incident-edge queries are O(degree), not O(E).  A self-loop is
    listed once.
  - The model is immutable after construction; there is no CRUD.
"""

import math
import numbers
import random
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from graph.edge import Edge, Weight
from graph.errors import DuplicateVertexError, InvalidWeightError, UnknownVertexError
from graph.node import GraphNode


class GraphModel:
    """
    Attributes:
        vertices   : Ordered tuple of GraphNode.
        edges      : Ordered tuple of Edge.
        _by_id     : {node_id: GraphNode}
        _incident  : {GraphNode: [Edge, ...]}  in edge order
    """

    def __init__(self, vertices: Iterable[GraphNode], edges: Iterable[Edge] = ()):
        self.vertices: Tuple[GraphNode, ...] = tuple(vertices)
        self.edges:    Tuple[Edge, ...]      = tuple(edges)

        self._by_id:    Dict[int, GraphNode]         = {}
        self._incident: Dict[GraphNode, List[Edge]] = {}

        for node in self.vertices:
            if node.id in self._by_id:
                raise DuplicateVertexError(f"Duplicate vertex id: {node.id}")
            self._by_id[node.id] = node
            self._incident[node] = []

        for edge in self.edges:
            _check_weight(edge)
            for end in edge.endpoints:
                if end not in self._incident:
                    raise UnknownVertexError(f"{edge!r} references unknown vertex {end!r}")
            self._incident[edge.node_a].append(edge)
            if edge.node_b != edge.node_a:
                self._incident[edge.node_b].append(edge)

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def incident_edges(self, node: GraphNode) -> List[Edge]:
        """Every edge with `node` at either end, in edge order."""
        return list(self._incident.get(node, []))

    def neighbours(self, node: GraphNode) -> List[Tuple[GraphNode, Edge]]:
        """Return [(neighbour, edge)] for every incident edge."""
        return [(edge.other_end(node), edge) for edge in self._incident.get(node, [])]

    def has_vertex(self, node: GraphNode) -> bool:
        return node in self._incident

    def get_vertex(self, node_id: int) -> Optional[GraphNode]:
        return self._by_id.get(node_id)

    def find_vertex(self, name: str) -> Optional[GraphNode]:
        """Look a vertex up by its display name (label, or id when unlabelled)."""
        for node in self.vertices:
            if node.name == name:
                return node
        return None

    # ==================================================================
    # FACTORIES
    # ==================================================================
    @classmethod
    def from_edges(
        cls,
        labels: Sequence[str],
        triples: Iterable[Tuple[str, str, Weight]],
    ) -> "GraphModel":
        """
        Build a graph from vertex labels and (label, label, weight) triples.
        Vertices get ids 0..n-1 in the order the labels are given.
        """
        nodes = [GraphNode(i, label) for i, label in enumerate(labels)]
        by_label = {node.label: node for node in nodes}
        edges = []
        for left, right, weight in triples:
            if left not in by_label or right not in by_label:
                missing = left if left not in by_label else right
                raise UnknownVertexError(f"Edge {left}-{right} references unknown vertex {missing!r}")
            edges.append(Edge(by_label[left], by_label[right], weight))
        return cls(nodes, edges)

    @classmethod
    def example(cls) -> "GraphModel":
        """The six-vertex demo graph the visualizer opens with."""
        return cls.from_edges(
            ["A", "B", "C", "D", "E", "F"],
            [
                ("A", "B", 9),
                ("A", "C", 2),
                ("A", "D", 4),
                ("C", "D", 1),
                ("C", "E", 3),
                ("E", "D", 3),
                ("E", "B", 4),
                ("B", "D", 4),
                ("B", "F", 3),
                ("E", "F", 6),
            ],
        )

    @classmethod
    def generate_random(
        cls,
        num_nodes: int = 8,
        edge_probability: float = 0.3,
        weight_range: Tuple[int, int] = (1, 10),
        seed: Optional[int] = None,
        connected: bool = True,
    ) -> "GraphModel":
        """
        Erdős-Rényi style random graph.
        Each possible edge is included with probability `edge_probability`.
        With `connected`, a shuffled spanning path is added so every vertex
        is reachable from every other.
        """
        rng = random.Random(seed)
        nodes = [GraphNode(i, _spreadsheet_label(i)) for i in range(num_nodes)]
        edges: List[Edge] = []

        for i in range(num_nodes):
            for j in range(i + 1, num_nodes):
                if rng.random() < edge_probability:
                    edges.append(Edge(nodes[i], nodes[j], rng.randint(*weight_range)))

        if connected:
            shuffled = list(nodes)
            rng.shuffle(shuffled)
            for k in range(1, len(shuffled)):
                a, b = shuffled[k - 1], shuffled[k]
                if not any(e.connects(a, b) for e in edges):
                    edges.append(Edge(a, b, rng.randint(*weight_range)))

        return cls(nodes, edges)

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self.vertices)

    def edge_count(self) -> int:
        return len(self.edges)

    def __repr__(self) -> str:
        return f"GraphModel(nodes={self.node_count()}, edges={self.edge_count()})"


# ---------------------------------------------------------------------------
def _check_weight(edge: Edge) -> None:
    w = edge.weight
    if isinstance(w, bool) or not isinstance(w, numbers.Real):
        raise InvalidWeightError(f"{edge!r}: weight must be a real number, got {type(w).__name__}")
    if not math.isfinite(w) or w < 0:
        raise InvalidWeightError(f"{edge!r}: weight must be finite and non-negative")


def _spreadsheet_label(index: int) -> str:
    """0 → A, 25 → Z, 26 → AA, ..."""
    label = ""
    index += 1
    while index:
        index, rem = divmod(index - 1, 26)
        label = chr(ord("A") + rem) + label
    return label
