"""
bellman_ford.py - Bellman-Ford Reference
========================================
Brute-force single-source shortest paths, kept as an independent oracle
for the instrumented Dijkstra.  It shares no code with dijkstra.py.

Structure:
  • V-1 rounds of relaxing every edge in BOTH directions (undirected).
  • Early exit when a full round changes nothing.

No trace, no tie-break: only the final distance of each vertex matters.
"""

import math
from typing import Dict, List, Tuple

from graph import GraphModel, GraphNode, InvalidStartError
from algorithms.step import Distance


def bellman_ford_distances(graph: GraphModel, start: GraphNode) -> Dict[GraphNode, Distance]:
    if not graph.has_vertex(start):
        raise InvalidStartError(f"Start node {start!r} is not in the graph")

    dist: Dict[GraphNode, Distance] = {node: math.inf for node in graph.vertices}
    dist[start] = 0

    # each undirected edge as two directed arcs
    arcs: List[Tuple[GraphNode, GraphNode, Distance]] = []
    for edge in graph.edges:
        arcs.append((edge.node_a, edge.node_b, edge.weight))
        arcs.append((edge.node_b, edge.node_a, edge.weight))

    for _ in range(len(graph.vertices) - 1):
        changed = False
        for u, v, w in arcs:
            if dist[u] == math.inf:
                continue   # can't relax from an unreachable node
            if dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                changed = True
        if not changed:
            break

    return dist
