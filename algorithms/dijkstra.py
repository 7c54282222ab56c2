"""
dijkstra.py - Instrumented Dijkstra
===================================
Runs Dijkstra's algorithm over a GraphModel and records every decision as
a TraceStep.  The whole Trace is produced eagerly; nothing is observable
until the run has finished.

Emits, in order:
  1. indicate-start                      - nothing computed yet
  2. set-infinity                        - every distance = ∞
  3. set-start-zero                      - dist[start] = 0
  4. per selected node:
       visit-node
       per unvisited neighbour (edge order):
         check-neighbor → compare-neighbor → update / not-update
       mark-as-visited
  5. complete                            - plus the edges outside the tree

Selection is a linear scan over `graph.vertices`, which makes the run
O(V² + E) and gives the tie-break for free: among equal distances the
vertex listed first wins.  Unreachable vertices are still selected once the
reachable ones are exhausted; `inf + w` is `inf`, so they never relax
anything.

Correctness note: Dijkstra requires non-negative weights.  GraphModel
rejects anything else at construction.
"""

import logging
from typing import Dict, List, Optional, Set, Tuple

from graph import Edge, GraphModel, GraphNode, InvalidStartError
from algorithms.step import (
    INFINITY,
    CheckNeighbor,
    CompareNeighbor,
    Complete,
    Distance,
    IndicateStart,
    MarkAsVisited,
    NotUpdateNeighborWeight,
    SetInfinity,
    SetStartZero,
    Snapshot,
    StepKind,
    Trace,
    TraceStep,
    UpdateNeighborWeight,
    VisitNode,
)


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pseudocode (shown by the terminal host next to the narration)
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, start):",                       # 0
    "    dist ← {v: ∞ for v in V}",                      # 1
    "    dist[start] ← 0",                               # 2
    "    while some v is unvisited:",                    # 3
    "        u ← unvisited v with min dist[v]",          # 4
    "        for (u, t, w) in edges(u), t unvisited:",   # 5
    "            new ← dist[u] + w",                     # 6
    "            if new < dist[t]:",                     # 7
    "                dist[t] ← new; pred[t] ← u",        # 8
    "        visited.add(u)",                            # 9
    "    return dist, pred",                             # 10
]

# step kind → pseudocode line it corresponds to
PSEUDOCODE_LINE: Dict[StepKind, int] = {
    StepKind.INDICATE_START:             0,
    StepKind.SET_INFINITY:               1,
    StepKind.SET_START_ZERO:             2,
    StepKind.VISIT_NODE:                 4,
    StepKind.CHECK_NEIGHBOR:             5,
    StepKind.COMPARE_NEIGHBOR:           7,
    StepKind.UPDATE_NEIGHBOR_WEIGHT:     8,
    StepKind.NOT_UPDATE_NEIGHBOR_WEIGHT: 7,
    StepKind.MARK_AS_VISITED:            9,
    StepKind.COMPLETE:                   10,
}


# ---------------------------------------------------------------------------
# Live state
# ---------------------------------------------------------------------------
class _RunState:
    """
    Mutable scratch-pad owned by one run.  Only `snapshot()` lets anything
    out, and it always copies.
    """

    def __init__(self):
        self.visited:      Set[GraphNode]             = set()
        self.predecessors: Dict[GraphNode, GraphNode] = {}
        self.distances:    Dict[GraphNode, Distance]  = {}
        self.steps:        List[TraceStep]            = []

    def snapshot(self) -> Snapshot:
        return Snapshot.capture(self.visited, self.predecessors, self.distances)

    def emit(self, step_type, **payload) -> None:
        self.steps.append(step_type(snapshot=self.snapshot(), **payload))


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def generate_trace(graph: GraphModel, start: GraphNode) -> Trace:
    """
    Run the instrumented algorithm from `start`.

    Raises:
        InvalidStartError: `start` is not one of `graph.vertices`.
    """
    if not graph.has_vertex(start):
        raise InvalidStartError(f"Start node {start!r} is not in the graph")
    # use the graph's own vertex, whatever label the caller's copy carries
    start = graph.get_vertex(start.id)

    run = _RunState()

    run.emit(IndicateStart, node=start)

    for node in graph.vertices:
        run.distances[node] = INFINITY
    run.emit(SetInfinity, nodes=graph.vertices)

    run.distances[start] = 0
    run.emit(SetStartZero, node=start)

    while len(run.visited) < len(graph.vertices):
        selected = _closest_unvisited(graph, run)
        run.emit(VisitNode, node=selected)

        for edge in graph.incident_edges(selected):
            target = edge.other_end(selected)
            if target in run.visited:
                continue

            run.emit(CheckNeighbor, source=selected, neighbor=target)

            existing = run.distances[target]
            computed = run.distances[selected] + edge.weight
            relaxation = dict(
                source=selected,
                neighbor=target,
                computed_distance=computed,
                existing_distance=existing,
            )
            run.emit(CompareNeighbor, **relaxation)

            if computed < existing:
                run.distances[target] = computed
                run.predecessors[target] = selected
                run.emit(UpdateNeighborWeight, **relaxation)
            else:
                run.emit(NotUpdateNeighborWeight, **relaxation)

        run.visited.add(selected)
        pred = run.predecessors.get(selected)
        run.emit(MarkAsVisited, node=selected, edge=(pred, selected) if pred is not None else None)

    run.emit(Complete, node=start, unused_edges=tuple(_unused_edges(graph, run.predecessors)))

    logger.debug("Generated %d steps from start %s", len(run.steps), start.name)
    return Trace(graph, start, tuple(run.steps))


class TraceGenerator:
    """Object form of `generate_trace`, for hosts that want to inject one."""

    def generate(self, graph: GraphModel, start: GraphNode) -> Trace:
        return generate_trace(graph, start)


# ---------------------------------------------------------------------------
# Plain run (no instrumentation)
# ---------------------------------------------------------------------------
def shortest_distances(
    graph: GraphModel,
    start: GraphNode,
) -> Tuple[Dict[GraphNode, Distance], Dict[GraphNode, GraphNode]]:
    """Same algorithm, same tie-break, but only returns (distances, predecessors)."""
    if not graph.has_vertex(start):
        raise InvalidStartError(f"Start node {start!r} is not in the graph")

    run = _RunState()
    run.distances = {node: INFINITY for node in graph.vertices}
    run.distances[start] = 0

    while len(run.visited) < len(graph.vertices):
        selected = _closest_unvisited(graph, run)
        for target, edge in graph.neighbours(selected):
            if target in run.visited:
                continue
            computed = run.distances[selected] + edge.weight
            if computed < run.distances[target]:
                run.distances[target] = computed
                run.predecessors[target] = selected
        run.visited.add(selected)

    return run.distances, run.predecessors


# ---------------------------------------------------------------------------
def _closest_unvisited(graph: GraphModel, run: _RunState) -> GraphNode:
    best: Optional[GraphNode] = None
    for node in graph.vertices:
        if node in run.visited:
            continue
        # strict < keeps the earliest vertex on ties, including ties at ∞
        if best is None or run.distances[node] < run.distances[best]:
            best = node
    return best


def _unused_edges(graph: GraphModel, predecessors: Dict[GraphNode, GraphNode]) -> List[Edge]:
    unused = []
    for edge in graph.edges:
        left, right = edge.node_a, edge.node_b
        if predecessors.get(right) == left or predecessors.get(left) == right:
            continue
        unused.append(edge)
    return unused
