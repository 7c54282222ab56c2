"""
algorithms/
-----------
Trace generation and reference shortest-path routines.

    from algorithms import generate_trace, Trace, StepKind
    from algorithms import shortest_distances, bellman_ford_distances
"""

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
from algorithms.dijkstra     import (
    PSEUDOCODE,
    PSEUDOCODE_LINE,
    TraceGenerator,
    generate_trace,
    shortest_distances,
)
from algorithms.bellman_ford import bellman_ford_distances

__all__ = [
    "INFINITY",
    "Distance",
    "Snapshot",
    "StepKind",
    "Trace",
    "TraceStep",
    "IndicateStart",
    "SetInfinity",
    "SetStartZero",
    "VisitNode",
    "CheckNeighbor",
    "CompareNeighbor",
    "UpdateNeighborWeight",
    "NotUpdateNeighborWeight",
    "MarkAsVisited",
    "Complete",
    "PSEUDOCODE",
    "PSEUDOCODE_LINE",
    "TraceGenerator",
    "generate_trace",
    "shortest_distances",
    "bellman_ford_distances",
]
