"""
step.py - Trace Steps & Snapshots
=================================
The instrumented Dijkstra records every decision it makes as a TraceStep.
A TraceStep is a frozen-in-time picture of:

    • What just happened       (the step kind plus its payload)
    • Which nodes are settled  (snapshot.visited)
    • The predecessor tree     (snapshot.predecessors)
    • The distance table       (snapshot.distances)

Design decisions:
  - One frozen dataclass per step kind instead of one record with a
    free-form payload.  The set of kinds is closed; consumers dispatch on
    `step.kind` and can rely on the fields each kind carries.
  - A Snapshot is a SNAPSHOT.  `Snapshot.capture` copies the generator's
    live containers into a frozenset and read-only mapping proxies over
    fresh dicts, so later mutation of the live state can never reach back
    into an earlier step.
  - Trace is a read-only sequence over a tuple of steps.  It remembers the
    graph and start node it was generated for.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import (
    AbstractSet, ClassVar, Iterator, List, Mapping, Optional, Tuple, Union,
)

from graph import Edge, GraphModel, GraphNode


Distance = Union[int, float]
INFINITY: float = math.inf


# ---------------------------------------------------------------------------
# Step kinds
# ---------------------------------------------------------------------------
class StepKind(Enum):
    INDICATE_START             = "indicate-start"
    SET_INFINITY               = "set-infinity"
    SET_START_ZERO             = "set-start-zero"
    VISIT_NODE                 = "visit-node"
    CHECK_NEIGHBOR             = "check-neighbor"
    COMPARE_NEIGHBOR           = "compare-neighbor"
    UPDATE_NEIGHBOR_WEIGHT     = "update-neighbor-weight"
    NOT_UPDATE_NEIGHBOR_WEIGHT = "not-update-neighbor-weight"
    MARK_AS_VISITED            = "mark-as-visited"
    COMPLETE                   = "complete"


# ---------------------------------------------------------------------------
# Snapshot
# ---------------------------------------------------------------------------
def _frozen_mapping(data: Optional[Mapping] = None) -> Mapping:
    return MappingProxyType(dict(data or {}))


@dataclass(frozen=True)
class Snapshot:
    """
    Attributes:
        visited      : Nodes settled so far.
        predecessors : {node: node it was last relaxed from}
        distances    : {node: best known distance}, math.inf when unreached.
                       Empty before the set-infinity step.
    """

    visited:      AbstractSet[GraphNode]          = frozenset()
    predecessors: Mapping[GraphNode, GraphNode]   = field(default_factory=_frozen_mapping)
    distances:    Mapping[GraphNode, Distance]    = field(default_factory=_frozen_mapping)

    @classmethod
    def capture(
        cls,
        visited: AbstractSet[GraphNode],
        predecessors: Mapping[GraphNode, GraphNode],
        distances: Mapping[GraphNode, Distance],
    ) -> "Snapshot":
        """Copy live algorithm state into an independent, read-only snapshot."""
        return cls(
            visited=frozenset(visited),
            predecessors=_frozen_mapping(predecessors),
            distances=_frozen_mapping(distances),
        )

    def __hash__(self) -> int:
        # mapping proxies are unhashable; hash their frozen item sets instead
        return hash((
            self.visited,
            frozenset(self.predecessors.items()),
            frozenset(self.distances.items()),
        ))

    def distance(self, node: GraphNode) -> Optional[Distance]:
        """Distance of `node`, or None if the node has no entry yet."""
        return self.distances.get(node)

    def tree_edges(self) -> List[Tuple[GraphNode, GraphNode]]:
        """(predecessor, node) pairs whose both ends are settled."""
        return [
            (pred, node)
            for node, pred in self.predecessors.items()
            if node in self.visited and pred in self.visited
        ]


# ---------------------------------------------------------------------------
# Step variants
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class TraceStep:
    """Common base: every step carries the snapshot taken when it was emitted."""

    snapshot: Snapshot

    kind: ClassVar[StepKind]


@dataclass(frozen=True)
class IndicateStart(TraceStep):
    node: GraphNode

    kind: ClassVar[StepKind] = StepKind.INDICATE_START


@dataclass(frozen=True)
class SetInfinity(TraceStep):
    nodes: Tuple[GraphNode, ...]

    kind: ClassVar[StepKind] = StepKind.SET_INFINITY


@dataclass(frozen=True)
class SetStartZero(TraceStep):
    node: GraphNode

    kind: ClassVar[StepKind] = StepKind.SET_START_ZERO


@dataclass(frozen=True)
class VisitNode(TraceStep):
    node: GraphNode

    kind: ClassVar[StepKind] = StepKind.VISIT_NODE


@dataclass(frozen=True)
class CheckNeighbor(TraceStep):
    source:   GraphNode
    neighbor: GraphNode

    kind: ClassVar[StepKind] = StepKind.CHECK_NEIGHBOR


@dataclass(frozen=True)
class _Relaxation(TraceStep):
    """
    Shared payload of the compare / update / not-update steps.
    `existing_distance` is always the neighbour's distance BEFORE any update.
    """

    source:            GraphNode
    neighbor:          GraphNode
    computed_distance: Distance
    existing_distance: Distance


@dataclass(frozen=True)
class CompareNeighbor(_Relaxation):
    kind: ClassVar[StepKind] = StepKind.COMPARE_NEIGHBOR


@dataclass(frozen=True)
class UpdateNeighborWeight(_Relaxation):
    kind: ClassVar[StepKind] = StepKind.UPDATE_NEIGHBOR_WEIGHT


@dataclass(frozen=True)
class NotUpdateNeighborWeight(_Relaxation):
    kind: ClassVar[StepKind] = StepKind.NOT_UPDATE_NEIGHBOR_WEIGHT


@dataclass(frozen=True)
class MarkAsVisited(TraceStep):
    node: GraphNode
    edge: Optional[Tuple[GraphNode, GraphNode]]   # (predecessor, node), None for start / unreachable

    kind: ClassVar[StepKind] = StepKind.MARK_AS_VISITED


@dataclass(frozen=True)
class Complete(TraceStep):
    node:         GraphNode
    unused_edges: Tuple[Edge, ...]

    kind: ClassVar[StepKind] = StepKind.COMPLETE


# ---------------------------------------------------------------------------
# Trace
# ---------------------------------------------------------------------------
class Trace:
    """
    Immutable ordered record of one run.

    Attributes:
        graph : The graph the run was performed on.
        start : The start node.
        steps : Tuple of TraceStep, in emission order.
    """

    __slots__ = ("_graph", "_start", "_steps")

    def __init__(self, graph: GraphModel, start: GraphNode, steps: Tuple[TraceStep, ...]):
        self._graph = graph
        self._start = start
        self._steps = tuple(steps)

    @property
    def graph(self) -> GraphModel:
        return self._graph

    @property
    def start(self) -> GraphNode:
        return self._start

    @property
    def steps(self) -> Tuple[TraceStep, ...]:
        return self._steps

    def __len__(self) -> int:
        return len(self.steps)

    def __getitem__(self, index):
        return self.steps[index]

    def __iter__(self) -> Iterator[TraceStep]:
        return iter(self.steps)

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Trace)
            and self.start == other.start
            and self.steps == other.steps
        )

    def __hash__(self) -> int:
        return hash((self.start, self.steps))

    def kinds(self) -> List[StepKind]:
        return [s.kind for s in self.steps]

    @property
    def final(self) -> TraceStep:
        return self.steps[-1]

    def __repr__(self) -> str:
        return f"Trace(start={self.start.name}, steps={len(self.steps)})"
