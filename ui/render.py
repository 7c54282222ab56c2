"""
render.py - Render Contract
===========================
Turns the current TraceStep into visual state, without committing to any
drawing technology.  The output is a Scene: a flat store of
(target, attribute) → value that a host maps onto whatever it draws with
(the terminal host prints it as tables).

Targets:
  • ("node",  id)           - the vertex shape
  • ("label", id)           - the distance label beside the vertex
  • ("edge",  low, high)    - the edge between two vertices (parallel edges share one)
  • ("narration",)          - the sentence describing the step

Every render pass, in order:
  1. REVERT   - restore every attribute the previous pass changed
                transiently, from the ShadowBuffer, then empty it.
  2. PERSIST  - recompute everything derivable from the snapshot alone:
                distance labels, settled vertices, tree edges.
  3. APPLY    - step-kind specific highlights and narration, each write
                going through the ShadowBuffer so step 1 can undo it.

Because (2) depends only on the snapshot and (3) is always undone by the
next (1), rendering is idempotent, and reaching step i by any path
(next, prev, jump) yields the same Scene.
"""

from typing import Callable, Dict, Hashable, Optional, Tuple

from graph import GraphModel, GraphNode
from algorithms import Snapshot, StepKind, TraceStep
from ui.narration import INFINITY_GLYPH, format_distance, narrate


Target = Tuple[Hashable, ...]
AttrKey = Tuple[Target, str]

NARRATION: Target = ("narration",)


def node_target(node: GraphNode) -> Target:
    return ("node", node.id)


def label_target(node: GraphNode) -> Target:
    return ("label", node.id)


def edge_target(a: GraphNode, b: GraphNode) -> Target:
    low, high = sorted((a.id, b.id))
    return ("edge", low, high)


# ---------------------------------------------------------------------------
# Visual Config - colours & widths
# ---------------------------------------------------------------------------
class RenderConfig:
    # colours
    highlight: str = "green"    # the node / label the step is about
    neighbor:  str = "blue"     # the neighbour being checked
    settled:   str = "red"      # visited nodes & tree edges

    # stroke widths
    node_highlight_width:  str = "2"
    label_highlight_width: str = "1.2"

    infinity: str = INFINITY_GLYPH


CONFIG = RenderConfig()


# ---------------------------------------------------------------------------
# Scene
# ---------------------------------------------------------------------------
class Scene:
    """Attribute store.  A missing key means "attribute not set"."""

    def __init__(self):
        self._attrs: Dict[AttrKey, str] = {}

    def get(self, target: Target, attr: str) -> Optional[str]:
        return self._attrs.get((target, attr))

    def set(self, target: Target, attr: str, value: str) -> None:
        self._attrs[(target, attr)] = value

    def delete(self, target: Target, attr: str) -> None:
        self._attrs.pop((target, attr), None)

    def attributes_of(self, target: Target) -> Dict[str, str]:
        return {attr: v for (t, attr), v in self._attrs.items() if t == target}

    def as_dict(self) -> Dict[AttrKey, str]:
        return dict(self._attrs)

    def __eq__(self, other) -> bool:
        return isinstance(other, Scene) and self._attrs == other._attrs

    __hash__ = None

    def __repr__(self) -> str:
        return f"Scene(attributes={len(self._attrs)})"


class ShadowBuffer:
    """
    Remembers the value each transiently changed attribute had before the
    current pass touched it.  Only the first write to a key in a pass is
    recorded, so the stored value is always the pre-pass one.
    """

    def __init__(self):
        self._slots: Dict[AttrKey, Optional[str]] = {}

    def write(self, scene: Scene, target: Target, attr: str, value: str) -> None:
        key = (target, attr)
        if key not in self._slots:
            self._slots[key] = scene.get(target, attr)
        scene.set(target, attr, value)

    def revert(self, scene: Scene) -> None:
        for (target, attr), previous in self._slots.items():
            if previous is None:
                scene.delete(target, attr)
            else:
                scene.set(target, attr, previous)
        self._slots.clear()

    def __len__(self) -> int:
        return len(self._slots)


# ---------------------------------------------------------------------------
# Renderer
# ---------------------------------------------------------------------------
class Renderer:
    """
    Attributes:
        graph  : Graph whose vertices / edges make up the scene.
        config : Colours and widths.
        scene  : The Scene every pass updates in place.
    """

    def __init__(self, graph: GraphModel, config: RenderConfig = CONFIG):
        self.graph  = graph
        self.config = config
        self.scene  = Scene()
        self._shadow = ShadowBuffer()

        self._transient: Dict[StepKind, Callable[[TraceStep], None]] = {
            StepKind.INDICATE_START:             self._indicate_start,
            StepKind.SET_INFINITY:               self._set_infinity,
            StepKind.SET_START_ZERO:             self._set_start_zero,
            StepKind.VISIT_NODE:                 self._visit_node,
            StepKind.CHECK_NEIGHBOR:             self._check_neighbor,
            StepKind.COMPARE_NEIGHBOR:           self._relaxation,
            StepKind.UPDATE_NEIGHBOR_WEIGHT:     self._update_neighbor_weight,
            StepKind.NOT_UPDATE_NEIGHBOR_WEIGHT: self._relaxation,
            StepKind.MARK_AS_VISITED:            self._mark_as_visited,
            StepKind.COMPLETE:                   lambda step: None,
        }

    def render(self, step: TraceStep) -> Scene:
        self._shadow.revert(self.scene)
        self._apply_persistent(step.snapshot)
        self._transient[step.kind](step)
        self._shadow.write(self.scene, NARRATION, "text", narrate(step))
        return self.scene

    # ------------------------------------------------------------------
    # Persistent state
    # ------------------------------------------------------------------
    def _apply_persistent(self, snapshot: Snapshot) -> None:
        for node in self.graph.vertices:
            self.scene.set(
                label_target(node), "text",
                format_distance(snapshot.distance(node), self.config.infinity),
            )
            self.scene.set(node_target(node), "settled", _flag(node in snapshot.visited))

        tree = {edge_target(pred, node) for pred, node in snapshot.tree_edges()}
        for edge in self.graph.edges:
            target = edge_target(edge.node_a, edge.node_b)
            self.scene.set(target, "tree", _flag(target in tree))

    # ------------------------------------------------------------------
    # Transient helpers
    # ------------------------------------------------------------------
    def _highlight_vertex(self, node: GraphNode, colour: str) -> None:
        self._shadow.write(self.scene, node_target(node), "stroke", colour)
        self._shadow.write(self.scene, node_target(node), "stroke-width", self.config.node_highlight_width)

    def _highlight_label(self, node: GraphNode, colour: str) -> None:
        self._shadow.write(self.scene, label_target(node), "stroke", colour)
        self._shadow.write(self.scene, label_target(node), "stroke-width", self.config.label_highlight_width)

    def _highlight_edge(self, a: GraphNode, b: GraphNode, colour: str) -> None:
        self._shadow.write(self.scene, edge_target(a, b), "stroke", colour)

    # ------------------------------------------------------------------
    # Per-kind effects
    # ------------------------------------------------------------------
    def _indicate_start(self, step) -> None:
        self._highlight_vertex(step.node, self.config.highlight)

    def _set_infinity(self, step) -> None:
        for node in step.nodes:
            self._highlight_label(node, self.config.highlight)

    def _set_start_zero(self, step) -> None:
        self._highlight_label(step.node, self.config.highlight)

    def _visit_node(self, step) -> None:
        self._highlight_vertex(step.node, self.config.highlight)

    def _check_neighbor(self, step) -> None:
        self._relaxation(step)
        self._highlight_edge(step.source, step.neighbor, self.config.neighbor)

    def _relaxation(self, step) -> None:
        self._highlight_vertex(step.source, self.config.highlight)
        self._highlight_vertex(step.neighbor, self.config.neighbor)

    def _update_neighbor_weight(self, step) -> None:
        self._relaxation(step)
        self._shadow.write(
            self.scene, label_target(step.neighbor), "text",
            format_distance(step.computed_distance, self.config.infinity),
        )
        self._highlight_label(step.neighbor, self.config.highlight)

    def _mark_as_visited(self, step) -> None:
        if step.edge is not None:
            self._highlight_edge(*step.edge, self.config.settled)
        self._highlight_vertex(step.node, self.config.settled)


def _flag(value: bool) -> str:
    return "true" if value else "false"
