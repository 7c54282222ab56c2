"""
terminal.py - Rich Terminal View
================================
Prints the Scene produced by the Renderer as rich tables.  This is the
terminal stand-in for a diagram: one table row per vertex (distance label,
settled flag, highlight), one per edge, the narration, and the pseudocode
line the step belongs to.

All panels are stateless functions of (graph, scene, step); TerminalView
only wires a Stepper to a Renderer and a Console.
"""

from typing import Optional

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from graph import GraphModel
from algorithms import PSEUDOCODE, PSEUDOCODE_LINE, Trace, TraceStep
from engine import Stepper
from ui.narration import format_distance, narrate
from ui.render import (
    CONFIG, NARRATION, RenderConfig, Renderer, Scene,
    edge_target, label_target, node_target,
)


# ---------------------------------------------------------------------------
# Panels
# ---------------------------------------------------------------------------
def vertex_table(graph: GraphModel, scene: Scene, config: RenderConfig = CONFIG) -> Table:
    table = Table(title="Vertices", expand=False)
    table.add_column("Node")
    table.add_column("Distance", justify="right")
    table.add_column("Settled", justify="center")

    for node in graph.vertices:
        shape = scene.attributes_of(node_target(node))
        label = scene.attributes_of(label_target(node))
        name_style = shape.get("stroke") or (config.settled if shape.get("settled") == "true" else "")
        if shape.get("stroke-width"):
            name_style = f"bold {name_style}".strip()
        table.add_row(
            Text(node.name, style=name_style),
            Text(label.get("text", ""), style=label.get("stroke", "")),
            "✔" if shape.get("settled") == "true" else "",
        )
    return table


def edge_table(graph: GraphModel, scene: Scene, config: RenderConfig = CONFIG) -> Table:
    table = Table(title="Edges", expand=False)
    table.add_column("Edge")
    table.add_column("Weight", justify="right")
    table.add_column("Tree", justify="center")

    for edge in graph.edges:
        attrs = scene.attributes_of(edge_target(edge.node_a, edge.node_b))
        style = attrs.get("stroke") or (config.settled if attrs.get("tree") == "true" else "dim")
        table.add_row(
            Text(f"{edge.node_a.name} -- {edge.node_b.name}", style=style),
            format_distance(edge.weight),
            "✔" if attrs.get("tree") == "true" else "",
        )
    return table


def pseudocode_panel(step: TraceStep) -> Panel:
    current = PSEUDOCODE_LINE.get(step.kind, -1)
    lines = Text()
    for i, line in enumerate(PSEUDOCODE):
        lines.append(line + "\n", style="bold cyan" if i == current else "dim")
    return Panel(lines, title="Dijkstra", expand=False)


def controls_line(stepper: Stepper) -> Text:
    trace_len = len(stepper.trace) if stepper.trace is not None else 0
    prev_style = "dim strike" if stepper.at_start else "bold"
    next_style = "dim strike" if stepper.at_end else "bold"
    return Text.assemble(
        ("◀ prev", prev_style),
        f"   step {stepper.cursor + 1} / {trace_len}   ",
        ("next ▶", next_style),
    )


def trace_table(trace: Trace) -> Table:
    """Every step of a trace: index, kind and narration."""
    table = Table(title=f"Trace from {trace.start.name}")
    table.add_column("#", justify="right")
    table.add_column("Kind")
    table.add_column("Narration")
    for i, step in enumerate(trace):
        table.add_row(str(i), step.kind.value, narrate(step))
    return table


def distance_table(trace: Trace) -> Table:
    snapshot = trace.final.snapshot
    table = Table(title="Final distances")
    table.add_column("Node")
    table.add_column("Distance", justify="right")
    table.add_column("Via")
    for node in trace.graph.vertices:
        pred = snapshot.predecessors.get(node)
        table.add_row(node.name, format_distance(snapshot.distance(node)), pred.name if pred else "")
    return table


# ---------------------------------------------------------------------------
# View
# ---------------------------------------------------------------------------
class TerminalView:
    """
    Re-renders on every cursor change.  Attach with `view.attach()`, which
    installs `show` as the stepper's on_step callback.
    """

    def __init__(
        self,
        stepper: Stepper,
        console: Optional[Console] = None,
        config: RenderConfig = CONFIG,
    ):
        self.stepper  = stepper
        self.console  = console or Console()
        self.renderer = Renderer(stepper.graph, config)

    def attach(self) -> "TerminalView":
        self.stepper.on_step = self.show
        return self

    def show(self, step: Optional[TraceStep] = None) -> None:
        step = step or self.stepper.current_step
        if step is None:
            return
        scene = self.renderer.render(step)
        graph = self.stepper.graph
        self.console.print(
            Group(
                Panel(Text(scene.get(NARRATION, "text") or ""), title=step.kind.value),
                vertex_table(graph, scene, self.renderer.config),
                edge_table(graph, scene, self.renderer.config),
                pseudocode_panel(step),
                controls_line(self.stepper),
            )
        )
