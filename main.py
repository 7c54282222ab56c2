"""
main.py - Dijkstra Stepper CLI
==============================
Terminal host for the visualizer.

Commands:
  play    - interactive stepping through a trace
  trace   - print every step of a trace, then the final distances

Interactive keys (play):
  n          - next step
  p          - previous step
  g INDEX    - jump to step INDEX (1-based, clamped)
  s NAME     - restart from node NAME
  q          - quit

The host owns nothing but the wiring: it builds a GraphModel, hands it to a
Stepper and lets a TerminalView re-render on every cursor change.
"""

import logging
from enum import Enum
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from graph import GraphModel, GraphNode, VisualizerError
from algorithms import generate_trace
from engine import Stepper
from ui import TerminalView, distance_table, trace_table


console = Console()
error_console = Console(stderr=True)

app = typer.Typer(
    name="dijkstra-stepper",
    help="Step forwards and backwards through Dijkstra's algorithm.",
    add_completion=False,
)

logger = logging.getLogger("dijkstra_stepper")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
class LogLevel(str, Enum):
    debug   = "debug"
    info    = "info"
    warning = "warning"
    error   = "error"


def configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.value.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_path=False)],
        force=True,
    )


def build_graph(random_nodes: Optional[int], seed: Optional[int]) -> GraphModel:
    if random_nodes is not None:
        return GraphModel.generate_random(num_nodes=random_nodes, edge_probability=0.35, seed=seed)
    return GraphModel.example()


def resolve_start(graph: GraphModel, name: Optional[str]) -> GraphNode:
    if name is None:
        return graph.vertices[0]
    node = graph.find_vertex(name)
    if node is None:
        error_console.print(f"[bold red]Unknown start node:[/] {name}")
        raise typer.Exit(code=2)
    return node


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------
@app.command()
def trace(
    start: Optional[str] = typer.Option(None, "--start", "-s", help="Name of the start node"),
    random_nodes: Optional[int] = typer.Option(None, "--random", min=1, help="Use a random graph with N nodes"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for --random"),
    log_level: LogLevel = typer.Option(LogLevel.warning, "--log-level", case_sensitive=False, help="Logging verbosity"),
):
    """Print the full trace and the resulting distances."""
    configure_logging(log_level)
    graph = build_graph(random_nodes, seed)
    node = resolve_start(graph, start)
    try:
        result = generate_trace(graph, node)
    except VisualizerError as exc:
        error_console.print(f"[bold red]Error:[/] {exc}")
        raise typer.Exit(code=1)

    console.print(trace_table(result))
    console.print(distance_table(result))


@app.command()
def play(
    start: Optional[str] = typer.Option(None, "--start", "-s", help="Name of the start node"),
    random_nodes: Optional[int] = typer.Option(None, "--random", min=1, help="Use a random graph with N nodes"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for --random"),
    log_level: LogLevel = typer.Option(LogLevel.warning, "--log-level", case_sensitive=False, help="Logging verbosity"),
):
    """Step through the algorithm interactively."""
    configure_logging(log_level)
    graph = build_graph(random_nodes, seed)
    node = resolve_start(graph, start)

    stepper = Stepper(graph)
    TerminalView(stepper, console=console).attach()
    stepper.init(node)

    while True:
        try:
            command = console.input("[bold]n[/]ext / [bold]p[/]rev / [bold]g[/] N / [bold]s[/] NODE / [bold]q[/]uit > ")
        except EOFError:
            break
        parts = command.strip().split()
        if not parts:
            continue
        key, args = parts[0].lower(), parts[1:]

        if key == "q":
            break
        elif key == "n":
            if not stepper.step_forward():
                console.print("[dim]Already at the last step.[/]")
        elif key == "p":
            if not stepper.step_backward():
                console.print("[dim]Already at the first step.[/]")
        elif key == "g" and args and args[0].lstrip("-").isdigit():
            stepper.goto(int(args[0]) - 1)
        elif key == "s" and args:
            target = graph.find_vertex(args[0])
            if target is None:
                error_console.print(f"[bold red]Unknown node:[/] {args[0]}")
                continue
            logger.info("Restarting from %s", target.name)
            stepper.init(target)
        else:
            console.print(f"[yellow]Unrecognised command:[/] {command.strip()}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
