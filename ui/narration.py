"""
narration.py - Step Narration
=============================
One sentence per step kind, explaining what the algorithm just did.
Node names are labels, or ids for unlabelled nodes.  Distance labels use
the "∞" glyph; sentences spell infinity out as "Infinity".
"""

import math
from typing import Dict, Optional

from algorithms import Distance, StepKind, TraceStep


INFINITY_GLYPH = "∞"
INFINITY_WORD  = "Infinity"


TEMPLATES: Dict[StepKind, str] = {
    StepKind.INDICATE_START:
        "The start node is {name}.",
    StepKind.SET_INFINITY:
        "Set distances to all nodes as infinity.",
    StepKind.SET_START_ZERO:
        "Set the distance of the start node as 0.",
    StepKind.VISIT_NODE:
        "Visit node {name}, as it is the unvisited node with the smallest distance.",
    StepKind.CHECK_NEIGHBOR:
        "From node {source}, check {target}.",
    StepKind.COMPARE_NEIGHBOR:
        "Comparing the computed weight of '{computed}' to the node's value, '{existing}'",
    StepKind.UPDATE_NEIGHBOR_WEIGHT:
        "Since '{computed}' is less than '{existing}', replace the distance.",
    StepKind.NOT_UPDATE_NEIGHBOR_WEIGHT:
        "Since '{computed}' is less than or equal to '{existing}', do nothing.",
    StepKind.MARK_AS_VISITED:
        "All neighbors of node {name} has been visited, so mark it as visited.",
    StepKind.COMPLETE:
        "All nodes have been resolved, so the algorithm is complete.",
}


def format_distance(value: Optional[Distance], infinity: str = INFINITY_GLYPH) -> str:
    """∞ for infinity, blank for no entry, `7` rather than `7.0` for whole floats."""
    if value is None:
        return ""
    if value == math.inf:
        return infinity
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_number(value: Distance) -> str:
    """A distance as it reads inside a sentence: `Infinity`, `7`, `2.5`."""
    return format_distance(value, infinity=INFINITY_WORD)


def narrate(step: TraceStep) -> str:
    template = TEMPLATES[step.kind]
    kind = step.kind

    if kind in (StepKind.INDICATE_START, StepKind.VISIT_NODE, StepKind.MARK_AS_VISITED):
        return template.format(name=step.node.name)
    if kind == StepKind.CHECK_NEIGHBOR:
        return template.format(source=step.source.name, target=step.neighbor.name)
    if kind in (
        StepKind.COMPARE_NEIGHBOR,
        StepKind.UPDATE_NEIGHBOR_WEIGHT,
        StepKind.NOT_UPDATE_NEIGHBOR_WEIGHT,
    ):
        return template.format(
            computed=format_number(step.computed_distance),
            existing=format_number(step.existing_distance),
        )
    return template
