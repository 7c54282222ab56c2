import pytest

from graph import GraphNode
from algorithms import StepKind, generate_trace
from engine import Stepper
from ui import (
    NARRATION,
    TEMPLATES,
    Renderer,
    Scene,
    ShadowBuffer,
    edge_target,
    format_distance,
    format_number,
    label_target,
    narrate,
    node_target,
)


@pytest.fixture
def trace(example_graph, nodes):
    return generate_trace(example_graph, nodes["A"])


# ---------------------------------------------------------------------------
# Formatting & narration
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("value, expected", [
    (None, ""),
    (float("inf"), "∞"),
    (0, "0"),
    (7.0, "7"),
    (2.5, "2.5"),
    (12, "12"),
])
def test_format_distance(value, expected):
    assert format_distance(value) == expected


@pytest.mark.parametrize("value, expected", [
    (float("inf"), "Infinity"),
    (0, "0"),
    (9.0, "9"),
    (2.5, "2.5"),
])
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_labels_and_sentences_spell_infinity_differently(example_graph, trace):
    compare = trace[5]
    scene = Renderer(example_graph).render(compare)
    assert scene.get(label_target(compare.neighbor), "text") == "∞"
    assert scene.get(NARRATION, "text").endswith("'Infinity'")


def test_every_kind_has_a_template():
    assert set(TEMPLATES) == set(StepKind)


def test_narration_of_the_example(trace):
    assert narrate(trace[0]) == "The start node is A."
    assert narrate(trace[1]) == "Set distances to all nodes as infinity."
    assert narrate(trace[2]) == "Set the distance of the start node as 0."
    assert narrate(trace[3]) == "Visit node A, as it is the unvisited node with the smallest distance."
    assert narrate(trace[4]) == "From node A, check B."
    assert narrate(trace[5]) == "Comparing the computed weight of '9' to the node's value, 'Infinity'"
    assert narrate(trace[6]) == "Since '9' is less than 'Infinity', replace the distance."
    assert narrate(trace.final) == "All nodes have been resolved, so the algorithm is complete."


def test_narration_of_mark_and_skip(trace):
    mark = next(s for s in trace if s.kind == StepKind.MARK_AS_VISITED)
    skip = next(s for s in trace if s.kind == StepKind.NOT_UPDATE_NEIGHBOR_WEIGHT)
    assert narrate(mark) == "All neighbors of node A has been visited, so mark it as visited."
    assert narrate(skip) == "Since '6' is less than or equal to '5', do nothing."


def test_unlabelled_nodes_are_named_by_id():
    from graph import GraphModel
    graph = GraphModel([GraphNode(4)])
    assert narrate(generate_trace(graph, GraphNode(4))[0]) == "The start node is 4."


# ---------------------------------------------------------------------------
# ShadowBuffer
# ---------------------------------------------------------------------------
def test_shadow_buffer_restores_pre_pass_values():
    scene = Scene()
    target = ("node", 1)
    scene.set(target, "stroke", "black")
    shadow = ShadowBuffer()

    shadow.write(scene, target, "stroke", "green")
    shadow.write(scene, target, "stroke", "blue")       # second write, same slot
    shadow.write(scene, target, "stroke-width", "2")    # attribute didn't exist
    assert scene.get(target, "stroke") == "blue"
    assert len(shadow) == 2

    shadow.revert(scene)
    assert scene.get(target, "stroke") == "black"
    assert scene.get(target, "stroke-width") is None
    assert len(shadow) == 0


# ---------------------------------------------------------------------------
# Renderer
# ---------------------------------------------------------------------------
def test_persistent_labels_follow_the_snapshot(example_graph, nodes, trace):
    renderer = Renderer(example_graph)

    scene = renderer.render(trace[0])
    assert all(scene.get(label_target(n), "text") == "" for n in example_graph.vertices)

    scene = renderer.render(trace[1])
    assert all(scene.get(label_target(n), "text") == "∞" for n in example_graph.vertices)
    assert all(scene.get(label_target(n), "stroke") == "green" for n in example_graph.vertices)

    scene = renderer.render(trace[2])
    assert scene.get(label_target(nodes["A"]), "text") == "0"
    assert scene.get(label_target(nodes["A"]), "stroke") == "green"
    assert scene.get(label_target(nodes["B"]), "stroke") is None


def test_update_step_then_next_check(example_graph, nodes, trace):
    renderer = Renderer(example_graph)
    a, b, c = nodes["A"], nodes["B"], nodes["C"]

    scene = renderer.render(trace[6])           # update A → B
    assert trace[6].kind == StepKind.UPDATE_NEIGHBOR_WEIGHT
    assert scene.get(node_target(a), "stroke") == "green"
    assert scene.get(node_target(b), "stroke") == "blue"
    assert scene.get(label_target(b), "text") == "9"
    assert scene.get(label_target(b), "stroke") == "green"

    scene = renderer.render(trace[7])           # check A → C
    assert trace[7].kind == StepKind.CHECK_NEIGHBOR
    assert scene.get(node_target(b), "stroke") is None
    assert scene.get(label_target(b), "stroke") is None
    assert scene.get(label_target(b), "text") == "9"
    assert scene.get(node_target(c), "stroke") == "blue"
    assert scene.get(edge_target(a, c), "stroke") == "blue"
    assert scene.get(NARRATION, "text") == "From node A, check C."


def test_complete_step_marks_the_whole_tree(example_graph, nodes, trace):
    scene = Renderer(example_graph).render(trace.final)
    assert all(scene.get(node_target(n), "settled") == "true" for n in example_graph.vertices)

    tree = {("A", "C"), ("C", "D"), ("C", "E"), ("B", "D"), ("B", "F")}
    for edge in example_graph.edges:
        pair = tuple(sorted((edge.node_a.label, edge.node_b.label)))
        expected = "true" if pair in tree else "false"
        assert scene.get(edge_target(edge.node_a, edge.node_b), "tree") == expected


def test_mark_as_visited_highlights_edge_in_settled_colour(example_graph, nodes, trace):
    mark = [s for s in trace if s.kind == StepKind.MARK_AS_VISITED][1]   # C, via A
    scene = Renderer(example_graph).render(mark)
    assert scene.get(edge_target(nodes["A"], nodes["C"]), "stroke") == "red"
    assert scene.get(node_target(nodes["C"]), "stroke") == "red"
    assert scene.get(node_target(nodes["C"]), "settled") == "true"


def test_rendering_twice_is_idempotent(example_graph, trace):
    renderer = Renderer(example_graph)
    for step in trace:
        first = renderer.render(step).as_dict()
        second = renderer.render(step).as_dict()
        assert first == second


def test_no_drift_whatever_the_navigation_path(example_graph, nodes, trace):
    walker = Renderer(example_graph)
    stepper = Stepper(example_graph, on_step=walker.render)
    stepper.init(nodes["A"])
    while stepper.step_forward():
        pass

    for index in reversed(range(len(trace))):
        stepper.goto(index)
        walked = walker.scene.as_dict()
        direct = Renderer(example_graph).render(trace[index]).as_dict()
        assert walked == direct, f"step {index} drifted"


def test_back_to_first_step_clears_everything(example_graph, nodes, trace):
    renderer = Renderer(example_graph)
    for step in trace:
        renderer.render(step)
    scene = renderer.render(trace[0])
    assert all(scene.get(node_target(n), "settled") == "false" for n in example_graph.vertices)
    assert all(scene.get(label_target(n), "text") == "" for n in example_graph.vertices)
    assert scene.get(node_target(nodes["A"]), "stroke") == "green"
    assert scene.get(node_target(nodes["F"]), "stroke") is None
