import math

import pytest

from graph import (
    DuplicateVertexError,
    Edge,
    GraphError,
    GraphModel,
    GraphNode,
    InvalidWeightError,
    UnknownVertexError,
)


# ---------------------------------------------------------------------------
# GraphNode / Edge
# ---------------------------------------------------------------------------
def test_node_identity_is_by_id():
    assert GraphNode(1, "A") == GraphNode(1, "renamed")
    assert hash(GraphNode(1, "A")) == hash(GraphNode(1))
    assert GraphNode(1, "A") != GraphNode(2, "A")


def test_node_name_falls_back_to_id():
    assert GraphNode(3, "C").name == "C"
    assert GraphNode(3).name == "3"


def test_edge_other_end_works_from_either_side():
    a, b, c = GraphNode(0), GraphNode(1), GraphNode(2)
    edge = Edge(a, b, 5)
    assert edge.other_end(a) == b
    assert edge.other_end(b) == a
    assert edge.other_end(c) is None
    assert edge.connects(b, a)
    assert edge.touches(b) and not edge.touches(c)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------
def test_duplicate_vertex_ids_are_rejected():
    with pytest.raises(DuplicateVertexError):
        GraphModel([GraphNode(0, "A"), GraphNode(0, "B")])


def test_edge_to_unknown_vertex_is_rejected():
    a = GraphNode(0, "A")
    with pytest.raises(UnknownVertexError):
        GraphModel([a], [Edge(a, GraphNode(9, "ghost"), 1)])


@pytest.mark.parametrize("weight", [-1, -0.5, math.inf, math.nan, "3", True, None])
def test_bad_weights_are_rejected(weight):
    a, b = GraphNode(0), GraphNode(1)
    with pytest.raises(InvalidWeightError):
        GraphModel([a, b], [Edge(a, b, weight)])


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        GraphModel([GraphNode(0), GraphNode(0)])
    assert issubclass(InvalidWeightError, GraphError)


def test_zero_weight_self_loop_and_parallel_edges_are_accepted():
    a, b = GraphNode(0), GraphNode(1)
    graph = GraphModel([a, b], [Edge(a, a, 0), Edge(a, b, 2), Edge(b, a, 3)])
    assert graph.edge_count() == 3
    assert len(graph.incident_edges(a)) == 3


# ---------------------------------------------------------------------------
# Adjacency
# ---------------------------------------------------------------------------
def test_incident_edges_checks_both_endpoints(example_graph, nodes):
    incident = example_graph.incident_edges(nodes["D"])
    # A-D, C-D, E-D, B-D in edge order; D is the second endpoint of each
    assert [e.other_end(nodes["D"]).label for e in incident] == ["A", "C", "E", "B"]


def test_self_loop_is_listed_once():
    a = GraphNode(0)
    graph = GraphModel([a], [Edge(a, a, 1)])
    assert len(graph.incident_edges(a)) == 1


def test_neighbours_pairs_other_end_with_edge(example_graph, nodes):
    pairs = example_graph.neighbours(nodes["F"])
    assert [(n.label, e.weight) for n, e in pairs] == [("B", 3), ("E", 6)]


def test_lookup_helpers(example_graph, nodes):
    assert example_graph.has_vertex(GraphNode(2))
    assert not example_graph.has_vertex(GraphNode(42))
    assert example_graph.get_vertex(4) == nodes["E"]
    assert example_graph.find_vertex("F") == nodes["F"]
    assert example_graph.find_vertex("nope") is None


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------
def test_example_graph_shape(example_graph):
    assert [n.label for n in example_graph.vertices] == ["A", "B", "C", "D", "E", "F"]
    assert example_graph.edge_count() == 10


def test_from_edges_rejects_unknown_labels():
    with pytest.raises(UnknownVertexError):
        GraphModel.from_edges(["A"], [("A", "B", 1)])


def test_generate_random_is_deterministic_for_a_seed():
    first = GraphModel.generate_random(num_nodes=9, seed=7)
    second = GraphModel.generate_random(num_nodes=9, seed=7)
    assert first.edges == second.edges


def test_generate_random_labels_continue_past_z():
    graph = GraphModel.generate_random(num_nodes=28, edge_probability=0.0, seed=1)
    assert [n.label for n in graph.vertices[25:]] == ["Z", "AA", "AB"]
    # backbone only: a spanning path
    assert graph.edge_count() == 27


def test_generate_random_without_backbone_can_be_empty():
    graph = GraphModel.generate_random(num_nodes=5, edge_probability=0.0, connected=False)
    assert graph.edge_count() == 0
