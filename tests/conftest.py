import pytest

from graph import Edge, GraphModel, GraphNode


@pytest.fixture
def example_graph() -> GraphModel:
    return GraphModel.example()


@pytest.fixture
def nodes(example_graph):
    """The example's vertices by label: nodes['A'] ... nodes['F']."""
    return {node.label: node for node in example_graph.vertices}


@pytest.fixture
def single_vertex_graph() -> GraphModel:
    return GraphModel([GraphNode(0, "Solo")])


@pytest.fixture
def disconnected_graph() -> GraphModel:
    # X - Y reachable from X;  Z - W form an island
    x, y, z, w = GraphNode(0, "X"), GraphNode(1, "Y"), GraphNode(2, "Z"), GraphNode(3, "W")
    return GraphModel([x, y, z, w], [Edge(x, y, 1), Edge(z, w, 2)])
