import networkx as nx
import pytest

from flowstep.lib.nx import from_networkx, to_networkx


def test_to_networkx(example):
    example.edge("s-1").flow = 2
    example.vertex("1").display_name = "One"
    G = to_networkx(example)
    assert set(G.nodes) == {"s", "1", "2", "t"}
    assert G.nodes["1"]["name"] == "One"
    assert "name" not in G.nodes["s"]
    assert G.edges["s", "1"]["capacity"] == 3
    assert G.edges["s", "1"]["flow"] == 2
    assert nx.maximum_flow_value(G, "s", "t") == 5


def test_from_networkx_positions_and_names():
    G = nx.DiGraph()
    G.add_node("s", pos=(1.0, 2.0))
    G.add_node(1, x=5, y=6, name="A")
    G.add_node("t")
    G.add_edge("s", 1, capacity=4)
    G.add_edge(1, "t", capacity=3, used=2)

    network = from_networkx(G, flow_attr="used")
    assert network.vertex_ids() == ["s", "1", "t"]
    assert (network.vertex("s").x, network.vertex("s").y) == (1.0, 2.0)
    assert network.vertex("1").display_name == "A"
    assert network.vertex("1").x == 5
    assert network.edge("s-1").flow == 0
    assert network.edge("1-t").flow == 2


def test_from_networkx_custom_capacity_attribute():
    G = nx.DiGraph()
    G.add_edge("s", "t", cap=9)
    assert from_networkx(G, capacity_attr="cap").edge("s-t").capacity == 9


def test_from_networkx_rejects_undirected():
    with pytest.raises(ValueError, match="directed"):
        from_networkx(nx.Graph())


def test_from_networkx_requires_capacity():
    G = nx.DiGraph()
    G.add_edge("s", "t")
    with pytest.raises(ValueError, match="no 'capacity' attribute"):
        from_networkx(G)


def test_from_networkx_validates():
    G = nx.DiGraph()
    G.add_edge("s", "a", capacity=1)
    with pytest.raises(ValueError, match="must contain a vertex 't'"):
        from_networkx(G)


def test_round_trip(textbook):
    restored = from_networkx(to_networkx(textbook), flow_attr="flow")
    assert restored.vertices == textbook.vertices
    # NetworkX yields edges grouped by source vertex
    assert sorted(restored.edges, key=lambda e: e.id) == sorted(
        textbook.edges, key=lambda e: e.id
    )
