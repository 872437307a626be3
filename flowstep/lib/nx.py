"""NetworkX graph conversion utilities.

Converts between ``FlowNetwork`` and ``networkx.DiGraph`` so results can be
cross-checked with, or fed from, NetworkX.

Example:
    >>> import networkx as nx
    >>> from flowstep.lib.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("s", "a", capacity=3)
    >>> G.add_edge("a", "t", capacity=2)
    >>> network = from_networkx(G)
    >>> nx.maximum_flow_value(to_networkx(network), "s", "t")
    2
"""

from __future__ import annotations

from typing import Optional

import networkx as nx

from flowstep.model.network import Edge, FlowNetwork, Vertex, edge_id


def to_networkx(network: FlowNetwork) -> nx.DiGraph:
    """Convert a network to a ``networkx.DiGraph``.

    Nodes carry ``x``, ``y``, ``color`` and, when set, ``name``; edges carry
    ``capacity``, ``flow`` (0 when unset) and ``color``.
    """
    G = nx.DiGraph()
    for v in network.vertices:
        attrs = {"x": v.x, "y": v.y, "color": v.color}
        if v.display_name is not None:
            attrs["name"] = v.display_name
        G.add_node(v.id, **attrs)
    for e in network.edges:
        u, v = e.endpoints
        G.add_edge(u, v, capacity=e.capacity, flow=e.flow or 0, color=e.color)
    return G


def from_networkx(
    G: nx.DiGraph,
    capacity_attr: str = "capacity",
    flow_attr: Optional[str] = None,
) -> FlowNetwork:
    """Build a network from a directed NetworkX graph.

    Node names are converted with ``str()``; positions are read from ``x``/``y``
    node attributes or, failing that, a ``pos`` tuple.

    Args:
        G: Directed graph with ``s`` and ``t`` nodes.
        capacity_attr: Edge attribute holding the capacity.
        flow_attr: Edge attribute holding an initial flow; flows start at 0
            when None.

    Returns:
        A validated network.

    Raises:
        ValueError: If the graph is undirected, an edge lacks a capacity, or the
            result is not a valid flow network.
    """
    if not G.is_directed():
        raise ValueError("Flow networks must be built from a directed graph.")

    vertices = []
    for node, data in G.nodes(data=True):
        x, y = data.get("pos", (0.0, 0.0))
        vertices.append(
            Vertex(
                id=str(node),
                display_name=data.get("name"),
                x=data.get("x", x),
                y=data.get("y", y),
            )
        )

    edges = []
    for u, v, data in G.edges(data=True):
        if capacity_attr not in data:
            raise ValueError(f"Edge {u!r}->{v!r} has no '{capacity_attr}' attribute.")
        flow = data.get(flow_attr, 0) if flow_attr is not None else 0
        edges.append(
            Edge(id=edge_id(str(u), str(v)), capacity=data[capacity_attr], flow=flow)
        )

    network = FlowNetwork(vertices=vertices, edges=edges)
    network.validate()
    return network
