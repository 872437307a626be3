"""Flow network model with Vertex, Edge and FlowNetwork classes.

A ``FlowNetwork`` is a pair of ordered lists: vertices and directed edges.
List order is display order only. Edge ids encode their endpoints as
``"<source>-<target>"``; the residual network is derived from the flow values
on demand and is itself a ``FlowNetwork``.

Reading a flow that was never initialized, or an edge id that does not split
into two vertex ids, is a programming error and fails an assertion.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Set, Tuple

from flowstep.types.base import SINK, SOURCE, Amount, ResidualMode

EDGE_ID_SEPARATOR = "-"


def edge_id(source: str, target: str) -> str:
    """Return the id of the directed edge ``source -> target``."""
    return f"{source}{EDGE_ID_SEPARATOR}{target}"


def split_edge_id(eid: str) -> Tuple[str, str]:
    """Split an edge id into ``(source, target)``.

    Args:
        eid: Edge id of the form ``"<source>-<target>"``.

    Returns:
        Tuple of source and target vertex ids.
    """
    parts = eid.split(EDGE_ID_SEPARATOR)
    assert len(parts) == 2 and all(parts), (
        f"Edge id '{eid}' does not decompose into two vertex ids"
    )
    return parts[0], parts[1]


@dataclass
class Vertex:
    """A vertex of a flow network.

    Attributes:
        id: Unique identifier. ``"s"`` and ``"t"`` are the source and sink.
        display_name: Optional label shown instead of the id.
        x: Layout position, owned by the presentation layer.
        y: Layout position, owned by the presentation layer.
        color: Highlight color set by the running algorithm.
        excess: Excess flow (Preflow-Push only).
        height: Height label (Preflow-Push only).
    """

    id: str
    display_name: Optional[str] = None
    x: float = 0.0
    y: float = 0.0
    color: Optional[str] = None
    excess: Optional[Amount] = None
    height: Optional[int] = None


@dataclass
class Edge:
    """A directed edge with capacity and (once initialized) flow.

    Attributes:
        id: ``"<source>-<target>"``.
        capacity: Edge capacity.
        flow: Current flow, ``None`` until initialized.
        color: Highlight color set by the running algorithm.
    """

    id: str
    capacity: Amount
    flow: Optional[Amount] = None
    color: Optional[str] = None

    @property
    def source(self) -> str:
        return split_edge_id(self.id)[0]

    @property
    def target(self) -> str:
        return split_edge_id(self.id)[1]

    @property
    def endpoints(self) -> Tuple[str, str]:
        return split_edge_id(self.id)

    @property
    def residual_capacity(self) -> Amount:
        """Capacity left after the current flow is subtracted."""
        assert self.flow is not None, f"Flow on edge '{self.id}' is not initialized"
        return self.capacity - self.flow


@dataclass
class FlowNetwork:
    """Directed capacity network with a single source ``s`` and sink ``t``.

    Attributes:
        vertices: Vertices in display order.
        edges: Edges in display order. At most one edge per ordered pair.
    """

    vertices: List[Vertex] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)

    #
    # Lookup
    #
    def vertex_ids(self) -> List[str]:
        return [v.id for v in self.vertices]

    def vertex_map(self) -> Dict[str, Vertex]:
        """Return a mapping from vertex id to vertex (live objects)."""
        return {v.id: v for v in self.vertices}

    def vertex(self, vid: str) -> Vertex:
        """Return the vertex with id ``vid``.

        Raises:
            KeyError: If no such vertex exists.
        """
        for v in self.vertices:
            if v.id == vid:
                return v
        raise KeyError(f"Vertex '{vid}' not found in network.")

    def edge(self, eid: str) -> Edge:
        """Return the edge with id ``eid``.

        Raises:
            KeyError: If no such edge exists.
        """
        for e in self.edges:
            if e.id == eid:
                return e
        raise KeyError(f"Edge '{eid}' not found in network.")

    def find_edge(self, source: str, target: str) -> Optional[Edge]:
        """Return the edge ``source -> target`` or None."""
        eid = edge_id(source, target)
        for e in self.edges:
            if e.id == eid:
                return e
        return None

    def out_edges(self, vid: str) -> List[Edge]:
        return [e for e in self.edges if e.source == vid]

    def in_edges(self, vid: str) -> List[Edge]:
        return [e for e in self.edges if e.target == vid]

    #
    # Flow
    #
    def flow_value(self) -> Amount:
        """Return the net flow leaving the source.

        Returns:
            Sum of flow on edges leaving ``s`` minus flow on edges entering ``s``.
        """
        value: Amount = 0
        for e in self.edges:
            assert e.flow is not None, f"Flow on edge '{e.id}' is not initialized"
            u, v = e.endpoints
            if u == SOURCE:
                value += e.flow
            elif v == SOURCE:
                value -= e.flow
        return value

    def init_flow(self) -> FlowNetwork:
        """Set every unset edge flow to 0 and return this network."""
        for e in self.edges:
            if e.flow is None:
                e.flow = 0
        return self

    def reset_flow(self) -> FlowNetwork:
        """Set every edge flow to 0 and clear highlight colors."""
        for e in self.edges:
            e.flow = 0
        self.clear_colors()
        return self

    def augment(self, source: str, target: str, amount: Amount) -> List[Edge]:
        """Move ``amount`` units of flow from ``source`` to ``target``.

        Flow on an existing ``target -> source`` edge is cancelled first; the
        remainder is added to the ``source -> target`` edge.

        Args:
            source: Tail of the residual edge being used.
            target: Head of the residual edge being used.
            amount: Non-negative amount of flow to move.

        Returns:
            The edges whose flow changed.
        """
        touched: List[Edge] = []
        remaining = amount

        reverse = self.find_edge(target, source)
        if reverse is not None:
            assert reverse.flow is not None, (
                f"Flow on edge '{reverse.id}' is not initialized"
            )
            cancel = min(remaining, reverse.flow)
            if cancel > 0:
                reverse.flow -= cancel
                remaining -= cancel
                touched.append(reverse)

        if remaining > 0:
            forward = self.find_edge(source, target)
            assert forward is not None, (
                f"No edge can carry {remaining} from '{source}' to '{target}'"
            )
            assert forward.flow is not None, (
                f"Flow on edge '{forward.id}' is not initialized"
            )
            forward.flow += remaining
            assert forward.flow <= forward.capacity, (
                f"Flow on edge '{forward.id}' exceeds its capacity"
            )
            touched.append(forward)

        return touched

    #
    # Derived networks
    #
    def residual_network(self, mode: ResidualMode = ResidualMode.SPARSE) -> FlowNetwork:
        """Derive the residual network.

        For every edge ``u -> v`` with capacity ``c`` and flow ``f`` the residual
        network holds ``u -> v`` with capacity ``c - f`` and ``v -> u`` with
        capacity ``f``. Contributions to the same ordered pair (antiparallel
        edges) are summed into a single residual edge. In ``SPARSE`` mode
        zero-capacity residual edges are omitted.

        Args:
            mode: Residual variant to derive.

        Returns:
            New network; vertices are value copies of this network's vertices.
        """
        capacities: Dict[str, Amount] = {}
        for e in self.edges:
            assert e.flow is not None, f"Flow on edge '{e.id}' is not initialized"
            u, v = e.endpoints
            for rid, cap in ((edge_id(u, v), e.capacity - e.flow), (edge_id(v, u), e.flow)):
                if mode == ResidualMode.SPARSE and cap <= 0:
                    continue
                capacities[rid] = capacities.get(rid, 0) + cap

        return FlowNetwork(
            vertices=[replace(v) for v in self.vertices],
            edges=[Edge(id=rid, capacity=cap) for rid, cap in capacities.items()],
        )

    def clone(self) -> FlowNetwork:
        """Deep value copy of vertices and edges."""
        return copy.deepcopy(self)

    def clear_colors(self, vertices: bool = True, edges: bool = True) -> None:
        if vertices:
            for v in self.vertices:
                v.color = None
        if edges:
            for e in self.edges:
                e.color = None

    #
    # Validation
    #
    def validate(self) -> None:
        """Check the structural invariants of a flow network.

        Raises:
            ValueError: On a missing or duplicated source/sink, duplicate or
                hyphenated vertex ids, malformed or duplicate edge ids, edges
                with unknown endpoints, or negative capacities and flows.
        """
        seen_vertices: Set[str] = set()
        for v in self.vertices:
            if not v.id or EDGE_ID_SEPARATOR in v.id:
                raise ValueError(
                    f"Vertex id '{v.id}' must be non-empty and must not contain "
                    f"'{EDGE_ID_SEPARATOR}'."
                )
            if v.id in seen_vertices:
                raise ValueError(f"Vertex '{v.id}' already exists in the network.")
            seen_vertices.add(v.id)

        for reserved in (SOURCE, SINK):
            if reserved not in seen_vertices:
                raise ValueError(f"Network must contain a vertex '{reserved}'.")

        seen_edges: Set[str] = set()
        for e in self.edges:
            parts = e.id.split(EDGE_ID_SEPARATOR)
            if len(parts) != 2 or not all(parts):
                raise ValueError(
                    f"Edge id '{e.id}' must have the form '<source>-<target>'."
                )
            if e.id in seen_edges:
                raise ValueError(f"Edge '{e.id}' already exists in the network.")
            seen_edges.add(e.id)
            u, v = parts
            if u not in seen_vertices:
                raise ValueError(f"Source vertex '{u}' of edge '{e.id}' not found.")
            if v not in seen_vertices:
                raise ValueError(f"Target vertex '{v}' of edge '{e.id}' not found.")
            if u == v:
                raise ValueError(f"Edge '{e.id}' is a self-loop.")
            if e.capacity < 0:
                raise ValueError(f"Edge '{e.id}' has negative capacity {e.capacity}.")
            if e.flow is not None and not 0 <= e.flow <= e.capacity:
                raise ValueError(
                    f"Flow {e.flow} on edge '{e.id}' is outside [0, {e.capacity}]."
                )
