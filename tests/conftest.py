"""Shared fixtures: small flow networks used across the test suite."""

from __future__ import annotations

from typing import Iterable, Tuple

import pytest

from flowstep.graphs import load_network
from flowstep.model.network import Edge, FlowNetwork, Vertex


def make_network(
    vertex_ids: Iterable[str], edges: Iterable[Tuple[str, float]]
) -> FlowNetwork:
    """Build a zero-flow network from vertex ids and ``(edge_id, capacity)`` pairs."""
    return FlowNetwork(
        vertices=[Vertex(id=vid) for vid in vertex_ids],
        edges=[Edge(id=eid, capacity=cap, flow=0) for eid, cap in edges],
    )


@pytest.fixture
def example():
    # Capacity:
    #        [3]       [2]
    #   s ───────► 1 ───────► t
    #   │          │[5]       ▲
    #   │   [2]    ▼    [3]   │
    #   └────────► 2 ─────────┘
    return load_network("Example")


@pytest.fixture
def pitfall():
    # s-1, s-2, 1-t, 2-t carry 1000; the middle edge 1-2 carries 1.
    return load_network("FFPitfall")


@pytest.fixture
def textbook():
    return load_network("Textbook1")


@pytest.fixture
def antiparallel():
    return load_network("Antiparallel")


@pytest.fixture
def disconnected():
    # t is unreachable: maximum flow 0.
    return make_network(["s", "a", "b", "t"], [("s-a", 4), ("b-t", 4)])


@pytest.fixture
def diamond():
    # Two disjoint two-edge paths and one long path; maximum flow 7.
    #   s-a-t (cap 3), s-b-t (cap 4), s-c-d-e-t (cap 0 at c-d)
    return make_network(
        ["s", "a", "b", "c", "d", "e", "t"],
        [
            ("s-a", 3),
            ("a-t", 5),
            ("s-b", 6),
            ("b-t", 4),
            ("s-c", 2),
            ("c-d", 0),
            ("d-e", 2),
            ("e-t", 2),
        ],
    )


@pytest.fixture
def build_network():
    """Factory fixture wrapping ``make_network``."""
    return make_network
