"""Checks and summaries over a flow network's current flow.

Provides the minimum ``s``-``t`` cut implied by the residual network and the
feasibility checks (capacity bounds, conservation) used to validate the
result of a run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Set, Tuple

from flowstep.algorithms.traversal import residual_edges, traverse
from flowstep.model.network import FlowNetwork
from flowstep.types.base import SINK, SOURCE, Amount, SearchMode


@dataclass(frozen=True)
class FlowSummary:
    """Summary of the flow carried by a network.

    Attributes:
        total_flow: Net flow leaving ``s``.
        edge_flow: Flow per edge id.
        residual_cap: Remaining capacity per edge id.
        reachable: Vertices reachable from ``s`` in the residual network.
        min_cut: Edges leaving ``reachable``; saturated when the flow is maximum.
        cut_capacity: Total capacity of ``min_cut``.
    """

    total_flow: Amount
    edge_flow: Dict[str, Amount]
    residual_cap: Dict[str, Amount]
    reachable: Set[str]
    min_cut: List[str]
    cut_capacity: Amount

    @property
    def is_maximum(self) -> bool:
        """True when ``t`` is unreachable, i.e. no augmenting path is left."""
        return SINK not in self.reachable


def reachable_from_source(network: FlowNetwork) -> Set[str]:
    """Vertices reachable from ``s`` through positive residual edges."""
    reached: Set[str] = set()
    traverse(
        residual_edges(network.residual_network()),
        init_aux=None,
        next_aux=lambda _u, _v, aux: aux,
        mode=SearchMode.BFS,
        on_visit=lambda vid, _aux: reached.add(vid),
        target=None,
    )
    return reached


def min_cut(network: FlowNetwork) -> Tuple[Set[str], List[str]]:
    """Return the source side of the cut and the edge ids crossing it."""
    reachable = reachable_from_source(network)
    crossing = [
        e.id
        for e in network.edges
        if e.source in reachable and e.target not in reachable
    ]
    return reachable, crossing


def summarize(network: FlowNetwork) -> FlowSummary:
    reachable, crossing = min_cut(network)
    crossing_set = set(crossing)
    return FlowSummary(
        total_flow=network.flow_value(),
        edge_flow={e.id: e.flow for e in network.edges if e.flow is not None},
        residual_cap={e.id: e.residual_capacity for e in network.edges},
        reachable=reachable,
        min_cut=crossing,
        cut_capacity=sum(e.capacity for e in network.edges if e.id in crossing_set),
    )


def net_inflow(network: FlowNetwork) -> Dict[str, Amount]:
    """Return inflow minus outflow for every vertex."""
    balance: Dict[str, Amount] = {v.id: 0 for v in network.vertices}
    for e in network.edges:
        assert e.flow is not None, f"Flow on edge '{e.id}' is not initialized"
        u, v = e.endpoints
        balance[u] -= e.flow
        balance[v] += e.flow
    return balance


def conservation_violations(network: FlowNetwork) -> Dict[str, Amount]:
    """Vertices other than ``s``/``t`` whose inflow differs from outflow."""
    return {
        vid: amount
        for vid, amount in net_inflow(network).items()
        if vid not in (SOURCE, SINK) and amount != 0
    }


def capacity_violations(network: FlowNetwork) -> List[str]:
    """Edge ids whose flow is outside ``[0, capacity]``."""
    return [
        e.id
        for e in network.edges
        if e.flow is None or not 0 <= e.flow <= e.capacity
    ]


def is_feasible(network: FlowNetwork) -> bool:
    return not capacity_violations(network) and not conservation_violations(network)
