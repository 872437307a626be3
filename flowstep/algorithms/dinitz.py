"""Dinitz's algorithm as a stepwise instruction table.

Each phase labels the residual network with BFS distances from ``s`` (the
level graph), accumulates a blocking flow on the residual copy by repeatedly
saturating admissible shortest paths, then folds that flow into the flow
network. A phase whose level graph admits no ``s``-``t`` path ends the run.

The distance labels live in ``SessionState.distances`` and are only rebuilt
at the start of a phase.
"""

from __future__ import annotations

from flowstep.algorithms.base import (
    Algorithm,
    Instruction,
    SessionState,
    StepResult,
    advance,
    noop,
    return_flow,
)
from flowstep.algorithms.traversal import (
    find_path,
    path_edge_ids,
    residual_edges,
    traverse,
)
from flowstep.config import DISPLAY_CONFIG
from flowstep.logging import get_logger
from flowstep.model.network import Edge, FlowNetwork
from flowstep.types.base import SINK, Amount, SearchMode

LOGGER = get_logger(__name__)


def _spare(e: Edge) -> Amount:
    return e.capacity - (e.flow or 0)


def build_level_graph(
    graph: FlowNetwork, residual: FlowNetwork, state: SessionState
) -> StepResult:
    """Label residual vertices with their BFS distance from ``s``."""
    graph = graph.clone()
    residual = residual.clone()
    graph.clear_colors(vertices=False)
    residual.clear_colors()

    state.distances = {}
    vertices = residual.vertex_map()

    def on_visit(vid: str, dist: int) -> None:
        vertices[vid].color = DISPLAY_CONFIG.level_color(dist)
        state.distances[vid] = dist

    traverse(
        residual_edges(residual),
        init_aux=0,
        next_aux=lambda _u, _v, dist: dist + 1,
        mode=SearchMode.BFS,
        on_visit=on_visit,
    )

    if SINK in state.distances:
        state.phases.append(state.distances[SINK])
        LOGGER.debug(
            "Dinitz phase %d: level graph reaches t at distance %d",
            len(state.phases),
            state.distances[SINK],
        )
    else:
        LOGGER.debug("Dinitz: t is unreachable in the residual network")
    return advance(graph, residual)


def find_blocking_flow(
    graph: FlowNetwork, residual: FlowNetwork, state: SessionState
) -> StepResult:
    """Saturate admissible paths on the residual copy until none is left.

    Flow is accumulated in the ``flow`` field of residual edges; the flow
    network is untouched until the next instruction folds it in. If the very
    first search fails the run is over.
    """
    residual = residual.clone()
    distances = state.distances

    def admissible(e: Edge) -> bool:
        u, v = e.endpoints
        if u not in distances or v not in distances:
            return False
        return distances[v] == distances[u] + 1 and _spare(e) > 0

    get_edges = residual_edges(residual, admissible)
    paths = 0
    while True:
        path = find_path(get_edges, mode=SearchMode.BFS)
        if path is None:
            break
        paths += 1
        path_edges = [residual.edge(eid) for eid in path_edge_ids(path)]
        amount = min(_spare(e) for e in path_edges)
        for e in path_edges:
            e.color = DISPLAY_CONFIG.path_color
            e.flow = (e.flow or 0) + amount
        LOGGER.debug("Dinitz: blocking path %s carries %s", "-".join(path), amount)

    if paths == 0:
        graph = graph.clone()
        graph.clear_colors(edges=False)
        return advance(graph, graph.residual_network(), 2)
    return advance(graph, residual)


def add_blocking_flow(
    graph: FlowNetwork, residual: FlowNetwork, state: SessionState
) -> StepResult:
    """Fold the blocking flow accumulated on the residual copy into the network."""
    graph = graph.clone()
    for e in residual.edges:
        if e.flow:
            for touched in graph.augment(e.source, e.target, e.flow):
                touched.color = DISPLAY_CONFIG.path_color
    return advance(graph, graph.residual_network(), -2)


def dinitz() -> Algorithm:
    """Build the Dinitz instruction table."""
    return Algorithm(
        name="Dinitz",
        instructions=(
            Instruction("f := 0", noop),
            Instruction("While f is not a max flow:", noop),
            Instruction("\tConstruct G_L from G_f", build_level_graph),
            Instruction("\tFind a blocking flow f' in G_L", find_blocking_flow),
            Instruction("\tf := f + f'", add_blocking_flow),
            Instruction("Return f", return_flow),
        ),
    )
