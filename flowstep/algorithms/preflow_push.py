"""Preflow-Push (push-relabel) as a stepwise instruction table.

Excess and height are stored on the residual network's vertices. Residual
edges are recomputed in place after every push, so those vertex fields
survive for the whole run. Active vertices (positive excess, neither ``s``
nor ``t``) are served FIFO from ``SessionState.active_queue``; a linear scan
backs the queue up.
"""

from __future__ import annotations

from typing import Dict, List

from flowstep.algorithms.base import (
    Algorithm,
    Instruction,
    SessionState,
    StepResult,
    advance,
    return_flow,
)
from flowstep.config import DISPLAY_CONFIG
from flowstep.logging import get_logger
from flowstep.model.network import FlowNetwork, Vertex
from flowstep.types.base import SINK, SOURCE, Amount

LOGGER = get_logger(__name__)


def is_active(vertex: Vertex) -> bool:
    """A vertex other than ``s``/``t`` holding positive excess."""
    if vertex.id in (SOURCE, SINK):
        return False
    return vertex.excess is not None and vertex.excess > 0


def _enqueue_if_active(state: SessionState, vertex: Vertex) -> None:
    if is_active(vertex) and vertex.id not in state.active_queue:
        state.active_queue.append(vertex.id)


def _recompute_residual(graph: FlowNetwork, residual: FlowNetwork) -> None:
    residual.edges = graph.residual_network().edges


def set_height_colors(residual: FlowNetwork) -> None:
    max_height = max((v.height or 0 for v in residual.vertices), default=0)
    for v in residual.vertices:
        v.color = DISPLAY_CONFIG.height_color(v.height or 0, max_height)


def push_flow(
    graph: FlowNetwork,
    residual: FlowNetwork,
    state: SessionState,
    source: str,
    target: str,
) -> Amount:
    """Push as much excess as possible along the residual edge ``source -> target``.

    The amount is the residual capacity, further bounded by the excess of
    ``source`` unless it is ``s`` (unbounded supply). Both networks are
    updated in place: excesses on the residual vertices, the flow network
    edge (or its reverse edge), and the residual edges.

    Returns:
        The amount pushed; 0 if the edge is missing or nothing could move.
    """
    r_edge = residual.find_edge(source, target)
    if r_edge is None or r_edge.capacity <= 0:
        return 0

    vertices = residual.vertex_map()
    u, v = vertices[source], vertices[target]
    assert u.excess is not None and v.excess is not None, "Excess is not initialized"

    amount = r_edge.capacity
    if source != SOURCE:
        amount = min(amount, u.excess)
    if amount <= 0:
        return 0

    u.excess -= amount
    v.excess += amount
    _enqueue_if_active(state, u)
    _enqueue_if_active(state, v)

    for touched in graph.augment(source, target, amount):
        touched.color = DISPLAY_CONFIG.path_color
    _recompute_residual(graph, residual)
    return amount


def initialize(
    graph: FlowNetwork, residual: FlowNetwork, state: SessionState
) -> StepResult:
    """Set ``h(s) = |V|``, every other height to 0 and every excess to 0."""
    residual = residual.clone()
    state.active_queue.clear()
    state.active_vertex = None
    n = len(residual.vertices)
    for v in residual.vertices:
        v.excess = 0
        v.height = n if v.id == SOURCE else 0
    set_height_colors(residual)
    return advance(graph, residual)


def saturate_source(
    graph: FlowNetwork, residual: FlowNetwork, state: SessionState
) -> StepResult:
    graph = graph.clone()
    residual = residual.clone()
    targets = [e.target for e in residual.edges if e.source == SOURCE]
    for target in targets:
        push_flow(graph, residual, state, SOURCE, target)
    return advance(graph, residual)


def next_active_vertex(
    graph: FlowNetwork, residual: FlowNetwork, state: SessionState
) -> StepResult:
    """Pick the next active vertex, or finish when there is none."""
    graph = graph.clone()
    graph.clear_colors(vertices=False)
    vertices = residual.vertex_map()

    state.active_vertex = None
    while state.active_queue:
        vid = state.active_queue.popleft()
        if is_active(vertices[vid]):
            state.active_vertex = vid
            break

    if state.active_vertex is None:
        for v in residual.vertices:
            if is_active(v):
                LOGGER.debug("Queue empty, found active vertex %s by scan", v.id)
                state.active_vertex = v.id
                break

    if state.active_vertex is None:
        graph.clear_colors()
        return advance(graph, residual, 4)

    LOGGER.debug("Active vertex: %s", state.active_vertex)
    return advance(graph, residual)


def select_active_vertex(
    graph: FlowNetwork, residual: FlowNetwork, state: SessionState
) -> StepResult:
    graph = graph.clone()
    graph.clear_colors(edges=False)
    assert state.active_vertex is not None, "No active vertex selected"
    graph.vertex(state.active_vertex).color = DISPLAY_CONFIG.active_color
    return advance(graph, residual)


def push(graph: FlowNetwork, residual: FlowNetwork, state: SessionState) -> StepResult:
    """Push from the active vertex along every admissible residual edge."""
    assert state.active_vertex is not None, "No active vertex selected"
    graph = graph.clone()
    residual = residual.clone()

    vertices: Dict[str, Vertex] = residual.vertex_map()
    active = vertices[state.active_vertex]
    admissible: List[str] = [
        e.target
        for e in residual.edges
        if e.source == active.id
        and e.capacity > 0
        and vertices[e.target].height == (active.height or 0) - 1
    ]

    for target in admissible:
        if not is_active(active):
            break
        amount = push_flow(graph, residual, state, active.id, target)
        LOGGER.debug("Push %s from %s to %s", amount, active.id, target)
    return advance(graph, residual)


def relabel(
    graph: FlowNetwork, residual: FlowNetwork, state: SessionState
) -> StepResult:
    """Raise the active vertex above its lowest residual neighbour.

    With excess left, the push instruction runs again on the same vertex;
    otherwise control returns to the loop head.
    """
    assert state.active_vertex is not None, "No active vertex selected"
    if not is_active(residual.vertex(state.active_vertex)):
        return advance(graph, residual, -3)

    residual = residual.clone()
    vertices = residual.vertex_map()
    active = vertices[state.active_vertex]
    neighbour_heights = [
        vertices[e.target].height or 0
        for e in residual.edges
        if e.source == active.id and e.capacity > 0
    ]
    assert neighbour_heights, f"Active vertex '{active.id}' has no residual edges"
    active.height = min(neighbour_heights) + 1
    LOGGER.debug("Relabel %s to height %d", active.id, active.height)
    set_height_colors(residual)
    return advance(graph, residual, -1)


def preflow_push() -> Algorithm:
    """Build the Preflow-Push instruction table."""
    return Algorithm(
        name="Preflow-push",
        instructions=(
            Instruction("Initialize h := 0, h(s) = |V|, e := 0", initialize),
            Instruction("Saturate all outgoing edges from s", saturate_source),
            Instruction(
                "While there is a possible Push or Relabel operation:",
                next_active_vertex,
            ),
            Instruction("\tSelect v := next active vertex", select_active_vertex),
            Instruction("\tPerform a Push operation from v if possible", push),
            Instruction("\tPerform a Relabel operation if e(v) > 0", relabel),
            Instruction("Return f", return_flow),
        ),
    )
