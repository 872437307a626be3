"""Generic breadth-first / depth-first search from the source.

The search knows nothing about flows. Callers supply the traversable edges of
a vertex and thread their own per-path data (a path, a distance) through
``next_aux``.
"""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Iterable, List, Optional, Set, Tuple, TypeVar

from flowstep.model.network import Edge, FlowNetwork, edge_id
from flowstep.types.base import SINK, SOURCE, SearchMode

AuxT = TypeVar("AuxT")

EdgePair = Tuple[str, str]
GetEdges = Callable[[str], Iterable[EdgePair]]


def traverse(
    get_edges: GetEdges,
    init_aux: AuxT,
    next_aux: Callable[[str, str, AuxT], AuxT],
    mode: SearchMode = SearchMode.BFS,
    on_visit: Optional[Callable[[str, AuxT], None]] = None,
    source: str = SOURCE,
    target: Optional[str] = SINK,
) -> Optional[AuxT]:
    """Search from ``source`` until ``target`` is visited.

    Each vertex is visited at most once. With ``SearchMode.BFS`` the frontier
    is FIFO, so the first visit of every vertex happens at its minimum edge
    distance from ``source``; with ``SearchMode.DFS`` it is LIFO.

    Args:
        get_edges: Returns the traversable ``(u, v)`` pairs leaving a vertex.
            Pairs whose ``u`` is not the vertex are ignored.
        init_aux: Aux data attached to ``source``.
        next_aux: Computes the aux data of ``v`` when reached through ``u -> v``.
        mode: Frontier discipline.
        on_visit: Called with ``(vertex_id, aux)`` on the first visit of each
            vertex, including ``target``.
        source: Start vertex.
        target: Vertex that ends the search. With None the search runs until
            the frontier is empty.

    Returns:
        The aux data of the first visit to ``target``, or None if the frontier
        empties first (always None when ``target`` is None).
    """
    visited: Set[str] = set()
    frontier: Deque[Tuple[str, AuxT]] = deque([(source, init_aux)])
    while frontier:
        if mode == SearchMode.BFS:
            node_id, aux = frontier.popleft()
        else:
            node_id, aux = frontier.pop()
        if node_id in visited:
            continue
        visited.add(node_id)
        if on_visit is not None:
            on_visit(node_id, aux)
        if target is not None and node_id == target:
            return aux
        for u, v in get_edges(node_id):
            if u == node_id and v not in visited:
                frontier.append((v, next_aux(u, v, aux)))
    return None


def find_path(
    get_edges: GetEdges,
    mode: SearchMode = SearchMode.BFS,
    source: str = SOURCE,
    target: str = SINK,
) -> Optional[List[str]]:
    """Return a ``source``-``target`` vertex sequence or None."""
    return traverse(
        get_edges,
        init_aux=[source],
        next_aux=lambda _u, v, path: path + [v],
        mode=mode,
        source=source,
        target=target,
    )


def residual_edges(
    residual: FlowNetwork,
    admissible: Optional[Callable[[Edge], bool]] = None,
) -> GetEdges:
    """Build a ``get_edges`` callback over a residual network.

    Edges are read on every call, so flow accumulated on the residual edges
    between searches is taken into account. Only edges with positive capacity
    and, when given, accepted by ``admissible`` are returned.
    """

    def get_edges(vid: str) -> List[EdgePair]:
        pairs: List[EdgePair] = []
        for e in residual.edges:
            u, v = e.endpoints
            if u != vid or e.capacity <= 0:
                continue
            if admissible is not None and not admissible(e):
                continue
            pairs.append((u, v))
        return pairs

    return get_edges


def path_edge_ids(path: List[str]) -> List[str]:
    """Return the edge ids along a vertex sequence."""
    return [edge_id(u, v) for u, v in zip(path, path[1:])]
