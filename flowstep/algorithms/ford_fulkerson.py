"""Ford-Fulkerson and Edmonds-Karp as stepwise instruction tables.

Both repeatedly find an augmenting path in the sparse residual network and
push its bottleneck capacity through the flow network. Ford-Fulkerson searches
depth-first, Edmonds-Karp breadth-first (shortest augmenting paths).
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from flowstep.algorithms.base import (
    Algorithm,
    Instruction,
    SessionState,
    StepResult,
    advance,
    noop,
    return_flow,
)
from flowstep.algorithms.traversal import find_path, path_edge_ids, residual_edges
from flowstep.config import DISPLAY_CONFIG
from flowstep.logging import get_logger
from flowstep.model.network import Edge, FlowNetwork
from flowstep.types.base import SearchMode

LOGGER = get_logger(__name__)

# Paths that make depth-first Ford-Fulkerson alternate over the middle edge
# of the pitfall network, one unit per augmentation.
PITFALL_PATHS = (("s", "1", "2", "t"), ("s", "2", "1", "t"))


def _is_augmenting(residual: FlowNetwork, path: Sequence[str]) -> bool:
    for u, v in zip(path, path[1:]):
        e = residual.find_edge(u, v)
        if e is None or e.capacity <= 0:
            return False
    return True


def _preferred_path(
    residual: FlowNetwork, preferred_paths: Sequence[Sequence[str]]
) -> Optional[List[str]]:
    """Return the last preferred path that is augmenting, if any."""
    chosen: Optional[List[str]] = None
    for path in preferred_paths:
        if _is_augmenting(residual, path):
            chosen = list(path)
    return chosen


def _path_edges(residual: FlowNetwork) -> List[Edge]:
    return [e for e in residual.edges if e.color is not None]


def ford_fulkerson(
    mode: SearchMode = SearchMode.DFS,
    preferred_paths: Optional[Sequence[Sequence[str]]] = None,
    name: Optional[str] = None,
) -> Algorithm:
    """Build the Ford-Fulkerson instruction table.

    Args:
        mode: Search used to find augmenting paths.
        preferred_paths: Vertex sequences tried before the search; the last
            one that is an augmenting path wins. Used to replay the textbook
            worst case on the pitfall network.
        name: Algorithm name; defaults to "Ford-Fulkerson" or "Edmonds-Karp".

    Returns:
        Six-instruction algorithm.
    """
    preferred = [tuple(p) for p in preferred_paths or ()]
    if name is None:
        name = "Edmonds-Karp" if mode == SearchMode.BFS else "Ford-Fulkerson"

    def find_augmenting_path(
        graph: FlowNetwork, residual: FlowNetwork, state: SessionState
    ) -> StepResult:
        graph = graph.clone()
        residual = residual.clone()
        graph.clear_colors(vertices=False)
        residual.clear_colors(vertices=False)

        path = _preferred_path(residual, preferred)
        if path is None:
            path = find_path(residual_edges(residual), mode=mode)

        if path is None:
            LOGGER.debug("%s: no augmenting path left", name)
            return advance(graph, residual, 3)

        LOGGER.debug("%s: augmenting path %s", name, "-".join(path))
        on_path = set(path_edge_ids(path))
        for e in residual.edges:
            if e.id in on_path:
                e.color = DISPLAY_CONFIG.path_color
        return advance(graph, residual)

    def bottleneck(
        graph: FlowNetwork, residual: FlowNetwork, state: SessionState
    ) -> StepResult:
        residual = residual.clone()
        path_edges = _path_edges(residual)
        amount = min(e.capacity for e in path_edges)
        for e in path_edges:
            e.flow = amount
        return advance(graph, residual)

    def augment(
        graph: FlowNetwork, residual: FlowNetwork, state: SessionState
    ) -> StepResult:
        graph = graph.clone()
        path_edges = _path_edges(residual)
        amount = min(e.flow for e in path_edges if e.flow is not None)
        LOGGER.debug("%s: augmenting by %s", name, amount)
        for e in path_edges:
            for touched in graph.augment(e.source, e.target, amount):
                touched.color = DISPLAY_CONFIG.path_color
        return advance(graph, graph.residual_network(), -2)

    search_code = "\tFind path P from s to t in G_f"
    if mode == SearchMode.BFS:
        search_code += " using BFS"

    return Algorithm(
        name=name,
        instructions=(
            Instruction("Repeat:", noop),
            Instruction(search_code, find_augmenting_path),
            Instruction("\tf' := maximum flow along P", bottleneck),
            Instruction("\tf := f + f'", augment),
            Instruction("Until there is no path from s to t in G_f", noop),
            Instruction("Return f", return_flow),
        ),
    )


def edmonds_karp() -> Algorithm:
    """Ford-Fulkerson with breadth-first (shortest) augmenting paths."""
    return ford_fulkerson(SearchMode.BFS)


def pitfall_ford_fulkerson() -> Algorithm:
    """Depth-first Ford-Fulkerson that prefers the pitfall zig-zag paths."""
    return ford_fulkerson(SearchMode.DFS, preferred_paths=PITFALL_PATHS)
