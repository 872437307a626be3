"""Presentation boundary: labels and element dictionaries for graph views.

Algorithms keep excess, height and flow as numbers; this module turns them
into the labels shown to the user, e.g. ``"1 [3 / 2]"`` for a Preflow-Push
vertex with excess 3 and height 2, or ``"2/5"`` for an edge carrying 2 of 5.
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional, Tuple

from flowstep.model.network import Edge, FlowNetwork, Vertex
from flowstep.types.base import Amount

_PREFLOW_LABEL = re.compile(
    r"^(?P<id>\S+) \[(?P<excess>-?\d+(?:\.\d*)?(?:[eE][-+]?\d+)?) / (?P<height>\d+)\]$"
)


def _format_amount(value: Amount) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def vertex_label(vertex: Vertex) -> str:
    """Return the label shown for a vertex.

    Preflow-Push vertices render as ``"<id> [<excess> / <height>]"``; other
    vertices show their display name, falling back to the id.
    """
    if vertex.excess is not None and vertex.height is not None:
        return f"{vertex.id} [{_format_amount(vertex.excess)} / {vertex.height}]"
    return vertex.display_name or vertex.id


def parse_preflow_label(label: str) -> Optional[Tuple[str, Amount, int]]:
    """Parse ``"<id> [<excess> / <height>]"`` back into its parts.

    Returns:
        ``(id, excess, height)`` or None if the label has another shape.
    """
    match = _PREFLOW_LABEL.match(label)
    if match is None:
        return None
    excess_text = match.group("excess")
    excess: Amount = (
        int(excess_text) if excess_text.lstrip("-").isdigit() else float(excess_text)
    )
    return match.group("id"), excess, int(match.group("height"))


def edge_label(edge: Edge) -> str:
    """``"flow/capacity"`` once flow is set, the bare capacity otherwise."""
    if edge.flow is None:
        return _format_amount(edge.capacity)
    return f"{_format_amount(edge.flow)}/{_format_amount(edge.capacity)}"


def vertex_element(vertex: Vertex) -> Dict[str, Any]:
    return {
        "id": vertex.id,
        "name": vertex_label(vertex),
        "x": vertex.x,
        "y": vertex.y,
        "color": vertex.color,
    }


def edge_element(edge: Edge) -> Dict[str, Any]:
    source, target = edge.endpoints
    return {
        "id": edge.id,
        "source": source,
        "target": target,
        "label": edge_label(edge),
        "color": edge.color,
    }


def to_elements(network: FlowNetwork) -> Dict[str, List[Dict[str, Any]]]:
    """Render a network into ``{"nodes": [...], "edges": [...]}`` for a view."""
    return {
        "nodes": [vertex_element(v) for v in network.vertices],
        "edges": [edge_element(e) for e in network.edges],
    }


def format_listing(codes: List[str], pc: Optional[int] = None) -> str:
    """Render pseudocode with a ``>`` marker on the current line.

    Tabs in the pseudocode are expanded to four spaces.
    """
    lines = []
    for idx, code in enumerate(codes):
        marker = ">" if idx == pc else " "
        lines.append(f"{marker} {idx:>2}  {code.expandtabs(4)}")
    return "\n".join(lines)
