"""Flow network model."""

from __future__ import annotations

from flowstep.model.network import (
    Edge,
    FlowNetwork,
    Vertex,
    edge_id,
    split_edge_id,
)

__all__ = ["Edge", "FlowNetwork", "Vertex", "edge_id", "split_edge_id"]
