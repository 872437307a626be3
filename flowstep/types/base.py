"""Base enums shared by the network model and the algorithms."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

#: Numeric capacity or flow amount. Presets use integers.
Amount = Union[int, float]

#: Reserved vertex ids.
SOURCE = "s"
SINK = "t"


class SearchMode(IntEnum):
    """Frontier discipline for the traversal primitive."""

    #: FIFO frontier; finds shortest paths in number of edges.
    BFS = 1
    #: LIFO frontier; no shortest-path guarantee.
    DFS = 2


class ResidualMode(IntEnum):
    """Which residual edges a flow network derives."""

    #: Omit zero-capacity residual edges. Used by every algorithm.
    SPARSE = 1
    #: Emit forward and backward residual edges for every edge, including
    #: zero-capacity ones.
    SATURATED = 2
