"""Library integrations."""

from __future__ import annotations

from flowstep.lib.nx import from_networkx, to_networkx

__all__ = ["from_networkx", "to_networkx"]
