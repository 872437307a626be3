"""Shared types and enums."""

from __future__ import annotations

from flowstep.types.base import SINK, SOURCE, Amount, ResidualMode, SearchMode

__all__ = ["Amount", "ResidualMode", "SearchMode", "SINK", "SOURCE"]
