"""Stepwise maximum-flow algorithms and their registry."""

from __future__ import annotations

from typing import Callable, Dict, List

from flowstep.algorithms.base import (
    Algorithm,
    Continue,
    Halt,
    Instruction,
    SessionState,
    StepResult,
)
from flowstep.algorithms.dinitz import dinitz
from flowstep.algorithms.ford_fulkerson import (
    edmonds_karp,
    ford_fulkerson,
    pitfall_ford_fulkerson,
)
from flowstep.algorithms.preflow_push import preflow_push
from flowstep.algorithms.traversal import find_path, traverse

#: Algorithm name -> factory. Factories return a fresh instruction table.
ALGORITHMS: Dict[str, Callable[[], Algorithm]] = {
    "Ford-Fulkerson": pitfall_ford_fulkerson,
    "Edmonds-Karp": edmonds_karp,
    "Dinitz": dinitz,
    "Preflow-push": preflow_push,
}


def available_algorithms() -> List[str]:
    return list(ALGORITHMS)


def get_algorithm(name: str) -> Algorithm:
    """Build the algorithm registered under ``name`` (case-insensitive).

    Raises:
        ValueError: If no algorithm has that name.
    """
    for key, factory in ALGORITHMS.items():
        if key.lower() == name.lower():
            return factory()
    valid = ", ".join(ALGORITHMS)
    raise ValueError(f"Unknown algorithm '{name}'. Valid values are: {valid}")


__all__ = [
    "ALGORITHMS",
    "Algorithm",
    "Continue",
    "Halt",
    "Instruction",
    "SessionState",
    "StepResult",
    "available_algorithms",
    "dinitz",
    "edmonds_karp",
    "find_path",
    "ford_fulkerson",
    "get_algorithm",
    "pitfall_ford_fulkerson",
    "preflow_push",
    "traverse",
]
