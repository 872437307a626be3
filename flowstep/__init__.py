"""flowstep: step-by-step maximum-flow algorithms for teaching.

flowstep runs Ford-Fulkerson, Edmonds-Karp, Dinitz and Preflow-Push one
pseudocode line at a time over a flow network, exposing the flow network and
its residual network after every step.

Primary API:
    AlgorithmSession - Program counter, current graphs and per-run state
    get_algorithm() - Instruction table by name
    load_network() - Preset sample networks
    FlowNetwork, Vertex, Edge - Network model

Example:
    from flowstep import AlgorithmSession, get_algorithm, load_network

    session = AlgorithmSession(get_algorithm("Edmonds-Karp"), load_network("Example"))
    while not session.finished:
        session.step()
        print(session.current_instruction.code, session.flow_value())
"""

from __future__ import annotations

from flowstep import cli, logging
from flowstep._version import __version__
from flowstep.algorithms import (
    Algorithm,
    Continue,
    Halt,
    Instruction,
    SessionState,
    StepResult,
    available_algorithms,
    get_algorithm,
)
from flowstep.analysis import FlowSummary, summarize
from flowstep.engine import AlgorithmSession
from flowstep.generate import random_network
from flowstep.graphs import available_networks, load_network
from flowstep.io import network_from_dict, network_from_yaml
from flowstep.model.network import Edge, FlowNetwork, Vertex
from flowstep.types.base import ResidualMode, SearchMode

__all__ = [
    # Version
    "__version__",
    # Model
    "FlowNetwork",
    "Vertex",
    "Edge",
    # Engine
    "AlgorithmSession",
    "Algorithm",
    "Instruction",
    "SessionState",
    "StepResult",
    "Continue",
    "Halt",
    "get_algorithm",
    "available_algorithms",
    # Networks
    "load_network",
    "available_networks",
    "random_network",
    "network_from_dict",
    "network_from_yaml",
    # Analysis
    "FlowSummary",
    "summarize",
    # Types
    "ResidualMode",
    "SearchMode",
    # Utilities
    "cli",
    "logging",
]
