"""Preset sample networks shipped as YAML package data."""

from __future__ import annotations

from importlib import resources
from typing import Dict, List

from flowstep.io import network_from_yaml
from flowstep.model.network import FlowNetwork

#: Preset name -> YAML resource in this package.
PRESETS: Dict[str, str] = {
    "Example": "example.yaml",
    "FFPitfall": "ffpitfall.yaml",
    "Textbook1": "textbook1.yaml",
    "Antiparallel": "antiparallel.yaml",
}


def available_networks() -> List[str]:
    return list(PRESETS)


def load_network(name: str) -> FlowNetwork:
    """Load a preset network by name (case-insensitive).

    Every call returns a fresh network with zero flow.

    Raises:
        ValueError: If no preset has that name.
    """
    for key, resource in PRESETS.items():
        if key.lower() == name.lower():
            text = resources.files(__name__).joinpath(resource).read_text(
                encoding="utf-8"
            )
            return network_from_yaml(text)
    valid = ", ".join(PRESETS)
    raise ValueError(f"Unknown network '{name}'. Valid values are: {valid}")
