"""Loading and dumping flow networks as plain dictionaries and YAML.

Network definitions look like::

    name: Example
    vertices:
      - {id: s, x: 50, y: 100}
      - {id: t, x: 250, y: 100}
    edges:
      - {id: s-t, capacity: 3}

Input is checked against the packaged JSON schema and then against the
structural rules of ``FlowNetwork.validate()``; both failures surface as
``ValueError``.
"""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Union

import jsonschema
import yaml

from flowstep.logging import get_logger
from flowstep.model.network import Edge, FlowNetwork, Vertex

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def _network_schema() -> Dict[str, Any]:
    with (
        resources.files("flowstep.schemas")
        .joinpath("network.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def network_from_dict(data: Dict[str, Any]) -> FlowNetwork:
    """Build a network from its dictionary form.

    Edge flows default to 0, so the result is ready to run.

    Args:
        data: Mapping with ``vertices`` and ``edges`` lists.

    Returns:
        Validated flow network.

    Raises:
        ValueError: If the data violates the schema or the network rules.
    """
    if not isinstance(data, dict):
        raise ValueError("A network definition must be a mapping at top level.")
    try:
        jsonschema.validate(data, _network_schema())
    except jsonschema.ValidationError as exc:
        location = "/".join(str(p) for p in exc.absolute_path) or "<root>"
        logger.error("Invalid network definition at %s: %s", location, exc.message)
        raise ValueError(
            f"Invalid network definition at {location}: {exc.message}"
        ) from exc

    network = FlowNetwork(
        vertices=[
            Vertex(
                id=str(v["id"]),
                display_name=v.get("name"),
                x=v.get("x", 0.0),
                y=v.get("y", 0.0),
            )
            for v in data["vertices"]
        ],
        edges=[
            Edge(id=e["id"], capacity=e["capacity"], flow=e.get("flow", 0))
            for e in data["edges"]
        ],
    )
    network.validate()
    return network


def network_from_yaml(yaml_str: str) -> FlowNetwork:
    """Parse a YAML network definition."""
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    return network_from_dict(data)


def load_network_file(path: Union[str, Path]) -> FlowNetwork:
    """Load a network from a ``.yaml``/``.yml`` or ``.json`` file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the content is not a valid network.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        return network_from_dict(json.loads(text))
    return network_from_yaml(text)


def network_to_dict(network: FlowNetwork) -> Dict[str, Any]:
    """Dump a network to the dictionary form accepted by ``network_from_dict``."""
    vertices = []
    for v in network.vertices:
        entry: Dict[str, Any] = {"id": v.id, "x": v.x, "y": v.y}
        if v.display_name is not None:
            entry["name"] = v.display_name
        vertices.append(entry)

    edges = []
    for e in network.edges:
        entry = {"id": e.id, "capacity": e.capacity}
        if e.flow is not None:
            entry["flow"] = e.flow
        edges.append(entry)

    return {"vertices": vertices, "edges": edges}


def network_to_yaml(network: FlowNetwork) -> str:
    return yaml.safe_dump(network_to_dict(network), sort_keys=False)
