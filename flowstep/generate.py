"""Random layered networks for demonstrations.

The generated network has ``s``, a first hidden layer of 2-3 vertices fed by
``s``, a second hidden layer of 2-4 vertices feeding ``t``, random links
between neighbours inside each layer, and one or two links from every
first-layer vertex into the second layer. Capacities are integers in
``[1, 20]``.
"""

from __future__ import annotations

import random
from typing import List, Optional

from flowstep.logging import get_logger
from flowstep.model.network import Edge, FlowNetwork, Vertex, edge_id
from flowstep.types.base import SINK, SOURCE

LOGGER = get_logger(__name__)

MIN_CAPACITY = 1
MAX_CAPACITY = 20

# Probability of linking two adjacent vertices of the same layer
NEIGHBOUR_LINK_PROBABILITY = 2 / 3


def _layer(first_id: int, size: int, x: float) -> List[Vertex]:
    return [
        Vertex(id=str(first_id + i), x=x, y=150 + (i - size + 2) * 50)
        for i in range(size)
    ]


def _link_neighbours(
    rng: random.Random, layer: List[Vertex], edges: List[Edge]
) -> None:
    for a, b in zip(layer, layer[1:]):
        if rng.random() > NEIGHBOUR_LINK_PROBABILITY:
            continue
        if rng.random() < 0.5:
            a, b = b, a
        edges.append(_edge(rng, a.id, b.id))


def _edge(rng: random.Random, source: str, target: str) -> Edge:
    return Edge(
        id=edge_id(source, target),
        capacity=rng.randint(MIN_CAPACITY, MAX_CAPACITY),
        flow=0,
    )


def random_network(
    seed: Optional[int] = None, rng: Optional[random.Random] = None
) -> FlowNetwork:
    """Generate a random layered network with zero flow.

    Args:
        seed: Seed for a private ``random.Random``; ignored when ``rng`` is given.
        rng: Random source to draw from.

    Returns:
        A valid flow network.
    """
    if rng is None:
        rng = random.Random(seed)

    edges: List[Edge] = []

    layer1 = _layer(1, rng.randint(2, 3), x=150)
    edges.extend(_edge(rng, SOURCE, v.id) for v in layer1)
    _link_neighbours(rng, layer1, edges)

    layer2 = _layer(1 + len(layer1), rng.randint(2, 4), x=250)
    edges.extend(_edge(rng, v.id, SINK) for v in layer2)
    _link_neighbours(rng, layer2, edges)

    for u in layer1:
        targets = [v.id for v in layer2]
        rng.shuffle(targets)
        for target in targets[: rng.randint(1, 2)]:
            edges.append(_edge(rng, u.id, target))

    network = FlowNetwork(
        vertices=[Vertex(id=SOURCE, x=50, y=150), Vertex(id=SINK, x=350, y=150)]
        + layer1
        + layer2,
        edges=edges,
    )
    network.validate()
    LOGGER.debug(
        "Generated random network: %d vertices, %d edges",
        len(network.vertices),
        len(network.edges),
    )
    return network
