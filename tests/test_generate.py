import random

import pytest

from flowstep.generate import MAX_CAPACITY, MIN_CAPACITY, random_network


@pytest.mark.parametrize("seed", range(20))
def test_random_network_shape(seed):
    network = random_network(seed=seed)
    ids = network.vertex_ids()
    assert ids[:2] == ["s", "t"]
    hidden = ids[2:]
    assert 4 <= len(hidden) <= 7
    assert hidden == [str(i) for i in range(1, len(hidden) + 1)]

    for e in network.edges:
        assert MIN_CAPACITY <= e.capacity <= MAX_CAPACITY
        assert e.flow == 0

    sources = {e.target for e in network.edges if e.source == "s"}
    sinks = {e.source for e in network.edges if e.target == "t"}
    assert sources and sinks
    assert not sources & sinks
    # every first-layer vertex feeds the second layer
    for u in sources:
        assert any(e.target in sinks for e in network.out_edges(u))


def test_same_seed_same_network():
    assert random_network(seed=42) == random_network(seed=42)


def test_explicit_rng():
    assert random_network(rng=random.Random(7)) == random_network(seed=7)
