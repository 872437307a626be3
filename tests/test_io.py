import json
import textwrap

import pytest

from flowstep.graphs import available_networks, load_network
from flowstep.io import (
    load_network_file,
    network_from_dict,
    network_from_yaml,
    network_to_dict,
    network_to_yaml,
)

SIMPLE_YAML = textwrap.dedent(
    """
    name: Simple
    vertices:
      - {id: s, x: 50, y: 100}
      - {id: a, name: Middle}
      - {id: t}
    edges:
      - {id: s-a, capacity: 3}
      - {id: a-t, capacity: 2, flow: 1}
    """
)


def test_network_from_yaml():
    network = network_from_yaml(SIMPLE_YAML)
    assert network.vertex_ids() == ["s", "a", "t"]
    assert network.vertex("a").display_name == "Middle"
    assert network.vertex("s").x == 50
    assert network.edge("s-a").flow == 0
    assert network.edge("a-t").flow == 1


def test_integer_vertex_ids_become_strings():
    network = network_from_dict(
        {
            "vertices": [{"id": "s"}, {"id": 1}, {"id": "t"}],
            "edges": [{"id": "s-1", "capacity": 1}, {"id": "1-t", "capacity": 1}],
        }
    )
    assert network.vertex_ids() == ["s", "1", "t"]


@pytest.mark.parametrize(
    "data,match",
    [
        ({"vertices": []}, "Invalid network definition at <root>"),
        (
            {"vertices": [{"id": "s"}, {"id": "t"}], "edges": [{"id": "s-t"}]},
            "Invalid network definition at edges/0",
        ),
        (
            {
                "vertices": [{"id": "s"}, {"id": "t"}],
                "edges": [{"id": "s-t", "capacity": -1}],
            },
            "Invalid network definition at edges/0/capacity",
        ),
        (
            {"vertices": [{"id": "s", "colour": "red"}, {"id": "t"}], "edges": []},
            "Invalid network definition at vertices/0",
        ),
        ({"vertices": [{"id": "s"}], "edges": []}, "must contain a vertex 't'"),
        (
            {
                "vertices": [{"id": "s"}, {"id": "t"}],
                "edges": [{"id": "s-x", "capacity": 1}],
            },
            "Target vertex 'x'",
        ),
        (
            {
                "vertices": [{"id": "s"}, {"id": "t"}],
                "edges": [{"id": "s-t", "capacity": 1, "flow": 2}],
            },
            "outside",
        ),
    ],
)
def test_invalid_definitions(data, match):
    with pytest.raises(ValueError, match=match):
        network_from_dict(data)


def test_non_mapping_rejected():
    with pytest.raises(ValueError, match="mapping"):
        network_from_yaml("- just\n- a list\n")


def test_empty_yaml_rejected():
    with pytest.raises(ValueError, match="Invalid network definition"):
        network_from_yaml("")


def test_dict_round_trip_keeps_layout_and_flow(example):
    example.edge("s-1").flow = 2
    data = network_to_dict(example)
    assert data["vertices"][0] == {"id": "s", "x": 50, "y": 100}
    assert data["edges"][0] == {"id": "s-1", "capacity": 3, "flow": 2}
    restored = network_from_dict(data)
    assert restored == example


def test_yaml_dump_is_loadable(textbook):
    assert network_from_yaml(network_to_yaml(textbook)) == textbook


def test_load_network_file(tmp_path, example):
    yaml_path = tmp_path / "net.yaml"
    yaml_path.write_text(SIMPLE_YAML, encoding="utf-8")
    assert load_network_file(yaml_path).vertex_ids() == ["s", "a", "t"]

    json_path = tmp_path / "net.json"
    json_path.write_text(json.dumps(network_to_dict(example)), encoding="utf-8")
    assert load_network_file(str(json_path)) == example


def test_load_network_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_network_file(tmp_path / "missing.yaml")


class TestPresets:
    def test_available(self):
        assert available_networks() == ["Example", "FFPitfall", "Textbook1", "Antiparallel"]

    @pytest.mark.parametrize("name", ["Example", "ffpitfall", "TEXTBOOK1", "Antiparallel"])
    def test_presets_load_with_zero_flow(self, name):
        network = load_network(name)
        assert network.flow_value() == 0
        assert all(e.flow == 0 for e in network.edges)

    def test_presets_are_fresh_copies(self):
        first = load_network("Example")
        first.edge("s-1").flow = 3
        assert load_network("Example").edge("s-1").flow == 0

    def test_unknown_preset(self):
        with pytest.raises(ValueError, match="Unknown network 'Nope'"):
            load_network("Nope")
