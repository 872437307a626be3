from flowstep.analysis import (
    capacity_violations,
    conservation_violations,
    is_feasible,
    min_cut,
    net_inflow,
    reachable_from_source,
    summarize,
)


def _set_flows(network, flows):
    for eid, flow in flows.items():
        network.edge(eid).flow = flow
    return network


MAX_EXAMPLE_FLOW = {"s-1": 3, "s-2": 2, "1-2": 1, "1-t": 2, "2-t": 3}


def test_zero_flow_reaches_everything(example):
    assert reachable_from_source(example) == {"s", "1", "2", "t"}
    summary = summarize(example)
    assert summary.total_flow == 0
    assert not summary.is_maximum


def test_summary_of_maximum_flow(example):
    _set_flows(example, MAX_EXAMPLE_FLOW)
    summary = summarize(example)
    assert summary.total_flow == 5
    assert summary.reachable == {"s"}
    assert summary.min_cut == ["s-1", "s-2"]
    assert summary.cut_capacity == 5
    assert summary.is_maximum
    assert summary.edge_flow == MAX_EXAMPLE_FLOW
    assert summary.residual_cap == {"s-1": 0, "s-2": 0, "1-2": 4, "1-t": 0, "2-t": 0}


def test_min_cut_on_disconnected(disconnected):
    reachable, crossing = min_cut(disconnected)
    assert reachable == {"s", "a"}
    assert crossing == []


def test_reverse_residual_edges_extend_reachability(build_network):
    # Flow on b-a opens the residual edge a-b.
    network = build_network(
        ["s", "a", "b", "t"], [("s-a", 1), ("b-a", 1), ("b-t", 1), ("s-b", 1)]
    )
    _set_flows(network, {"s-b": 1, "b-a": 1, "s-a": 0, "b-t": 0})
    assert reachable_from_source(network) == {"s", "a", "b", "t"}


def test_conservation(example):
    _set_flows(example, MAX_EXAMPLE_FLOW)
    assert net_inflow(example) == {"s": -5, "1": 0, "2": 0, "t": 5}
    assert conservation_violations(example) == {}

    example.edge("1-2").flow = 0
    assert conservation_violations(example) == {"1": 1, "2": -1}
    assert not is_feasible(example)


def test_capacity_violations(example):
    example.edge("s-1").flow = 4
    example.edge("s-2").flow = -1
    assert capacity_violations(example) == ["s-1", "s-2"]
    assert not is_feasible(example)


def test_zero_flow_is_feasible(textbook):
    assert is_feasible(textbook)
