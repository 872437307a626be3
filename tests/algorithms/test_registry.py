import pytest

from flowstep.algorithms import available_algorithms, get_algorithm
from flowstep.algorithms.base import (
    Algorithm,
    Continue,
    Halt,
    Instruction,
    SessionState,
    StepResult,
    noop,
    return_flow,
)


def test_available_algorithms():
    assert available_algorithms() == [
        "Ford-Fulkerson",
        "Edmonds-Karp",
        "Dinitz",
        "Preflow-push",
    ]


@pytest.mark.parametrize("name", ["dinitz", "EDMONDS-KARP", "preflow-push"])
def test_get_algorithm_is_case_insensitive(name):
    assert get_algorithm(name).name.lower() == name.lower()


def test_get_algorithm_returns_fresh_tables():
    assert get_algorithm("Dinitz") is not get_algorithm("Dinitz")


def test_unknown_algorithm():
    with pytest.raises(ValueError, match="Unknown algorithm 'Bellman'"):
        get_algorithm("Bellman")


@pytest.mark.parametrize("name", ["Ford-Fulkerson", "Edmonds-Karp", "Dinitz", "Preflow-push"])
def test_last_instruction_returns_flow(name):
    algo = get_algorithm(name)
    assert algo[len(algo) - 1].code == "Return f"


class TestOutcomes:
    def test_continue_rejects_zero(self):
        with pytest.raises(ValueError, match="non-zero"):
            Continue(0)

    def test_pc_delta(self, example):
        forward = StepResult(example, example, Continue(3))
        backward = StepResult(example, example, Continue(-2))
        stop = StepResult(example, example, Halt())
        assert (forward.pc_delta, forward.halted) == (3, False)
        assert (backward.pc_delta, backward.halted) == (-2, False)
        assert (stop.pc_delta, stop.halted) == (0, True)

    def test_noop_and_return_flow_keep_graphs(self, example):
        state = SessionState()
        moved = noop(example, example, state)
        assert moved.graph is example and moved.pc_delta == 1
        done = return_flow(example, example, state)
        assert done.graph is example and done.halted


def test_algorithm_requires_instructions():
    with pytest.raises(ValueError, match="no instructions"):
        Algorithm(name="Empty", instructions=())


def test_algorithm_sequence_protocol():
    algo = Algorithm(
        name="Tiny",
        instructions=(Instruction("go", noop), Instruction("stop", return_flow)),
    )
    assert len(algo) == 2
    assert [inst.code for inst in algo] == ["go", "stop"]
    assert algo[1].code == "stop"
    assert algo.codes() == ["go", "stop"]


def test_session_state_reset():
    state = SessionState()
    state.distances["s"] = 0
    state.phases.append(2)
    state.active_queue.append("a")
    state.active_vertex = "a"
    state.reset()
    assert state == SessionState()
