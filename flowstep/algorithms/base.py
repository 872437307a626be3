"""Instruction-table model shared by all stepwise algorithms.

An algorithm is a fixed sequence of instructions, one per pseudocode line.
Running an instruction consumes the current ``(graph, residual)`` pair and the
session state and yields a new pair plus an outcome: ``Continue(delta)`` moves
the program counter by ``delta`` (loops jump backwards, early exits jump
forwards) and ``Halt()`` ends the run.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Deque, Dict, Iterator, List, Optional, Tuple, Union

from flowstep.model.network import FlowNetwork


@dataclass(frozen=True)
class Continue:
    """Move the program counter by ``delta`` (never 0)."""

    delta: int

    def __post_init__(self) -> None:
        if self.delta == 0:
            raise ValueError("Continue requires a non-zero jump; use Halt to stop.")


@dataclass(frozen=True)
class Halt:
    """Stop stepping; the program counter stays on the halting instruction."""


StepOutcome = Union[Continue, Halt]


@dataclass
class StepResult:
    """Outcome of running one instruction.

    Attributes:
        graph: Flow network after the instruction.
        residual: Residual network (possibly annotated) after the instruction.
        outcome: Where the program counter goes next.
    """

    graph: FlowNetwork
    residual: FlowNetwork
    outcome: StepOutcome

    @property
    def halted(self) -> bool:
        return isinstance(self.outcome, Halt)

    @property
    def pc_delta(self) -> int:
        """Jump as a plain integer; ``0`` means halt."""
        if isinstance(self.outcome, Continue):
            return self.outcome.delta
        return 0


def advance(graph: FlowNetwork, residual: FlowNetwork, delta: int = 1) -> StepResult:
    return StepResult(graph, residual, Continue(delta))


def halt(graph: FlowNetwork, residual: FlowNetwork) -> StepResult:
    return StepResult(graph, residual, Halt())


@dataclass
class SessionState:
    """Per-run data carried between instructions of one algorithm run.

    Attributes:
        distances: Dinitz level labels (BFS distance from ``s``) of the current
            phase, keyed by vertex id.
        phases: Dinitz ``s``-``t`` distance of every level graph that reached ``t``.
        active_queue: Preflow-Push FIFO of active vertex ids.
        active_vertex: Preflow-Push vertex being discharged.
    """

    distances: Dict[str, int] = field(default_factory=dict)
    phases: List[int] = field(default_factory=list)
    active_queue: Deque[str] = field(default_factory=deque)
    active_vertex: Optional[str] = None

    def reset(self) -> None:
        self.distances = {}
        self.phases = []
        self.active_queue = deque()
        self.active_vertex = None


RunFunc = Callable[[FlowNetwork, FlowNetwork, SessionState], StepResult]


@dataclass(frozen=True)
class Instruction:
    """One pseudocode line and the operation it performs.

    Attributes:
        code: Pseudocode shown to the user; leading tabs mark nesting.
        run: Operation over ``(graph, residual, state)``. It must not mutate
            the graphs it receives; it clones before changing anything.
    """

    code: str
    run: RunFunc


@dataclass(frozen=True)
class Algorithm:
    """A named, fixed instruction table whose last instruction halts."""

    name: str
    instructions: Tuple[Instruction, ...]

    def __post_init__(self) -> None:
        if not self.instructions:
            raise ValueError(f"Algorithm '{self.name}' has no instructions.")

    def __len__(self) -> int:
        return len(self.instructions)

    def __getitem__(self, pc: int) -> Instruction:
        return self.instructions[pc]

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    def codes(self) -> List[str]:
        """Return the pseudocode listing in order."""
        return [inst.code for inst in self.instructions]


def noop(graph: FlowNetwork, residual: FlowNetwork, state: SessionState) -> StepResult:
    """Loop heads and tails only move the program counter forward."""
    return advance(graph, residual)


def return_flow(
    graph: FlowNetwork, residual: FlowNetwork, state: SessionState
) -> StepResult:
    """Terminal instruction; running it again leaves the pair unchanged."""
    return halt(graph, residual)
