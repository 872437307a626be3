"""Program-counter driven execution of an algorithm over a flow network.

``AlgorithmSession`` is the host side of the instruction-table protocol: it
owns the current ``(graph, residual)`` pair, the program counter and the
per-run ``SessionState``, and advances one instruction per ``step()``.
Sessions share nothing, so several can run side by side.

Example:
    from flowstep.algorithms import get_algorithm
    from flowstep.engine import AlgorithmSession
    from flowstep.graphs import load_network

    session = AlgorithmSession(get_algorithm("Dinitz"), load_network("Example"))
    while not session.finished:
        session.step()
    session.flow_value()  # 5
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from flowstep.algorithms.base import Algorithm, Instruction, SessionState, StepResult
from flowstep.logging import get_logger
from flowstep.model.network import FlowNetwork
from flowstep.types.base import Amount

LOGGER = get_logger(__name__)


class AlgorithmSession:
    """One run of one algorithm over one network.

    Attributes:
        algorithm: Instruction table being executed.
        graph: Current flow network. Replaced, never mutated, by each step.
        residual: Current residual network, possibly carrying annotations.
        pc: Index of the next instruction.
        finished: True once an instruction has halted.
        history: Program counters of executed instructions, in order.
        state: Caches shared by the instructions of this run.
    """

    def __init__(self, algorithm: Algorithm, network: FlowNetwork) -> None:
        """Start a session at program counter 0.

        Args:
            algorithm: Instruction table to run.
            network: Initial network. It is copied; unset flows become 0.
        """
        self.algorithm = algorithm
        self.state = SessionState()
        self._initial = network.clone().init_flow()
        self.graph: FlowNetwork = self._initial
        self.residual: FlowNetwork = self._initial
        self.pc = 0
        self.finished = False
        self.history: List[int] = []
        self.reset()

    def reset(self, network: Optional[FlowNetwork] = None) -> None:
        """Rewind to program counter 0, optionally switching networks.

        Clears the session caches so nothing leaks from the previous run.
        """
        if network is not None:
            self._initial = network.clone().init_flow()
        self.graph = self._initial.clone()
        self.residual = self.graph.residual_network()
        self.pc = 0
        self.finished = False
        self.history = []
        self.state.reset()
        LOGGER.debug(
            "Session reset: %s on %d vertices, %d edges",
            self.algorithm.name,
            len(self.graph.vertices),
            len(self.graph.edges),
        )

    @property
    def current_instruction(self) -> Instruction:
        return self.algorithm[self.pc]

    @property
    def steps(self) -> int:
        """Number of instructions executed so far."""
        return len(self.history)

    def flow_value(self) -> Amount:
        return self.graph.flow_value()

    def step(self) -> StepResult:
        """Run the instruction at the program counter and advance it.

        Stepping a finished session re-runs the halting instruction, which
        returns the same pair.

        Returns:
            The instruction's result.
        """
        pc = self.pc
        instruction = self.algorithm[pc]
        result = instruction.run(self.graph, self.residual, self.state)
        self.graph = result.graph
        self.residual = result.residual
        self.history.append(pc)

        if result.halted:
            if not self.finished:
                LOGGER.info(
                    "%s finished after %d steps, flow value %s",
                    self.algorithm.name,
                    self.steps,
                    self.graph.flow_value(),
                )
            self.finished = True
            return result

        self.pc = pc + result.pc_delta
        assert 0 <= self.pc < len(self.algorithm), (
            f"Jump {result.pc_delta} from instruction {pc} leaves the table"
        )
        LOGGER.debug(
            "%s step %d: [%d] %s -> pc %d",
            self.algorithm.name,
            self.steps,
            pc,
            instruction.code.strip(),
            self.pc,
        )
        return result

    def iter_steps(self, max_steps: Optional[int] = None) -> Iterator[Tuple[int, StepResult]]:
        """Step until the algorithm halts, yielding ``(pc, result)`` pairs.

        Raises:
            RuntimeError: If ``max_steps`` instructions ran without halting.
        """
        executed = 0
        while not self.finished:
            if max_steps is not None and executed >= max_steps:
                raise RuntimeError(
                    f"{self.algorithm.name} did not finish within {max_steps} steps"
                )
            pc = self.pc
            result = self.step()
            executed += 1
            yield pc, result

    def run(self, max_steps: Optional[int] = None) -> FlowNetwork:
        """Step until the algorithm halts and return the final flow network."""
        for _ in self.iter_steps(max_steps):
            pass
        return self.graph
